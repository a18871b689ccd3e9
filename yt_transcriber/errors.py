"""Error types raised by the transcript pipeline.

Each error carries the process exit code the CLI reports for it.
"""


class TranscriberError(Exception):
    """Base class for every expected failure of a transcript run."""

    exit_code = 1


class InvalidUrl(TranscriberError):
    """The input is neither a recognised YouTube URL nor a bare video ID."""

    exit_code = 1


class ToolUnavailable(TranscriberError):
    """The yt-dlp executable cannot be found or launched."""

    exit_code = 1


class TranscriptUnavailable(TranscriberError):
    """No captions exist for the requested video and language."""

    exit_code = 2


class VideoUnavailable(TranscriptUnavailable):
    """The video itself is private, deleted or otherwise restricted."""


class NetworkError(TranscriberError):
    """yt-dlp reported a connectivity failure."""

    exit_code = 3


class FileWriteError(TranscriberError):
    """The rendered transcript could not be written to its destination."""

    exit_code = 4
