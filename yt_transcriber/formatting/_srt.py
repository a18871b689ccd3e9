"""Formatter for SubRip Subtitle format (.srt)."""

from yt_transcriber.models.transcript import Transcript


def _format_timestamp(seconds: float) -> str:
    """Format a non-negative offset as ``HH:MM:SS,mmm``.

    The offset is rounded to the nearest millisecond first, so binary float
    noise (``11.2`` stored as ``11.1999...``) does not lose a millisecond.
    """
    if seconds < 0:
        raise ValueError(f"non-negative timestamp required, got {seconds}")
    total_ms = int(round(seconds * 1000))
    s, ms = divmod(total_ms, 1000)
    m, s = divmod(s, 60)
    h, m = divmod(m, 60)
    return f"{h:02d}:{m:02d}:{s:02d},{ms:03d}"


def to_srt(transcript: Transcript, **kwargs: object) -> str:
    """Convert a ``Transcript`` to an SRT formatted string.

    Each cue is an index line (1-based), a time range line, the text line and
    a blank separator line.
    """
    srt_lines = []
    for i, segment in enumerate(transcript.segments, start=1):
        srt_lines.append(str(i))
        srt_lines.append(f"{_format_timestamp(segment.start)} --> {_format_timestamp(segment.end)}")
        srt_lines.append(segment.text)
        srt_lines.append("")
    return "".join(f"{line}\n" for line in srt_lines)
