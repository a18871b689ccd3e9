"""Formatter for plain text (.txt) output."""

from yt_transcriber.models.transcript import Transcript


def format_bracket_timestamp(seconds: float, style: str = "minutes") -> str:
    """Format a start offset as ``[MM:SS]``, truncated to whole seconds.

    With ``style="minutes"`` minutes grow past 59 (``[75:03]``); with
    ``style="hours"`` offsets of an hour or more render as ``[H:MM:SS]``.
    """
    total = int(seconds)
    m, s = divmod(total, 60)
    if style == "hours" and m >= 60:
        h, m = divmod(m, 60)
        return f"[{h}:{m:02d}:{s:02d}]"
    return f"[{m:02d}:{s:02d}]"


def to_txt(
    transcript: Transcript,
    include_timestamps: bool = True,
    timestamp_style: str = "minutes",
    **kwargs: object,
) -> str:
    """Render one line per segment, each ending with a newline.

    Parameters:
        transcript: The transcript to render.
        include_timestamps: Prefix each line with the segment's ``[MM:SS]`` start.
        timestamp_style: ``"minutes"`` or ``"hours"``, see ``format_bracket_timestamp``.
        **kwargs: Ignored.

    Returns:
        str: The rendered text; empty for a transcript without segments.
    """
    lines = []
    for segment in transcript.segments:
        if include_timestamps:
            lines.append(f"{format_bracket_timestamp(segment.start, timestamp_style)} {segment.text}")
        else:
            lines.append(segment.text)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
