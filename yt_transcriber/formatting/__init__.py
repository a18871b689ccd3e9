"""Registry of output formatters for transcripts.

Each format name maps to a ``FormatterSpec``; ``render`` is the single entry
point the pipeline uses.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from yt_transcriber.models.transcript import OutputFormat, Transcript

from ._json import to_json
from ._srt import to_srt
from ._txt import to_txt


@dataclass
class FormatterSpec:
    """Metadata and function for a specific output format.

    Attributes:
        format_func: Converts a Transcript to a string.
        uses_timestamp_flag: Whether ``include_timestamps`` changes the output.
        file_extension: The file extension for this format (including the dot).
    """

    format_func: Callable[..., str]
    uses_timestamp_flag: bool
    file_extension: str


FORMATTERS: dict[str, FormatterSpec] = {
    OutputFormat.TXT.value: FormatterSpec(
        format_func=to_txt,
        uses_timestamp_flag=True,
        file_extension=".txt",
    ),
    OutputFormat.SRT.value: FormatterSpec(
        format_func=to_srt,
        uses_timestamp_flag=False,
        file_extension=".srt",
    ),
    OutputFormat.JSON.value: FormatterSpec(
        format_func=to_json,
        uses_timestamp_flag=False,
        file_extension=".json",
    ),
}


def get_formatter_spec(format_name: Union[str, OutputFormat]) -> FormatterSpec:
    """Return the FormatterSpec for a case-insensitive format name.

    Raises:
        ValueError: If the format is not supported.
    """
    name = format_name.value if isinstance(format_name, OutputFormat) else str(format_name)
    spec = FORMATTERS.get(name.lower())
    if not spec:
        supported = list(FORMATTERS.keys())
        raise ValueError(f"Unsupported format: '{format_name}'. Supported formats are: {supported}")
    return spec


def get_formatter(format_name: Union[str, OutputFormat]) -> Callable[..., str]:
    return get_formatter_spec(format_name).format_func


def render(
    transcript: Transcript,
    format_name: Union[str, OutputFormat],
    include_timestamps: bool = True,
    **kwargs: object,
) -> str:
    """Render ``transcript`` in the requested format.

    ``include_timestamps`` only affects plain text. Extra keyword arguments
    (``timestamp_style``, ``now``) are passed through to the formatter.
    """
    return get_formatter(format_name)(transcript, include_timestamps=include_timestamps, **kwargs)
