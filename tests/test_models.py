import pytest
from pydantic import ValidationError

from yt_transcriber.models.transcript import OutputFormat, Segment, Transcript


def test_segment_duration():
    assert Segment(text="x", start=1.5, end=4.0).duration == 2.5


def test_zero_length_segment_allowed():
    assert Segment(text="x", start=2.0, end=2.0).duration == 0


@pytest.mark.parametrize("start, end", [(-0.1, 1.0), (5.0, 4.9)])
def test_segment_offsets_validated(start, end):
    with pytest.raises(ValidationError):
        Segment(text="x", start=start, end=end)


def test_transcript_is_immutable(transcript):
    with pytest.raises(ValidationError):
        transcript.language = "de"
    assert isinstance(transcript.segments, tuple)


def test_output_format_values():
    assert [f.value for f in OutputFormat] == ["txt", "srt", "json"]
    assert OutputFormat("srt") is OutputFormat.SRT


def test_transcript_keeps_source_order():
    segments = [Segment(text="b", start=5, end=6), Segment(text="a", start=1, end=2)]
    t = Transcript(video_id="dQw4w9WgXcQ", language="en", segments=segments)
    assert [s.text for s in t.segments] == ["b", "a"]
