import json

import pytest

from conftest import FakeSource, VIDEO_ID
from yt_transcriber.errors import InvalidUrl, NetworkError
from yt_transcriber.models.transcript import Segment, Transcript
from yt_transcriber.services.transcriber import TranscriberService


def test_run_normalizes_url_before_fetch(fake_source):
    service = TranscriberService(fake_source)
    out = service.run(f"https://youtu.be/{VIDEO_ID}", language="de", fmt="txt")
    assert fake_source.calls == [(VIDEO_ID, "de")]
    assert out == "[00:01] Hello\n[00:04] World\n"


def test_run_json_uses_requested_language(fake_source):
    data = json.loads(TranscriberService(fake_source).run(VIDEO_ID, language="es", fmt="json"))
    assert data["language"] == "es"
    assert data["video_id"] == VIDEO_ID


def test_invalid_url_never_reaches_source(fake_source):
    with pytest.raises(InvalidUrl):
        TranscriberService(fake_source).run("https://example.com/video", fmt="srt")
    assert fake_source.calls == []


def test_source_errors_propagate():
    source = FakeSource(error=NetworkError("offline"))
    with pytest.raises(NetworkError):
        TranscriberService(source).run(VIDEO_ID)
    assert len(source.calls) == 1


def test_timestamp_style_reaches_txt_renderer():
    long = Transcript(video_id=VIDEO_ID, language="en", segments=[Segment(text="late", start=3725.0, end=3726.0)])
    assert TranscriberService(FakeSource(long), timestamp_style="hours").run(VIDEO_ID) == "[1:02:05] late\n"
    assert TranscriberService(FakeSource(long), timestamp_style="minutes").run(VIDEO_ID) == "[62:05] late\n"
