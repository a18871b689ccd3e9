import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

from yt_transcriber.core.source import TranscriptSource
from yt_transcriber.errors import TranscriberError
from yt_transcriber.models.transcript import Segment, Transcript

VIDEO_ID = "dQw4w9WgXcQ"


class FakeSource(TranscriptSource):
    """In-memory transcript source recording every fetch."""

    def __init__(self, transcript=None, error: TranscriberError = None):
        self.transcript = transcript
        self.error = error
        self.calls = []

    def fetch(self, video_id, language):
        self.calls.append((video_id, language))
        if self.error is not None:
            raise self.error
        return self.transcript.model_copy(update={"video_id": video_id, "language": language})


@pytest.fixture
def transcript() -> Transcript:
    return Transcript(
        video_id=VIDEO_ID,
        language="en",
        segments=[
            Segment(text="Hello", start=1.0, end=4.5),
            Segment(text="World", start=4.5, end=11.2),
        ],
    )


@pytest.fixture
def fake_source(transcript) -> FakeSource:
    return FakeSource(transcript)
