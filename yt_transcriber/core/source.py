from abc import ABC, abstractmethod
from yt_transcriber.models.transcript import Transcript

class TranscriptSource(ABC):
    @abstractmethod
    def fetch(self, video_id: str, language: str) -> Transcript:
        """Fetch the transcript of one video in one language.

        Raises ToolUnavailable, TranscriptUnavailable or NetworkError.
        """
        pass
