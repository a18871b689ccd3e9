from typing import Optional, Union
from yt_transcriber.config import settings
from yt_transcriber.core.source import TranscriptSource
from yt_transcriber.core.url import extract_video_id
from yt_transcriber.formatting import render
from yt_transcriber.models.transcript import OutputFormat, Transcript
from yt_transcriber.providers.youtube import YtDlpSource
from yt_transcriber.utils.logger import logger

class TranscriberService:
    def __init__(self, source: Optional[TranscriptSource] = None, timestamp_style: Optional[str] = None):
        self.source = source or YtDlpSource()
        self.timestamp_style = timestamp_style or settings.TIMESTAMP_STYLE

    def fetch(self, url: str, language: str) -> Transcript:
        video_id = extract_video_id(url)
        logger.info(f"Resolved video id: {video_id}")
        return self.source.fetch(video_id, language)

    def run(
        self,
        url: str,
        language: str = "en",
        fmt: Union[str, OutputFormat] = OutputFormat.TXT,
        include_timestamps: bool = True,
    ) -> str:
        """Normalize the URL, fetch the transcript and render it."""
        transcript = self.fetch(url, language)
        logger.info(f"Rendering {len(transcript.segments)} segments as {getattr(fmt, 'value', fmt)}")
        return render(
            transcript,
            fmt,
            include_timestamps=include_timestamps,
            timestamp_style=self.timestamp_style,
        )
