"""Formatter for JSON (.json) output."""

from datetime import datetime, timezone
from typing import Optional

from yt_transcriber.models.document import DocumentMetadata, SegmentRecord, TranscriptDocument
from yt_transcriber.models.transcript import Transcript


def build_document(transcript: Transcript, now: Optional[datetime] = None) -> TranscriptDocument:
    """Build the JSON document model; ``now`` defaults to the current UTC time."""
    now = now or datetime.now(timezone.utc)
    segments = [
        SegmentRecord(
            index=i,
            text=segment.text,
            start_seconds=segment.start,
            end_seconds=segment.end,
            duration_seconds=segment.end - segment.start,
        )
        for i, segment in enumerate(transcript.segments)
    ]
    return TranscriptDocument(
        video_id=transcript.video_id,
        language=transcript.language,
        segments=segments,
        metadata=DocumentMetadata(
            total_segments=len(segments),
            extracted_at=now.astimezone(timezone.utc).isoformat(),
        ),
    )


def to_json(transcript: Transcript, now: Optional[datetime] = None, **kwargs: object) -> str:
    """Serialize a transcript as pretty-printed JSON with a trailing newline."""
    return build_document(transcript, now=now).model_dump_json(indent=2) + "\n"
