from typing import List
from pydantic import BaseModel

class SegmentRecord(BaseModel):
    index: int
    text: str
    start_seconds: float
    end_seconds: float
    duration_seconds: float

class DocumentMetadata(BaseModel):
    total_segments: int
    extracted_at: str  # ISO-8601, UTC

class TranscriptDocument(BaseModel):
    video_id: str
    language: str
    segments: List[SegmentRecord]
    metadata: DocumentMetadata
