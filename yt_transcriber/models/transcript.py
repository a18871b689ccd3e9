from enum import Enum
from typing import Tuple
from pydantic import BaseModel, ConfigDict, model_validator

class OutputFormat(str, Enum):
    TXT = "txt"
    SRT = "srt"
    JSON = "json"

class Segment(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    start: float
    end: float

    @model_validator(mode="after")
    def _check_offsets(self):
        if self.start < 0:
            raise ValueError(f"segment start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"segment end {self.end} is before start {self.start}")
        return self

    @property
    def duration(self) -> float:
        return self.end - self.start

class Transcript(BaseModel):
    model_config = ConfigDict(frozen=True)

    video_id: str
    language: str
    segments: Tuple[Segment, ...]
