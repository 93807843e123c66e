from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(UTC)


class ImageFormat(str, Enum):
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    WEBP = "webp"


class IngestOutcome(str, Enum):
    STORED = "stored"
    DUPLICATE = "duplicate"


class StoredEntry(BaseModel):
    key: str
    modified_at: datetime
    size_bytes: int = 0


class IngestResult(BaseModel):
    outcome: IngestOutcome
    key: str
    size_bytes: int
    image_format: ImageFormat


class SweepReport(BaseModel):
    started_at: datetime = Field(default_factory=utcnow)
    examined: int = 0
    removed: list[str] = Field(default_factory=list)
    failed: dict[str, str] = Field(default_factory=dict)
