from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class ExtensionPolicy(str, Enum):
    VERBATIM = "verbatim"
    DETECTED = "detected"


class IngestOptions(BaseModel):
    max_bytes: int | None = Field(default=None, ge=0)
    strict_webp: bool = False
    extension_policy: ExtensionPolicy = ExtensionPolicy.VERBATIM
