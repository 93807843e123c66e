from __future__ import annotations

from imgdrop_core.models import IngestOutcome
from pydantic import BaseModel

UPLOAD_MESSAGES: dict[IngestOutcome, str] = {
    IngestOutcome.STORED: "File uploaded successfully",
    IngestOutcome.DUPLICATE: "Duplicate file detected. Reused existing file.",
}


class UploadResponse(BaseModel):
    message: str
    file: str


class ErrorResponse(BaseModel):
    error: str
