from imgdrop_core.models.entities import (
    ImageFormat,
    IngestOutcome,
    IngestResult,
    StoredEntry,
    SweepReport,
    utcnow,
)
from imgdrop_core.models.io import ExtensionPolicy, IngestOptions

__all__ = [
    "ExtensionPolicy",
    "ImageFormat",
    "IngestOptions",
    "IngestOutcome",
    "IngestResult",
    "StoredEntry",
    "SweepReport",
    "utcnow",
]
