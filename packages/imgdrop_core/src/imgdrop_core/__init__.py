from imgdrop_core.models import (
    ExtensionPolicy,
    ImageFormat,
    IngestOptions,
    IngestOutcome,
    IngestResult,
    StoredEntry,
    SweepReport,
)
from imgdrop_core.pipelines import ingest_upload, sweep_expired

__all__ = [
    "ExtensionPolicy",
    "ImageFormat",
    "IngestOptions",
    "IngestOutcome",
    "IngestResult",
    "StoredEntry",
    "SweepReport",
    "ingest_upload",
    "sweep_expired",
]
