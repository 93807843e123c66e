from imgdrop_core.pipelines.ingest import ingest_upload
from imgdrop_core.pipelines.retention import sweep_expired

__all__ = [
    "ingest_upload",
    "sweep_expired",
]
