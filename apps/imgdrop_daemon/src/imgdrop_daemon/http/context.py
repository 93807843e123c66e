from __future__ import annotations

from dataclasses import dataclass

from imgdrop_core.models import IngestOptions
from imgdrop_core.ports import BlobStore

from imgdrop_daemon.config import Settings
from imgdrop_daemon.http.worker import RetentionSweeper


@dataclass
class AppContext:
    settings: Settings
    blob_store: BlobStore
    ingest_options: IngestOptions
    sweeper: RetentionSweeper
