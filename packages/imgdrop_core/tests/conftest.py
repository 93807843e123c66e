from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

import pytest
from imgdrop_core.errors import BlobNotFoundError
from imgdrop_core.models import StoredEntry, utcnow


class InMemoryBlobStore:
    def __init__(self) -> None:
        self.blobs: dict[str, bytes] = {}
        self.modified: dict[str, datetime] = {}
        self.writes: list[str] = []

    def exists(self, key: str) -> bool:
        return key in self.blobs

    def write(self, key: str, data: bytes) -> None:
        self.writes.append(key)
        self.blobs[key] = bytes(data)
        self.modified[key] = utcnow()

    def read(self, key: str) -> bytes:
        if key not in self.blobs:
            raise BlobNotFoundError(key)
        return self.blobs[key]

    def list_entries(self) -> Iterator[StoredEntry]:
        for key in list(self.blobs):
            yield StoredEntry(key=key, modified_at=self.modified[key], size_bytes=len(self.blobs[key]))

    def remove(self, key: str) -> bool:
        self.modified.pop(key, None)
        return self.blobs.pop(key, None) is not None


@pytest.fixture
def blob_store() -> InMemoryBlobStore:
    return InMemoryBlobStore()
