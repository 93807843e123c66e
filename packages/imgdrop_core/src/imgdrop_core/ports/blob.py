from collections.abc import Iterator
from typing import Protocol

from imgdrop_core.models import StoredEntry


class BlobStore(Protocol):
    """Durable key -> bytes store addressed by StorageKey.

    ``write`` must be atomic per key: a concurrent reader sees either nothing
    or the complete payload. ``remove`` is idempotent.
    """

    def exists(self, key: str) -> bool: ...

    def write(self, key: str, data: bytes) -> None: ...

    def read(self, key: str) -> bytes: ...

    def list_entries(self) -> Iterator[StoredEntry]: ...

    def remove(self, key: str) -> bool: ...
