from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path

from imgdrop_core.errors import BlobNotFoundError, InvalidStorageKeyError
from imgdrop_core.models import StoredEntry

logger = logging.getLogger(__name__)

_TMP_PREFIX = "."


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class LocalBlobStore:
    """Flat directory store: one file per key, named by the key itself.

    Writes go to a hidden temp file in the same directory and are moved into
    place with ``os.replace``, so readers only ever see complete files.
    Stored files get the umask-default mode rather than mkstemp's 0600.
    """

    def __init__(self, base_dir: str | Path) -> None:
        self._base_dir = Path(base_dir)
        self._base_dir.mkdir(parents=True, exist_ok=True)
        self._file_mode = _default_file_mode()

    def _path(self, key: str) -> Path:
        if not key or key.startswith(_TMP_PREFIX) or "/" in key or "\\" in key or "\x00" in key:
            raise InvalidStorageKeyError(key)
        root = self._base_dir.resolve()
        candidate = (self._base_dir / key).resolve()
        if candidate.parent != root:
            raise InvalidStorageKeyError(key)
        return candidate

    def exists(self, key: str) -> bool:
        return self._path(key).is_file()

    def write(self, key: str, data: bytes) -> None:
        dest = self._path(key)
        fd, tmp_path = tempfile.mkstemp(prefix=f"{_TMP_PREFIX}{dest.name}.", suffix=".tmp", dir=dest.parent)
        try:
            with os.fdopen(fd, "wb") as handle:
                os.fchmod(handle.fileno(), self._file_mode)
                handle.write(data)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, dest)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def read(self, key: str) -> bytes:
        try:
            return self._path(key).read_bytes()
        except FileNotFoundError as exc:
            raise BlobNotFoundError(key) from exc

    def list_entries(self) -> Iterator[StoredEntry]:
        with os.scandir(self._base_dir) as it:
            for item in it:
                if item.name.startswith(_TMP_PREFIX):
                    continue
                try:
                    if not item.is_file(follow_symlinks=False):
                        continue
                    stat = item.stat(follow_symlinks=False)
                except FileNotFoundError:
                    continue
                except OSError as exc:
                    logger.warning("Skipping unreadable entry %s: %s", item.name, exc, extra={"key": item.name})
                    continue
                yield StoredEntry(
                    key=item.name,
                    modified_at=datetime.fromtimestamp(stat.st_mtime, tz=UTC),
                    size_bytes=stat.st_size,
                )

    def remove(self, key: str) -> bool:
        try:
            self._path(key).unlink()
        except FileNotFoundError:
            return False
        return True
