from __future__ import annotations

import logging

from imgdrop_core.errors import (
    FileTooLargeError,
    InvalidContentError,
    InvalidStorageKeyError,
    NoFileError,
    StorageError,
)
from imgdrop_core.models import ExtensionPolicy, IngestOptions, IngestOutcome, IngestResult
from imgdrop_core.ports import BlobStore
from imgdrop_core.services import detect_format, extension_for, extension_of, fingerprint, storage_key

logger = logging.getLogger(__name__)


def ingest_upload(
    *,
    content: bytes | None,
    filename: str | None,
    blob_store: BlobStore,
    options: IngestOptions | None = None,
) -> IngestResult:
    """Validate, address and persist one uploaded buffer.

    Identical content under the same extension is written at most once; a
    second upload returns ``IngestOutcome.DUPLICATE`` without touching
    storage. Concurrent uploads of the same content may both write, which is
    harmless because the store writes atomically and the bytes are identical.
    """
    opts = options or IngestOptions()

    if content is None:
        raise NoFileError()
    if opts.max_bytes is not None and len(content) > opts.max_bytes:
        raise FileTooLargeError(opts.max_bytes)

    image_format = detect_format(content, strict_webp=opts.strict_webp)
    if image_format is None:
        raise InvalidContentError()

    if opts.extension_policy is ExtensionPolicy.DETECTED:
        extension = extension_for(image_format)
    else:
        extension = extension_of(filename or "")
    key = storage_key(fingerprint(content), extension)

    try:
        if blob_store.exists(key):
            logger.info("Duplicate upload reused existing file", extra={"key": key})
            return IngestResult(
                outcome=IngestOutcome.DUPLICATE,
                key=key,
                size_bytes=len(content),
                image_format=image_format,
            )
        blob_store.write(key, content)
    except (OSError, InvalidStorageKeyError) as exc:
        raise StorageError(key) from exc

    logger.info("Stored upload", extra={"key": key})
    return IngestResult(
        outcome=IngestOutcome.STORED,
        key=key,
        size_bytes=len(content),
        image_format=image_format,
    )
