from __future__ import annotations

import logging
from datetime import datetime, timedelta

from imgdrop_core.errors import ImgDropError
from imgdrop_core.models import SweepReport, utcnow
from imgdrop_core.ports import BlobStore

logger = logging.getLogger(__name__)


def sweep_expired(
    blob_store: BlobStore,
    *,
    ttl: timedelta,
    now: datetime | None = None,
) -> SweepReport:
    """Remove every entry whose age exceeds ``ttl``.

    Ages are measured against ``now`` fixed before enumeration, so entries
    written while the sweep runs are never candidates. A failure on one entry
    is logged and recorded in the report; the remaining entries are still
    processed. Errors raised while enumerating propagate.
    """
    started_at = now or utcnow()
    report = SweepReport(started_at=started_at)

    for entry in blob_store.list_entries():
        report.examined += 1
        if started_at - entry.modified_at <= ttl:
            continue
        try:
            blob_store.remove(entry.key)
        except (OSError, ImgDropError) as exc:
            logger.warning("Failed to remove expired file %s: %s", entry.key, exc, extra={"key": entry.key})
            report.failed[entry.key] = str(exc)
            continue
        logger.info("Deleted old file: %s", entry.key, extra={"key": entry.key})
        report.removed.append(entry.key)

    return report
