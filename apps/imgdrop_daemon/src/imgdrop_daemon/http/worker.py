from __future__ import annotations

import logging
import threading
from datetime import timedelta

from imgdrop_core.models import SweepReport
from imgdrop_core.pipelines import sweep_expired
from imgdrop_core.ports import BlobStore

logger = logging.getLogger(__name__)


class RetentionSweeper:
    """Background thread that evicts stored files older than ``ttl``.

    The first sweep runs one ``interval`` after ``start()``. A failed sweep is
    logged and retried on the next tick.
    """

    def __init__(self, blob_store: BlobStore, *, ttl: timedelta, interval: float) -> None:
        self._blob_store = blob_store
        self._ttl = ttl
        self._interval = interval
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._run, name="retention-sweeper", daemon=True)

    @property
    def is_running(self) -> bool:
        return self._thread.is_alive()

    def start(self) -> None:
        if not self._thread.is_alive():
            self._stop_event.clear()
            self._thread = threading.Thread(target=self._run, name="retention-sweeper", daemon=True)
            self._thread.start()

    def stop(self) -> None:
        self._stop_event.set()
        if self._thread.is_alive():
            self._thread.join(timeout=2)

    def run_once(self) -> SweepReport:
        report = sweep_expired(self._blob_store, ttl=self._ttl)
        if report.removed or report.failed:
            logger.info(
                "Sweep finished",
                extra={"examined": report.examined, "removed": len(report.removed), "failed": len(report.failed)},
            )
        return report

    def _run(self) -> None:
        while not self._stop_event.wait(self._interval):
            try:
                self.run_once()
            except Exception:  # noqa: BLE001
                logger.exception("Retention sweep failed")
