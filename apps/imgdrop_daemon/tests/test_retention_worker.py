import os
import time
from datetime import timedelta

from imgdrop_daemon.adapters import LocalBlobStore
from imgdrop_daemon.http.worker import RetentionSweeper


def _age(path, hours: float) -> None:
    stamp = time.time() - hours * 3600
    os.utime(path, (stamp, stamp))


def test_run_once_removes_entries_past_ttl(tmp_path) -> None:
    store = LocalBlobStore(tmp_path)
    store.write("old.png", b"old")
    store.write("fresh.png", b"fresh")
    _age(tmp_path / "old.png", 25)
    _age(tmp_path / "fresh.png", 1)
    sweeper = RetentionSweeper(store, ttl=timedelta(hours=24), interval=3600)

    report = sweeper.run_once()

    assert report.removed == ["old.png"]
    assert not store.exists("old.png")
    assert store.exists("fresh.png")


def test_background_thread_sweeps_until_stopped(tmp_path) -> None:
    store = LocalBlobStore(tmp_path)
    store.write("old.png", b"old")
    _age(tmp_path / "old.png", 48)
    sweeper = RetentionSweeper(store, ttl=timedelta(hours=24), interval=0.05)

    sweeper.start()
    try:
        deadline = time.monotonic() + 5
        while store.exists("old.png") and time.monotonic() < deadline:
            time.sleep(0.02)
        assert not store.exists("old.png")
        assert sweeper.is_running
    finally:
        sweeper.stop()

    assert not sweeper.is_running


def test_sweep_errors_do_not_stop_the_thread(tmp_path) -> None:
    calls: list[int] = []

    class _FlakyStore:
        def list_entries(self):
            calls.append(1)
            raise PermissionError(13, "Permission denied")

    sweeper = RetentionSweeper(_FlakyStore(), ttl=timedelta(hours=24), interval=0.02)
    sweeper.start()
    try:
        deadline = time.monotonic() + 5
        while len(calls) < 3 and time.monotonic() < deadline:
            time.sleep(0.02)
        assert len(calls) >= 3
        assert sweeper.is_running
    finally:
        sweeper.stop()
