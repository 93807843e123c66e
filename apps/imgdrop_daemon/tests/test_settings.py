import logging
from datetime import timedelta

from imgdrop_core.models import ExtensionPolicy
from imgdrop_daemon.config import Settings
from imgdrop_daemon.observability import JSONFormatter


def test_settings_defaults(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    settings = Settings()

    assert settings.max_upload_bytes == 5 * 1024 * 1024
    assert settings.retention_ttl == timedelta(hours=24)
    assert settings.sweep_interval_seconds == 3600
    assert settings.extension_policy is ExtensionPolicy.VERBATIM
    assert settings.upload_path == tmp_path.resolve() / "data" / "uploads"


def test_settings_from_environment(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RETENTION_TTL_SECONDS", "60")
    monkeypatch.setenv("EXTENSION_POLICY", "detected")

    settings = Settings()
    settings.ensure_dirs()
    options = settings.ingest_options()

    assert settings.upload_path.is_dir()
    assert settings.retention_ttl == timedelta(seconds=60)
    assert options.extension_policy is ExtensionPolicy.DETECTED
    assert options.max_bytes == settings.max_upload_bytes


def test_json_formatter_includes_key() -> None:
    record = logging.LogRecord("imgdrop", logging.INFO, __file__, 1, "Stored upload", None, None)
    record.key = "abc.png"

    formatted = JSONFormatter().format(record)

    assert '"key": "abc.png"' in formatted
    assert '"message": "Stored upload"' in formatted
