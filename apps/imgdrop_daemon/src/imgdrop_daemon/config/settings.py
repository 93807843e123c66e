from __future__ import annotations

from datetime import timedelta
from pathlib import Path

from imgdrop_core.models import ExtensionPolicy, IngestOptions
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_host: str = "127.0.0.1"
    app_port: int = 3000
    app_data_dir: str = "./data"
    static_dir: str = "./public"

    max_upload_bytes: int = Field(default=5 * 1024 * 1024, gt=0)
    strict_webp: bool = True
    extension_policy: ExtensionPolicy = ExtensionPolicy.VERBATIM

    retention_ttl_seconds: int = Field(default=24 * 60 * 60, gt=0)
    sweep_interval_seconds: float = Field(default=60 * 60, gt=0)
    sweeper_enabled: bool = True

    log_level: str = "INFO"
    log_format: str = "text"

    @property
    def data_dir(self) -> Path:
        return Path(self.app_data_dir).resolve()

    @property
    def upload_path(self) -> Path:
        return self.data_dir / "uploads"

    @property
    def static_path(self) -> Path:
        return Path(self.static_dir).resolve()

    @property
    def retention_ttl(self) -> timedelta:
        return timedelta(seconds=self.retention_ttl_seconds)

    def ensure_dirs(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.upload_path.mkdir(parents=True, exist_ok=True)

    def ingest_options(self) -> IngestOptions:
        return IngestOptions(
            max_bytes=self.max_upload_bytes,
            strict_webp=self.strict_webp,
            extension_policy=self.extension_policy,
        )
