"""Runtime settings read from TABPROBE_* environment variables or a .env file."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for loading, analysis, uploads and logging.

    Each field can be set through an environment variable named after it.
    Prefix: TABPROBE_
    """

    model_config = SettingsConfigDict(
        env_prefix="TABPROBE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Analysis
    preview_rows: int = Field(
        default=5,
        ge=0,
        description="Number of leading rows copied into the analysis preview",
    )

    # Delimited text
    csv_encoding: str = Field(
        default="utf-8-sig",
        description="Text encoding for delimited sources (utf-8-sig drops a BOM)",
    )
    csv_delimiter: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Field delimiter for delimited sources",
    )

    # Uploads
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Largest accepted upload payload in bytes",
    )
    allowed_extensions: list[str] = Field(
        default_factory=lambda: [".csv", ".xlsx", ".xls"],
        description="File extensions accepted by the upload endpoint",
    )
    upload_dir: Path | None = Field(
        default=None,
        description="Parent directory for per-request upload scratch space (None = system temp)",
    )

    # API
    api_host: str = Field(default="127.0.0.1")
    api_port: int = Field(default=5000)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")  # 'json' or 'console'


@lru_cache
def get_settings() -> Settings:
    """Settings built once per process."""
    return Settings()
