"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) without polluting
  the CLI.
- Lets the CLI and services read paths and log level the same way.

Encoding and output choices are not settings: they are asked for on every
run and default to JSON / console.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, `.env`) so services only get
      clean values.
    - One configuration contract for the CLI and the services.
    """

    model_config = SettingsConfigDict(
        env_prefix="MENAGERIE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    data_dir: Path = Field(
        default=Path("."),
        description="Directory for animals.*, shapes.* and the render file.",
    )
    render_filename: str = Field(
        default="render.txt",
        min_length=1,
        description="File name used when shapes are rendered to a file.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level (CRITICAL/ERROR/WARNING/INFO/DEBUG).",
    )
    show_banner: bool = Field(
        default=True,
        description="Print the welcome banner before prompting.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
