# SPDX-License-Identifier: MIT
"""Configuration for the registry's logging behaviour.

This module exposes :class:`Settings`, a ``pydantic-settings`` model populated
from environment variables prefixed with ``MJ_`` and, when present, a ``.env``
file in the working directory. The merged configuration is validated before
use.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["fatal", "error", "warn", "notice", "info", "debug", "trace"]


class Settings(BaseSettings):
    """Settings shared by registries and telemetry setup."""

    log_level: LogLevel = Field(
        "warn", description="Minimum level for console and telemetry output."
    )
    logfire_token: str | None = Field(
        None, description="Logfire authentication token, if available.", repr=False
    )
    service_name: str = Field(
        "migratable-json",
        min_length=1,
        description="Service name reported to Logfire.",
    )
    # Upgrade steps are logged at debug level unless diagnostics are enabled.
    diagnostics: bool = Field(
        False, description="Log every upgrade step at info level."
    )

    model_config = SettingsConfigDict(env_prefix="MJ_", extra="ignore")


def load_settings(**overrides: Any) -> Settings:
    """Load and validate settings.

    Values come from ``MJ_`` environment variables and a ``.env`` file in the
    working directory when one exists. Keyword ``overrides`` take precedence
    over both.

    Args:
        **overrides: Explicit setting values.

    Returns:
        Settings: Fully validated configuration.

    Raises:
        RuntimeError: If any value is invalid.
    """
    env_file_path = Path(".env")
    env_file = env_file_path if env_file_path.exists() else None
    try:
        return Settings(_env_file=env_file, **overrides)
    except ValidationError as exc:
        # Summarise validation issues so the caller receives clear feedback.
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise RuntimeError(f"Invalid configuration: {details}") from exc


__all__ = ["LogLevel", "Settings", "load_settings"]
