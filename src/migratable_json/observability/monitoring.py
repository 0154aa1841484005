# SPDX-License-Identifier: MIT
"""Helpers for enabling Pydantic Logfire telemetry."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import logfire

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from ..runtime.settings import LogLevel, Settings


def _mask_token(value: str | None) -> str | None:
    """Return a masked representation of ``value`` for safe logging."""

    if not value:
        return None
    return f"{value[:4]}..."


def init_logfire(
    token: str | None = None,
    min_log_level: "LogLevel" = "warn",
    service_name: str = "migratable-json",
) -> None:
    """Configure Logfire and enable pydantic instrumentation.

    Args:
        token: Optional Logfire API token. If omitted, ``MJ_LOGFIRE_TOKEN`` from
            the environment is used. Missing tokens keep telemetry local.
        min_log_level: Minimum level for console and telemetry output.
        service_name: Name reported with every span and log.
    """

    key = token or os.getenv("MJ_LOGFIRE_TOKEN")
    masked = _mask_token(key)
    logfire.debug("Configuring logfire", token=masked)
    logfire.configure(
        token=key,
        send_to_logfire="if-token-present",
        service_name=service_name,
        console=logfire.ConsoleOptions(
            min_log_level=min_log_level,
            show_project_link=False,
            verbose=True,
        ),
        min_level=min_log_level,
    )

    instrument = getattr(logfire, "instrument_pydantic", None)
    if instrument:
        instrument()


def init_from_settings(settings: "Settings") -> None:
    """Configure Logfire from validated ``settings``."""

    init_logfire(
        settings.logfire_token,
        settings.log_level,
        service_name=settings.service_name,
    )
