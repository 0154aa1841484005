"""Telemetry helpers for migratable records.

Exports:
    init_logfire: Configure Pydantic Logfire instrumentation.
    init_from_settings: Configure Logfire from :class:`Settings`.
"""

from .monitoring import init_from_settings, init_logfire

__all__ = ["init_logfire", "init_from_settings"]
