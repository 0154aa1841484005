"""Runtime configuration for migratable records."""

from .settings import LogLevel, Settings, load_settings

__all__ = ["LogLevel", "Settings", "load_settings"]
