# SPDX-License-Identifier: MIT
"""Test configuration for migratable-json.

Keeps Logfire local, isolates ``MJ_`` environment variables and provides the
Widget example family used across the suite.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Literal

import logfire
import pytest

from migratable_json import MigratableModel, Registry, TypeToken

Shape = Literal["circle", "triangle", "rectangle"]
Color = Literal["red", "blue", "green"]

WIDGET = TypeToken(name="Widget")


class WidgetV2(MigratableModel):
    """Latest Widget version; adds ``color``."""

    shape: Shape
    color: Color

    @classmethod
    def default_value(cls) -> "WidgetV2":
        return cls(shape="rectangle", color="blue")


class WidgetV1(MigratableModel):
    """Original Widget version."""

    shape: Shape

    @classmethod
    def default_value(cls) -> "WidgetV1":
        return cls(shape="triangle")

    def upgrade(self) -> WidgetV2:
        return WidgetV2(**self.model_dump(), color="red")


@pytest.fixture(scope="session", autouse=True)
def _local_logfire():
    """Configure Logfire without exporting or printing anything."""

    logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch):
    """Ensure ``MJ_`` variables from the host do not leak into tests."""

    for name in (
        "MJ_LOG_LEVEL",
        "MJ_LOGFIRE_TOKEN",
        "MJ_SERVICE_NAME",
        "MJ_DIAGNOSTICS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def widgets() -> SimpleNamespace:
    """Provide a fresh registry holding both Widget versions."""

    registry = Registry()
    registry.register(WIDGET, 1, WidgetV1)
    registry.register(WIDGET, 2, WidgetV2)
    return SimpleNamespace(registry=registry, token=WIDGET, V1=WidgetV1, V2=WidgetV2)
