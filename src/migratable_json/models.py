# SPDX-License-Identifier: MIT
"""Pydantic base class for versioned record implementations."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MigratableModel(BaseModel):
    """Base model for one version of a migratable record.

    The latest version keeps the default :meth:`upgrade`, which returns
    ``None`` and ends the upgrade chain. Every older version overrides it to
    build the next version from its own fields, for example::

        class WidgetV1(MigratableModel):
            shape: str

            def upgrade(self) -> WidgetV2:
                return WidgetV2(**self.model_dump(), color="red")

    Unknown fields are rejected so shape drift surfaces when a record loads.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def upgrade(self) -> "MigratableModel | None":
        """Return the next version of this record, or ``None`` when latest."""
        return None


__all__ = ["MigratableModel"]
