# SPDX-License-Identifier: MIT
"""Identity values for versioned record families.

A :class:`TypeToken` names a logical record family independently of the
classes that implement its versions, so classes can be renamed freely without
invalidating previously persisted data. The token's ``name`` doubles as the
type tag written to the wire.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

MIGRATABLE_TYPE = "__migratable_type"
MIGRATABLE_VERSION = "__migratable_version"

RESERVED_KEYS = frozenset({MIGRATABLE_TYPE, MIGRATABLE_VERSION})


class TypeToken(BaseModel):
    """Stable identifier for one family of record versions."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Annotated[
        str, Field(min_length=1, description="Display name and wire type tag.")
    ]

    @classmethod
    def of(cls, value: "TypeToken | str") -> "TypeToken":
        """Return ``value`` as a token, wrapping bare names."""
        if isinstance(value, TypeToken):
            return value
        return cls(name=value)

    def __str__(self) -> str:
        return self.name


class Registration(BaseModel):
    """The identity a factory was registered under."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: TypeToken
    version: Annotated[
        int,
        Field(ge=0, strict=True, description="Version number within the family."),
    ]


__all__ = [
    "MIGRATABLE_TYPE",
    "MIGRATABLE_VERSION",
    "RESERVED_KEYS",
    "Registration",
    "TypeToken",
]
