# SPDX-License-Identifier: MIT
"""Exception types raised while registering, reading and writing records.

Every error derives from :class:`MigratableTypeError` so callers can catch the
whole family at an application boundary. None of them are retried or
downgraded internally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from .tokens import TypeToken


class MigratableTypeError(Exception):
    """Base class for migratable record errors."""


class UnregisteredType(MigratableTypeError):
    """No version family is registered under a record's type tag."""

    def __init__(self, type_name: Any) -> None:
        self.type_name = type_name
        super().__init__(f"no classes registered for type {type_name}")


class UnregisteredVersion(MigratableTypeError):
    """The type tag resolves but its version tag has no registration."""

    def __init__(self, type_name: str, version: Any) -> None:
        self.type_name = type_name
        self.version = version
        super().__init__(
            f"no classes registered for type {type_name} version {version}"
        )


class RegistrationConflict(MigratableTypeError):
    """A different factory already claims the same type and version."""

    def __init__(self, type_token: "TypeToken", version: int) -> None:
        self.type_token = type_token
        self.version = version
        super().__init__(
            f"conflicting registration for {type_token.name} version {version}"
        )


class InvariantViolation(MigratableTypeError):
    """The registry was used in a way a correctly wired program never does."""


__all__ = [
    "MigratableTypeError",
    "UnregisteredType",
    "UnregisteredVersion",
    "RegistrationConflict",
    "InvariantViolation",
]
