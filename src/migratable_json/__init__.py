"""Persist versioned records as JSON and upgrade them when they are read.

Core components:
    Registry: Maps type tokens and version numbers to record factories and
        builds the serializers and deserializers bound to them.
    TypeToken: Stable identifier for a family of record versions.
    MigratableModel: Pydantic base class for one version of a record.

Example:
    >>> from migratable_json import MigratableModel, Registry
    >>> registry = Registry()
    >>> @registry.versioned("Widget", 1)
    ... class WidgetV1(MigratableModel):
    ...     shape: str
    >>> load = registry.deserialize(lambda: WidgetV1(shape="triangle"))
    >>> load('{"__migratable_type": "Widget", "__migratable_version": 1, "shape": "circle"}')
    WidgetV1(shape='circle')
"""

from .defaults import (
    default_registry,
    deserialize,
    register,
    registration_of,
    serialize,
    versioned_serializable,
)
from .errors import (
    InvariantViolation,
    MigratableTypeError,
    RegistrationConflict,
    UnregisteredType,
    UnregisteredVersion,
)
from .models import MigratableModel
from .registry import RawRecord, Registry
from .tokens import MIGRATABLE_TYPE, MIGRATABLE_VERSION, Registration, TypeToken

__version__ = "0.1.0"

__all__ = [
    "MIGRATABLE_TYPE",
    "MIGRATABLE_VERSION",
    "InvariantViolation",
    "MigratableModel",
    "MigratableTypeError",
    "RawRecord",
    "Registration",
    "RegistrationConflict",
    "Registry",
    "TypeToken",
    "UnregisteredType",
    "UnregisteredVersion",
    "default_registry",
    "deserialize",
    "register",
    "registration_of",
    "serialize",
    "versioned_serializable",
    "__version__",
]
