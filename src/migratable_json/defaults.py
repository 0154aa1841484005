# SPDX-License-Identifier: MIT
"""Process-wide default registry and its bound conveniences.

Applications that need several independent registries, and tests, should
construct :class:`~migratable_json.registry.Registry` directly. The functions
here are a shorthand for the common single-registry case::

    @versioned_serializable("Widget", 2)
    class WidgetV2(MigratableModel):
        shape: str
        color: str

    from_json = deserialize(lambda: WidgetV2(shape="rectangle", color="blue"))
    to_json = serialize(WidgetV2)
"""

from __future__ import annotations

from .registry import Registry

default_registry = Registry()

register = default_registry.register
versioned_serializable = default_registry.versioned
deserialize = default_registry.deserialize
serialize = default_registry.serialize
registration_of = default_registry.registration_of

__all__ = [
    "default_registry",
    "deserialize",
    "register",
    "registration_of",
    "serialize",
    "versioned_serializable",
]
