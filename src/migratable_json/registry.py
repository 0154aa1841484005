# SPDX-License-Identifier: MIT
"""Registry of versioned record types and the JSON codecs bound to it.

A :class:`Registry` maps each ``(type token, version)`` pair to the factory
that builds that version from its fields. Deserializers walk a loaded record
forward through the family by repeatedly calling ``upgrade()`` until an
instance reports no further version. Serializers always tag output with the
identity of the class they were bound to.

Registration is expected to finish during start-up. Afterwards the registry is
only read, so concurrent reads are safe while no registration is in flight.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Callable, TypeVar, Union, cast

import logfire
from pydantic import BaseModel
from pydantic_core import from_json, to_json

from .errors import (
    InvariantViolation,
    RegistrationConflict,
    UnregisteredType,
    UnregisteredVersion,
)
from .runtime.settings import Settings
from .tokens import (
    MIGRATABLE_TYPE,
    MIGRATABLE_VERSION,
    RESERVED_KEYS,
    Registration,
    TypeToken,
)

T = TypeVar("T")
C = TypeVar("C", bound=Callable[..., Any])

Factory = Callable[..., Any]
RawRecord = Union[str, bytes, bytearray, Mapping[str, Any], None]


def _name_of(factory: Factory) -> str:
    """Return a readable name for ``factory`` used in diagnostics."""
    return getattr(factory, "__qualname__", None) or repr(factory)


def _slot_names(cls: type) -> list[str]:
    """Return the slot attribute names declared across ``cls`` and its bases."""
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in ("__dict__", "__weakref__") and name not in names:
                names.append(name)
    return names


def _fields_of(instance: Any) -> dict[str, Any]:
    """Return the public field data of ``instance`` as a new dictionary."""
    if isinstance(instance, BaseModel):
        # Aliases are what the model validates against when the record loads.
        return instance.model_dump(by_alias=True)
    if dataclasses.is_dataclass(instance) and not isinstance(instance, type):
        return dataclasses.asdict(instance)
    if isinstance(instance, Mapping):
        return dict(instance)
    fields = dict(getattr(instance, "__dict__", {}))
    for name in _slot_names(type(instance)):
        if hasattr(instance, name):
            fields[name] = getattr(instance, name)
    return fields


class Registry:
    """Versioned record types keyed by type token and version number.

    Args:
        settings: Optional settings controlling log verbosity. Defaults are
            used when omitted; the environment is not consulted.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._diagnostics = bool(settings and settings.diagnostics)
        self._by_type: dict[TypeToken, dict[int, Factory]] = {}
        # Keyed by ``id()``; the factory is kept so its id cannot be reused.
        self._stamps: dict[int, tuple[Factory, Registration]] = {}

    def register(
        self, type_token: TypeToken | str, version: int, factory: Factory
    ) -> None:
        """Record ``factory`` as version ``version`` of ``type_token``.

        Registering the same factory again is a no-op, which keeps module
        reloads harmless.

        Args:
            type_token: Family the factory belongs to. Bare strings are
                wrapped in a :class:`TypeToken`.
            version: Non-negative version number within the family.
            factory: Callable accepting the record's fields as keyword
                arguments, typically a model class.

        Raises:
            RegistrationConflict: If a different factory already holds this
                type and version.
            pydantic.ValidationError: If ``version`` is not a non-negative
                integer.
        """
        registration = Registration(type=TypeToken.of(type_token), version=version)
        token = registration.type

        by_version = self._by_type.setdefault(token, {})
        known = by_version.get(version)
        if known is None:
            by_version[version] = factory
        elif known is not factory:
            logfire.error(
                "Conflicting migratable registration",
                type=token.name,
                version=version,
                known=_name_of(known),
                factory=_name_of(factory),
            )
            raise RegistrationConflict(token, version)

        self._stamps[id(factory)] = (factory, registration)
        logfire.debug(
            "Registered migratable type",
            type=token.name,
            version=version,
            factory=_name_of(factory),
        )

    def versioned(self, type_token: TypeToken | str, version: int) -> Callable[[C], C]:
        """Return a class decorator registering the class as ``version``.

        Example::

            @registry.versioned("Widget", 1)
            class WidgetV1(MigratableModel):
                shape: str
        """

        def decorate(cls: C) -> C:
            self.register(type_token, version, cls)
            return cls

        return decorate

    def registration_of(self, constructing_type: Factory) -> Registration:
        """Return the type token and version ``constructing_type`` holds.

        Raises:
            InvariantViolation: If ``constructing_type`` was never registered
                here or its registration is missing from storage.
        """
        name = _name_of(constructing_type)
        stamp = self._stamps.get(id(constructing_type))
        if stamp is None or stamp[0] is not constructing_type:
            logfire.error("Lookup of unregistered migratable type", factory=name)
            raise InvariantViolation(
                f"{name} is not registered as a migratable type"
            )
        registration = stamp[1]

        by_version = self._by_type.get(registration.type)
        if by_version is None:
            logfire.error("Stamped migratable type has no family", factory=name)
            raise InvariantViolation(
                f"nothing registered for type {registration.type.name}"
            )
        if registration.version not in by_version:
            logfire.error("Stamped migratable version is missing", factory=name)
            raise InvariantViolation(
                f"nothing registered for type {registration.type.name} "
                f"version {registration.version}"
            )
        return registration

    def versions_of(self, type_token: TypeToken | str) -> list[int]:
        """Return the sorted version numbers registered for ``type_token``."""
        return sorted(self._by_type.get(TypeToken.of(type_token), {}))

    def deserialize(self, value_on_none: Callable[[], T]) -> Callable[[RawRecord], T]:
        """Create a deserializer producing the latest version of a type.

        Args:
            value_on_none: Called to produce the result when the serialized
                form is ``None``.

        Returns:
            A function accepting JSON text, an already-parsed mapping or
            ``None``, and returning the upgraded instance.
        """

        def deserializer(record: RawRecord) -> T:
            if record is None:
                return value_on_none()
            return cast(T, self._load(record))

        return deserializer

    def serialize(self, constructing_type: Callable[..., T]) -> Callable[[T], str]:
        """Create a serializer tagging instances as ``constructing_type``.

        The registration is resolved once, here, so a misconfigured type fails
        at wiring time rather than on the first write.

        Raises:
            InvariantViolation: If ``constructing_type`` was never registered.
        """
        registration = self.registration_of(constructing_type)
        type_name = registration.type.name
        version = registration.version

        def serializer(instance: T) -> str:
            payload = _fields_of(instance)
            payload[MIGRATABLE_TYPE] = type_name
            payload[MIGRATABLE_VERSION] = version
            return to_json(payload).decode("utf-8")

        return serializer

    def describe(self) -> list[tuple[str, int, str]]:
        """Return ``(type name, version, factory name)`` for every entry."""
        return [
            (token.name, version, _name_of(factory))
            for token, by_version in self._by_type.items()
            for version, factory in sorted(by_version.items())
        ]

    def dump(self) -> None:
        """Log every registered type and version, for debugging."""
        for type_name, version, factory_name in self.describe():
            logfire.info(
                "{type} {version} {factory}",
                type=type_name,
                version=version,
                factory=factory_name,
            )

    def _resolve(self, type_name: Any, version: Any) -> Factory:
        """Return the factory registered for a record's metadata tags."""
        by_version: dict[int, Factory] | None = None
        if isinstance(type_name, str) and type_name:
            by_version = self._by_type.get(TypeToken(name=type_name))
        if by_version is None:
            logfire.error("Record has an unregistered type", type=repr(type_name))
            raise UnregisteredType(type_name)

        # JSON booleans load as ``bool``, which would otherwise match 0 and 1.
        factory: Factory | None = None
        if isinstance(version, int) and not isinstance(version, bool):
            factory = by_version.get(version)
        if factory is None:
            logfire.error(
                "Record has an unregistered version",
                type=type_name,
                version=repr(version),
            )
            raise UnregisteredVersion(type_name, version)
        return factory

    def _load(self, record: str | bytes | bytearray | Mapping[str, Any]) -> Any:
        """Build the record's original version and upgrade it to the latest."""
        data = (
            from_json(record)
            if isinstance(record, (str, bytes, bytearray))
            else record
        )
        if not isinstance(data, Mapping):
            data = {}

        type_name = data.get(MIGRATABLE_TYPE)
        version = data.get(MIGRATABLE_VERSION)
        factory = self._resolve(type_name, version)
        fields = {key: value for key, value in data.items() if key not in RESERVED_KEYS}

        with logfire.span(
            "migratable.deserialize {type} v{version}",
            type=type_name,
            version=version,
        ):
            instance = factory(**fields)
            return self._upgrade(instance)

    def _upgrade(self, instance: Any) -> Any:
        """Walk ``instance`` forward until it reports no further version."""
        log = logfire.info if self._diagnostics else logfire.debug
        while True:
            upgrade = getattr(instance, "upgrade", None)
            if not callable(upgrade):
                return instance
            upgraded = upgrade()
            if upgraded is None:
                return instance
            log(
                "Upgraded migratable record",
                source=type(instance).__qualname__,
                target=type(upgraded).__qualname__,
            )
            instance = upgraded


__all__ = ["Factory", "RawRecord", "Registry"]
