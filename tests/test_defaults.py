# SPDX-License-Identifier: MIT
"""Tests for the module-level conveniences backed by the default registry."""

from __future__ import annotations

import json
from uuid import uuid4

import migratable_json
from migratable_json import (
    MIGRATABLE_TYPE,
    MIGRATABLE_VERSION,
    MigratableModel,
    Registry,
    default_registry,
    deserialize,
    registration_of,
    serialize,
    versioned_serializable,
)


def test_default_registry_is_a_registry() -> None:
    assert isinstance(default_registry, Registry)
    assert migratable_json.register.__self__ is default_registry


def test_declaring_versions_is_enough_to_read_and_write() -> None:
    # Unique name so repeated runs never collide in the shared registry.
    name = f"Profile-{uuid4()}"

    @versioned_serializable(name, 2)
    class ProfileV2(MigratableModel):
        handle: str
        display_name: str

    @versioned_serializable(name, 1)
    class ProfileV1(MigratableModel):
        handle: str

        def upgrade(self) -> ProfileV2:
            return ProfileV2(handle=self.handle, display_name=self.handle.title())

    from_json = deserialize(lambda: ProfileV2(handle="", display_name=""))
    to_json = serialize(ProfileV2)

    upgraded = from_json({MIGRATABLE_TYPE: name, MIGRATABLE_VERSION: 1, "handle": "ada"})

    assert upgraded == ProfileV2(handle="ada", display_name="Ada")
    assert json.loads(to_json(upgraded)) == {
        "handle": "ada",
        "display_name": "Ada",
        MIGRATABLE_TYPE: name,
        MIGRATABLE_VERSION: 2,
    }
    assert registration_of(ProfileV1).version == 1
    assert default_registry.versions_of(name) == [1, 2]
