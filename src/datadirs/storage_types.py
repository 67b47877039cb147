"""Closed vocabularies for the medium and modifier tags of a storage directory."""

from __future__ import annotations

from enum import Enum

from datadirs.errors import UnknownMedium, UnknownModifier


class StorageMedium(str, Enum):
    """Physical class of a storage directory. DISK is assumed when none is given."""

    RAM_DISK = "RAM_DISK"
    SSD = "SSD"
    DISK = "DISK"
    ARCHIVE = "ARCHIVE"

    @classmethod
    def default(cls) -> StorageMedium:
        return cls.DISK

    @classmethod
    def as_list(cls) -> list[StorageMedium]:
        return list(cls)

    @classmethod
    def movable_types(cls) -> list[StorageMedium]:
        return [medium for medium in cls if medium.movable]

    @property
    def transient(self) -> bool:
        # Contents do not survive a node restart.
        return self is StorageMedium.RAM_DISK

    @property
    def movable(self) -> bool:
        return not self.transient


class StorageModifier(str, Enum):
    """Sharing semantics of a storage directory. NONE means exclusive access."""

    NONE = "NONE"
    SHARED = "SHARED"

    @classmethod
    def default(cls) -> StorageModifier:
        return cls.NONE

    @classmethod
    def as_list(cls) -> list[StorageModifier]:
        return list(cls)


_MEDIA_BY_NAME = {medium.name: medium for medium in StorageMedium}
_MODIFIERS_BY_NAME = {modifier.name: modifier for modifier in StorageModifier}


def medium_default() -> StorageMedium:
    return StorageMedium.default()


def modifier_default() -> StorageModifier:
    return StorageModifier.default()


def lookup_medium(name: str) -> StorageMedium:
    medium = _MEDIA_BY_NAME.get(name.upper())
    if medium is None:
        raise UnknownMedium(name)
    return medium


def lookup_modifier(name: str) -> StorageModifier:
    modifier = _MODIFIERS_BY_NAME.get(name.upper())
    if modifier is None:
        raise UnknownModifier(name)
    return modifier


__all__ = [
    "StorageMedium",
    "StorageModifier",
    "lookup_medium",
    "lookup_modifier",
    "medium_default",
    "modifier_default",
]
