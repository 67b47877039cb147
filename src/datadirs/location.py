from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from urllib.parse import quote, unquote, urlsplit

from datadirs.errors import MalformedLocation, UnsupportedScheme
from datadirs.storage_types import (
    StorageMedium,
    StorageModifier,
    lookup_medium,
    lookup_modifier,
    medium_default,
    modifier_default,
)

# e.g. [Disk]/storages/storage1 or [ssd+shared]file:///mnt/ssd0
_TAGGED_LOCATION = re.compile(r"\[(\w*)(?:\+(\w+))?\](.+)", re.ASCII)

FILE_SCHEME = "file"

# urlsplit silently drops tabs and newlines and strips leading controls.
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


@dataclass(frozen=True)
class StorageLocation:
    """A storage directory: its medium, its modifier and the local path it lives at."""

    path: PurePosixPath
    medium: StorageMedium = field(default_factory=medium_default)
    modifier: StorageModifier = field(default_factory=modifier_default)

    def __post_init__(self) -> None:
        if not isinstance(self.medium, StorageMedium):
            raise TypeError(f"medium must be a StorageMedium, got {self.medium!r}")
        if not isinstance(self.modifier, StorageModifier):
            raise TypeError(f"modifier must be a StorageModifier, got {self.modifier!r}")
        if not isinstance(self.path, PurePosixPath):
            object.__setattr__(self, "path", PurePosixPath(self.path))

    @property
    def uri(self) -> str:
        return path_as_uri(self.path)

    @property
    def shared(self) -> bool:
        return self.modifier is StorageModifier.SHARED

    def to_dict(self) -> dict[str, str]:
        return {
            "medium": self.medium.name,
            "modifier": self.modifier.name,
            "path": str(self.path),
            "canonical": format_location(self),
        }

    def __str__(self) -> str:
        return format_location(self)


def path_as_uri(path: PurePosixPath) -> str:
    if path.is_absolute():
        return f"{FILE_SCHEME}://{quote(str(path))}"
    return f"{FILE_SCHEME}:{quote(str(path))}"


def _location_path(location: str) -> PurePosixPath:
    if not location:
        raise MalformedLocation(location, "empty location")
    if _CONTROL_CHARS.search(location):
        raise MalformedLocation(location, "contains control characters")
    if location != location.strip():
        raise MalformedLocation(location, "leading or trailing whitespace")
    try:
        parts = urlsplit(location)
    except ValueError as exc:
        raise MalformedLocation(location, str(exc)) from exc

    if parts.scheme and parts.scheme.lower() != FILE_SCHEME:
        raise UnsupportedScheme(location[: len(parts.scheme)], location)

    # Any authority (file://host/...) is dropped for backwards compatibility.
    raw_path = unquote(parts.path)
    if not raw_path:
        raise MalformedLocation(location, "no path component")
    return PurePosixPath(raw_path)


def has_explicit_scheme(location: str) -> bool:
    try:
        return bool(urlsplit(location).scheme)
    except ValueError:
        return False


def split_location_token(raw_location: str) -> tuple[str | None, str | None, str]:
    """Split a token into (medium tag, modifier tag, location text).

    The token must match the tagged form as a whole; anything else, including an
    unterminated bracket, is returned untouched as the location text.
    """
    match = _TAGGED_LOCATION.fullmatch(raw_location)
    if match is None:
        return None, None, raw_location
    medium_tag, modifier_tag, location = match.groups()
    return medium_tag, modifier_tag, location


def parse_location(raw_location: str) -> StorageLocation:
    medium_tag, modifier_tag, location = split_location_token(raw_location)

    medium = lookup_medium(medium_tag) if medium_tag else medium_default()
    modifier = lookup_modifier(modifier_tag) if modifier_tag is not None else modifier_default()
    path = _location_path(location)

    return StorageLocation(path=path, medium=medium, modifier=modifier)


def format_location(location: StorageLocation) -> str:
    if location.modifier is not StorageModifier.NONE:
        tags = f"{location.medium.name}+{location.modifier.name}"
    else:
        tags = location.medium.name
    return f"[{tags}]{location.uri}"


__all__ = [
    "FILE_SCHEME",
    "StorageLocation",
    "format_location",
    "has_explicit_scheme",
    "parse_location",
    "path_as_uri",
    "split_location_token",
]
