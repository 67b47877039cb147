from __future__ import annotations

import logging
from typing import Iterable

from datadirs.errors import InvalidDataDirs, LocationError
from datadirs.location import (
    StorageLocation,
    has_explicit_scheme,
    parse_location,
    split_location_token,
)
from datadirs.storage_types import StorageMedium

logger = logging.getLogger(__name__)


def split_data_dirs(raw: str) -> list[str]:
    return [token.strip() for token in raw.split(",") if token.strip()]


def parse_data_dirs(raw: str | Iterable[str]) -> list[StorageLocation]:
    """Parse every configured data directory, in configuration order.

    `raw` is either the comma separated configuration value or an already split
    sequence of tokens. The first entry that fails to parse aborts the whole
    list with InvalidDataDirs; nothing is skipped.
    """
    tokens = split_data_dirs(raw) if isinstance(raw, str) else [t.strip() for t in raw if t.strip()]

    locations: list[StorageLocation] = []
    for index, token in enumerate(tokens):
        try:
            location = parse_location(token)
        except LocationError as exc:
            raise InvalidDataDirs(index, token, exc) from exc

        _, _, location_text = split_location_token(token)
        if not has_explicit_scheme(location_text):
            logger.warning(
                "Data directory %s should be specified as a URI, e.g. %s",
                token,
                location,
            )
        logger.debug("Parsed data directory #%s %r as %s", index, token, location)
        locations.append(location)
    return locations


def group_by_medium(
    locations: Iterable[StorageLocation],
) -> dict[StorageMedium, list[StorageLocation]]:
    grouped: dict[StorageMedium, list[StorageLocation]] = {}
    for location in locations:
        grouped.setdefault(location.medium, []).append(location)
    return grouped


__all__ = ["group_by_medium", "parse_data_dirs", "split_data_dirs"]
