from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import PurePosixPath

from dotenv import load_dotenv

from datadirs.config import load_settings
from datadirs.directories import group_by_medium, parse_data_dirs
from datadirs.errors import InvalidDataDirs, LocationError
from datadirs.location import StorageLocation, format_location, parse_location
from datadirs.logging_utils import configure_datadirs_logging
from datadirs.storage_types import StorageMedium, StorageModifier, lookup_medium, lookup_modifier

logger = logging.getLogger(__name__)

EXIT_INVALID = 2


def _error_payload(exc: LocationError, token: str) -> dict[str, object]:
    payload: dict[str, object] = {
        "error": str(exc),
        "kind": type(exc).__name__,
        "token": token,
    }
    if isinstance(exc, InvalidDataDirs):
        payload["index"] = exc.index
        payload["kind"] = type(exc.cause).__name__
    return payload


def _parse_tokens(tokens: list[str]) -> int:
    results: list[dict[str, str]] = []
    for token in tokens:
        try:
            location = parse_location(token)
        except LocationError as exc:
            logger.error("Failed to parse storage location %r: %s", token, exc)
            print(json.dumps(_error_payload(exc, token), indent=2))
            return EXIT_INVALID
        results.append({"token": token, **location.to_dict()})
    print(json.dumps(results, indent=2))
    return 0


def _format_location(medium: str, modifier: str | None, path: str) -> int:
    try:
        location = StorageLocation(
            path=PurePosixPath(path),
            medium=lookup_medium(medium),
            modifier=lookup_modifier(modifier) if modifier else StorageModifier.default(),
        )
    except LocationError as exc:
        logger.error("Invalid storage tag: %s", exc)
        print(json.dumps(_error_payload(exc, exc.text), indent=2))
        return EXIT_INVALID
    print(format_location(location))
    return 0


def _list_data_dirs(raw: str) -> int:
    try:
        locations = parse_data_dirs(raw)
    except InvalidDataDirs as exc:
        logger.error("%s", exc)
        print(json.dumps(_error_payload(exc, exc.token), indent=2))
        return EXIT_INVALID

    grouped = group_by_medium(locations)
    payload = {
        "data_dirs": [str(location) for location in locations],
        "by_medium": {
            medium.name: [str(location.path) for location in grouped[medium]]
            for medium in StorageMedium.as_list()
            if medium in grouped
        },
    }
    print(json.dumps(payload, indent=2))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse and format storage directory locations")
    sub = parser.add_subparsers(dest="command", required=True)

    parse = sub.add_parser("parse", help="Parse one or more location tokens")
    parse.add_argument("tokens", nargs="+", metavar="TOKEN")

    fmt = sub.add_parser("format", help="Print the canonical form of a location")
    fmt.add_argument("--medium", default=StorageMedium.default().name)
    fmt.add_argument("--modifier")
    fmt.add_argument("path")

    listing = sub.add_parser("list", help="Parse the configured data directories")
    listing.add_argument("--data-dirs", help="Override DATADIRS_DATA_DIRS")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    load_dotenv()
    settings = load_settings()
    configure_datadirs_logging(level=settings.log_level, log_file=settings.log_file)

    if args.command == "parse":
        return _parse_tokens(args.tokens)
    if args.command == "format":
        return _format_location(args.medium, args.modifier, args.path)
    return _list_data_dirs(args.data_dirs or settings.data_dirs)


if __name__ == "__main__":
    sys.exit(main())
