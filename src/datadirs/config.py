from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_HOME_DIRNAME = "DataDirs"


def _clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    if "${" in value:
        return None
    value = value.strip()
    return value or None


def _env_path(name: str) -> Path | None:
    value = _clean_env(os.getenv(name))
    if value is None:
        return None
    return Path(value).expanduser().absolute()


def _env_log_level(name: str, default: int = logging.WARNING) -> int:
    value = _clean_env(os.getenv(name))
    if value is None:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Paths:
    root: Path
    default_data_dir: Path


@dataclass(frozen=True)
class Settings:
    paths: Paths
    data_dirs: str
    log_level: int
    log_file: Path | None


def resolve_paths() -> Paths:
    root = _env_path("DATADIRS_HOME") or (Path.home() / DEFAULT_HOME_DIRNAME).absolute()
    return Paths(root=root, default_data_dir=root / "data")


def load_settings() -> Settings:
    paths = resolve_paths()
    data_dirs = _clean_env(os.getenv("DATADIRS_DATA_DIRS")) or f"[DISK]{paths.default_data_dir}"

    return Settings(
        paths=paths,
        data_dirs=data_dirs,
        log_level=_env_log_level("DATADIRS_LOG_LEVEL"),
        log_file=_env_path("DATADIRS_LOG_FILE"),
    )
