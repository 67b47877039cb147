from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

PACKAGE_LOGGER = "datadirs"

_OWNED_ATTR = "_datadirs_owned"
_STDERR_FORMAT = "%(levelname)s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _own(handler: logging.Handler, fmt: str) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _OWNED_ATTR, True)
    return handler


def configure_datadirs_logging(
    *,
    level: int = logging.WARNING,
    log_file: Path | None = None,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Route the package's log records to stderr, and to a rotating file if asked.

    Only the ``datadirs`` logger is touched, so callers embedding the parser keep
    their own root configuration. Calling it again replaces the handlers it
    installed earlier.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]:
        logger.removeHandler(handler)
        handler.close()

    # stdout carries command output.
    logger.addHandler(_own(logging.StreamHandler(stream=sys.stderr), _STDERR_FORMAT))

    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        except OSError as exc:
            logger.warning("Cannot write log file %s: %s", log_file, exc)
        else:
            logger.addHandler(_own(file_handler, _FILE_FORMAT))

    logger.setLevel(level)
    logger.propagate = False
    return logger
