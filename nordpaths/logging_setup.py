"""Logging configuration helpers for nordpaths."""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(default_level: str = "WARNING", log_file: str | None = None,
                      stream=None) -> int:
    """Configure process-wide logging and return resolved log level.

    The level is read from ``LOG_LEVEL``. If unset, ``default_level`` is used.
    Records go to ``stream`` (stdout by default), and additionally to
    ``log_file`` when one is given; daemons not running under systemd pass
    their resolved log target.
    """
    level_name = os.environ.get("LOG_LEVEL", default_level).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = getattr(logging, default_level.upper(), logging.WARNING)
        invalid_level = level_name
    else:
        invalid_level = None

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stdout)]
    file_error = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        except OSError as e:
            file_error = e

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )

    if invalid_level is not None:
        logging.getLogger(__name__).warning(
            "Invalid LOG_LEVEL '%s'; using %s", invalid_level, logging.getLevelName(level)
        )
    if file_error is not None:
        logging.getLogger(__name__).warning(
            "cannot open log file '%s', logging to stream only: %s", log_file, file_error
        )

    return level
