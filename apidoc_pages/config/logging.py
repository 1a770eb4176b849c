"""Logging setup for apidoc builds.

The build core never configures logging itself: ``SiteBuilder`` and the
descriptor loaders accept a ``logging.Logger`` and report through it. This
module owns the process-wide configuration the CLI applies before a run.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "APIDOC_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def parse_log_level(value: str | None) -> int | None:
    """Return a logging level for a name such as ``"debug"`` or ``"10"``."""
    if not value:
        return None
    text = value.strip().upper()
    if text.isdigit():
        return int(text)
    return _LEVEL_NAMES.get(text)


def resolve_env_log_level() -> int | None:
    """Return the level requested through ``APIDOC_LOG_LEVEL``, if any."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV))


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger to write to stderr at ``level``.

    When ``level`` is ``None`` the environment is consulted via
    :func:`resolve_env_log_level`, falling back to ``INFO`` so progress
    messages are visible by default.
    """
    if level is None:
        level = resolve_env_log_level() or logging.INFO

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the named logger used to report build progress."""
    return logging.getLogger(name)


__all__ = [
    "LOG_LEVEL_ENV",
    "get_logger",
    "parse_log_level",
    "resolve_env_log_level",
    "setup_logging",
]
