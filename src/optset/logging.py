from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import TextIO

from optset import env

__all__ = ["configure_logger", "get_logger", "reset_logger", "set_module_level"]

_DEFAULT_LOGGER_NAME = "optset"
_CONFIGURED = False


class _ColorFormatter(logging.Formatter):
    _COLORS = {
        logging.DEBUG: "\033[36m",  # cyan
        logging.INFO: "\033[32m",  # green
        logging.WARNING: "\033[33m",  # yellow
        logging.ERROR: "\033[31m",  # red
        logging.CRITICAL: "\033[35m",  # magenta
    }
    _RESET = "\033[0m"

    def __init__(self, *, use_color: bool) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = super().format(record)
        color = self._COLORS.get(record.levelno) if self._use_color else None
        return f"{color}{message}{self._RESET}" if color else message


def _normalize_level(level: int | str) -> int:
    if isinstance(level, bool) or not isinstance(level, int | str):
        raise TypeError("Logging level must be an int or str.")
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    resolved = logging.getLevelName(name)
    if isinstance(resolved, str):
        raise ValueError(f"Unknown logging level: {level}")
    return resolved


def _stream_handler(stream: TextIO, color: bool | None) -> logging.Handler:
    if color is None:
        is_tty = getattr(stream, "isatty", lambda: False)()
        color = is_tty and os.name != "nt"

    handler = logging.StreamHandler(stream)
    handler.setFormatter(_ColorFormatter(use_color=bool(color)))
    return handler


def _library_defaults(logger: logging.Logger) -> None:
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def configure_logger(
    *,
    level: int | str | None = None,
    stream: TextIO | None = None,
    color: bool | None = None,
    force: bool = False,
    module_levels: Mapping[str | None, int | str] | None = None,
) -> None:
    """Attach a stream handler to the optset logger.

    Library code never calls this; by default optset records propagate to
    whatever the application configured on the root logger.

    Parameters
    ----------
    level:
        Logging level as int or name. Defaults to ``OPTSET_LOG_LEVEL`` (WARNING).
    stream:
        Stream to write logs to. Defaults to stderr.
    color:
        Force enable/disable ANSI colors. Defaults to auto (enabled for TTYs).
    force:
        If True, reconfigure even if a configuration already exists.
    module_levels:
        Per-module level overrides, keyed by the name given to `get_logger`.
    """

    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    logger = logging.getLogger(_DEFAULT_LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(_stream_handler(stream or sys.stderr, color))
    logger.setLevel(_normalize_level(env.OPTSET_LOG_LEVEL if level is None else level))
    logger.propagate = False
    _CONFIGURED = True

    for module_name, module_level in (module_levels or {}).items():
        set_module_level(module_name, module_level)


def reset_logger() -> None:
    """Undo `configure_logger`, handing optset records back to the root logger."""
    global _CONFIGURED
    _library_defaults(logging.getLogger(_DEFAULT_LOGGER_NAME))
    _CONFIGURED = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the optset namespace."""
    full_name = _DEFAULT_LOGGER_NAME if not name else f"{_DEFAULT_LOGGER_NAME}.{name}"
    return logging.getLogger(full_name)


def set_module_level(name: str | None, level: int | str) -> None:
    """Set logging level for a specific optset module."""
    get_logger(name).setLevel(_normalize_level(level))


_library_defaults(logging.getLogger(_DEFAULT_LOGGER_NAME))
