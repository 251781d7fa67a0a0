"""Logging helpers for planar2d.

All planar2d loggers live under the ``planar2d`` namespace. The package
only installs a ``NullHandler``; ``configure_logging`` attaches a single
stderr handler to the ``planar2d`` logger and never touches the process
root logger.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "planar2d"

_FORMAT = logging.Formatter("%(levelname)s %(name)s: %(message)s")


def _ensure_package_handler() -> logging.Logger:
    root = logging.getLogger(PACKAGE_LOGGER)
    # replace any previous handler so the current sys.stderr is used
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(_FORMAT)
    root.addHandler(handler)
    root.propagate = False
    return root


def _to_level(level: Union[str, int, None], default: int = logging.INFO) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else default


def configure_logging(level: Union[str, int] = "INFO") -> logging.Logger:
    """Route planar2d log records to stderr at ``level``."""
    root = _ensure_package_handler()
    root.setLevel(_to_level(level))
    return root


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Return a logger under the ``planar2d`` namespace.

    Without ``level`` the logger is left at NOTSET so it inherits whatever
    ``configure_logging`` set on the package logger.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    log = logging.getLogger(name)
    log.setLevel(_to_level(level, logging.NOTSET))
    return log


__all__ = ["PACKAGE_LOGGER", "configure_logging", "get_logger"]
