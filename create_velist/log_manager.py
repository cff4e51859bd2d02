# create_velist/log_manager.py
"""
Centralized logger factory for create-velist.

All modules obtain loggers through :func:`get_logger`. Handlers are attached
once, to the package logger only; module loggers propagate to it.

- Colored output via `colorlog` when stderr is a TTY
- Plain output otherwise
- Quiet by default (WARNING); ``--verbose`` switches to DEBUG

Environment variables
---------------------
CREATE_VELIST_FORCE_COLOR=true|false
    Force colored logging on or off regardless of TTY detection.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict

import colorlog

__all__ = ["get_logger", "set_verbosity", "PACKAGE_LOGGER"]

PACKAGE_LOGGER = "create_velist"

_LEVEL_COLORS: Dict[str, str] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

_PLAIN_FMT = "[%(levelname)s] %(asctime)s - [%(name)s] %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"
_COLOR_FMT = (
    "%(log_color)s[%(levelname)s]%(reset)s %(asctime)s - "
    "[%(name)s] %(message)s"
)


def _should_use_color() -> bool:
    """Return True if colorized logs should be used."""
    env = os.getenv("CREATE_VELIST_FORCE_COLOR")
    if env is not None:
        return env.strip().lower() in {"1", "true", "yes", "on"}
    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def _build_stream_handler() -> logging.Handler:
    if _should_use_color():
        handler = colorlog.StreamHandler(stream=sys.stderr)
        handler.setFormatter(
            colorlog.ColoredFormatter(
                fmt=_COLOR_FMT,
                datefmt=_PLAIN_DATEFMT,
                log_colors=_LEVEL_COLORS,
            )
        )
        return handler

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    return handler


def _package_logger() -> logging.Logger:
    """Return the package logger, attaching its stream handler exactly once."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not getattr(logger, "_create_velist_handler_attached", False):
        logger.addHandler(_build_stream_handler())
        logger.setLevel(logging.WARNING)
        logger.propagate = False
        logger._create_velist_handler_attached = True  # type: ignore[attr-defined]
    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Return a logger under the ``create_velist`` hierarchy.

    Parameters
    ----------
    name : str, default "create_velist"
        Usually ``__name__`` of the calling module. Names outside the package
        hierarchy are nested under it so they share its handler.

    Returns
    -------
    logging.Logger
    """
    root = _package_logger()
    if name == PACKAGE_LOGGER:
        return root
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def set_verbosity(verbose: bool) -> None:
    """Switch the package logger between WARNING (default) and DEBUG."""
    _package_logger().setLevel(logging.DEBUG if verbose else logging.WARNING)
