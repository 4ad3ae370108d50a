"""Structured logging utilities scoped to the ``roomring`` logger tree."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from roomring.utils.config import get_settings


ROOT_LOGGER_NAME = "roomring"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_LOGGER_INITIALIZED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Attach one stdout handler to the ``roomring`` logger.

    The host process's root logger (uvicorn, pytest) is left untouched; records
    from this project stop at the ``roomring`` logger.
    """

    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    settings = get_settings()
    resolved_level = (level or settings.log_level).upper()

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(resolved_level)
    root.addHandler(handler)
    root.propagate = False
    _LOGGER_INITIALIZED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``roomring`` namespace.

    Module names outside the package (``app``, ``scripts``) are prefixed so
    they share the same handler.
    """
    configure_logging()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
