"""
Logging utilities for the invoice filters package.

Every module obtains its logger through logger(__file__) so that output is
formatted the same way whether it comes from the filter engine, the data
services or the Reflex state.
"""

import logging
import os
from pathlib import Path

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level() -> int:
    """Resolve the LOG_LEVEL environment variable, falling back to INFO."""
    return getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)


def logger(name: str) -> logging.Logger:
    """
    Create and configure a logger for the given name.

    If name is a file path (e.g., __file__), the parent package and module
    stem are used, so ``filters/manager.py`` logs as ``filters.manager``.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Configured logging.Logger instance.
    """
    if "/" in name or "\\" in name:
        path = Path(name)
        name = f"{path.parent.name}.{path.stem}"

    log = logging.getLogger(name)

    # Only configure if not already configured
    if not log.handlers:
        log.setLevel(_level())
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        log.addHandler(handler)

    return log
