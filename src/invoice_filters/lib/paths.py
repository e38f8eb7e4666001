"""Path helpers shared by the configuration and cache layers."""

import tempfile
from pathlib import Path


def temp_dir() -> Path:
    """Return the system temporary directory as a Path."""
    return Path(tempfile.gettempdir())


def cache_dir(name: str = "invoice_filters") -> Path:
    """
    Return the default on-disk cache directory for downloaded invoices.

    Args:
        name: Sub-directory name below the system temp directory.
    """
    return temp_dir() / name
