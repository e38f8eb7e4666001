"""
Backend selection and service configuration.

The backend is chosen explicitly through a ServiceConfig that is handed to
build_invoice_service(); nothing is kept in module-level state. from_env()
builds one from environment variables for the Reflex app.

Environment variables:
    INVOICE_FILTERS_BACKEND: mock | primary | secondary (default: mock)
    INVOICE_FILTERS_PRIMARY_URL: Base URL of the primary invoice endpoint
    INVOICE_FILTERS_SECONDARY_URL: Base URL of the secondary invoice endpoint
    INVOICE_FILTERS_TIMEOUT: HTTP timeout in seconds (default: 10)
    INVOICE_FILTERS_CACHE_TTL: Seconds a downloaded payload stays fresh (default: 300)
    INVOICE_FILTERS_CACHE_DIR: Directory for the payload cache
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from invoice_filters.lib import paths

DEFAULT_PRIMARY_URL = "https://francisco-pacheco.com/api/"
DEFAULT_SECONDARY_URL = "https://viewnextandroid.mocklab.io/"


class Backend(str, Enum):
    """Where invoices are loaded from."""

    MOCK = "mock"
    PRIMARY = "primary"
    SECONDARY = "secondary"

    @classmethod
    def parse(cls, value: str | None) -> "Backend":
        """
        Parse a backend name, case-insensitively.

        Raises:
            ValueError: If the name is not a known backend.
        """
        resolved = (value or cls.MOCK.value).strip().lower()
        try:
            return cls(resolved)
        except ValueError as exc:
            msg = f"Unknown invoice backend: {resolved}"
            raise ValueError(msg) from exc


@dataclass(frozen=True)
class ServiceConfig:
    """
    Configuration for the invoice data service.

    Attributes:
        backend: Which backend to load invoices from.
        primary_url: Base URL used by Backend.PRIMARY.
        secondary_url: Base URL used by Backend.SECONDARY.
        timeout: HTTP timeout in seconds.
        cache_dir: Directory for the downloaded payload cache.
        cache_ttl: Seconds a downloaded payload is served without refetching.
    """

    backend: Backend = Backend.MOCK
    primary_url: str = DEFAULT_PRIMARY_URL
    secondary_url: str = DEFAULT_SECONDARY_URL
    timeout: float = 10.0
    cache_dir: Path = field(default_factory=paths.cache_dir)
    cache_ttl: int = 300

    @property
    def base_url(self) -> str | None:
        """Return the endpoint for the selected backend; None for the mock."""
        if self.backend is Backend.PRIMARY:
            return self.primary_url
        if self.backend is Backend.SECONDARY:
            return self.secondary_url
        return None

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """Build a configuration from INVOICE_FILTERS_* environment variables."""
        cache_dir = os.getenv("INVOICE_FILTERS_CACHE_DIR")
        return cls(
            backend=Backend.parse(os.getenv("INVOICE_FILTERS_BACKEND")),
            primary_url=os.getenv("INVOICE_FILTERS_PRIMARY_URL", DEFAULT_PRIMARY_URL),
            secondary_url=os.getenv(
                "INVOICE_FILTERS_SECONDARY_URL", DEFAULT_SECONDARY_URL
            ),
            timeout=float(os.getenv("INVOICE_FILTERS_TIMEOUT", "10")),
            cache_dir=Path(cache_dir) if cache_dir else paths.cache_dir(),
            cache_ttl=int(os.getenv("INVOICE_FILTERS_CACHE_TTL", "300")),
        )
