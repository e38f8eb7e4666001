"""
Service factory for the invoice filters package.

build_invoice_service() returns the InvoiceService implementation selected
by an explicit ServiceConfig:

- Backend.MOCK: In-memory demo scenarios (no network required)
- Backend.PRIMARY / Backend.SECONDARY: HTTP backend with a payload cache

Nothing is cached at module level; callers own the service they build.
"""

from typing import Callable, Dict

from invoice_filters.config import Backend, ServiceConfig
from invoice_filters.lib import logs
from invoice_filters.lib.caches import DiskCache
from invoice_filters.services.errors import (
    InvoiceServiceError,
    NetworkError,
    PayloadError,
    ServerError,
    classify,
    user_message,
)
from invoice_filters.services.invoice_service import InvoiceService
from invoice_filters.services.invoice_service_demo import DemoInvoiceService
from invoice_filters.services.invoice_service_remote import RemoteInvoiceService

LOG = logs.logger(__file__)


def _remote(config: ServiceConfig) -> InvoiceService:
    return RemoteInvoiceService(
        base_url=config.base_url,
        cache=DiskCache(config.cache_dir),
        cache_ttl=config.cache_ttl,
        timeout=config.timeout,
    )


_SERVICE_REGISTRY: Dict[Backend, Callable[[ServiceConfig], InvoiceService]] = {
    Backend.MOCK: lambda config: DemoInvoiceService(),
    Backend.PRIMARY: _remote,
    Backend.SECONDARY: _remote,
}


def build_invoice_service(config: ServiceConfig) -> InvoiceService:
    """Return a new invoice service for the configured backend."""
    LOG.info(
        "build_invoice_service - backend:%s url:%s", config.backend.value, config.base_url
    )
    return _SERVICE_REGISTRY[config.backend](config)


__all__ = [
    "DemoInvoiceService",
    "InvoiceService",
    "InvoiceServiceError",
    "NetworkError",
    "PayloadError",
    "RemoteInvoiceService",
    "ServerError",
    "build_invoice_service",
    "classify",
    "user_message",
]
