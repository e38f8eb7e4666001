"""
HTTP implementation of InvoiceService.

Fetches ``{base_url}invoices.json``, whose body looks like:

    {
      "numFacturas": 2,
      "facturas": [
        {"descEstado": "Pendiente de pago", "importeOrdenacion": 54.56, "fecha": "20/01/2025"},
        {"descEstado": "Pagada", "importeOrdenacion": 67.54, "fecha": "18/12/2024"}
      ]
    }

Offline-first: every successfully downloaded payload is kept in a DiskCache.
While the copy is fresh (cache TTL) it is served without touching the
network; once stale, a new download is attempted and the stale copy is
served if that download fails.
"""

from typing import Any

import httpx
from benedict import benedict

from invoice_filters.lib import logs
from invoice_filters.lib.caches import DiskCache
from invoice_filters.models.invoice import Invoice, InvoiceStatus
from invoice_filters.services.errors import PayloadError, classify
from invoice_filters.services.invoice_service import InvoiceService
from invoice_filters.utils import parse_date

LOG = logs.logger(__file__)

INVOICES_PATH = "invoices.json"


def parse_invoices(payload: Any) -> list[Invoice]:
    """
    Parse an invoice listing payload into Invoice dataclasses.

    Unknown status labels become UNKNOWN, unparsable dates become None and
    missing amounts become 0.

    Raises:
        PayloadError: If the payload is not an invoice listing.
    """
    if not isinstance(payload, dict):
        raise PayloadError(f"Expected a JSON object, got {type(payload).__name__}")

    b = benedict(payload)
    rows = b.get_list("facturas") or []
    declared = b.get_int("numFacturas", len(rows))
    if declared != len(rows):
        LOG.warning("Payload declares %d invoices but lists %d", declared, len(rows))

    invoices = []
    for index, item in enumerate(rows, start=1):
        if not isinstance(item, dict):
            raise PayloadError(f"Invoice #{index} is not an object")
        row = benedict(item)
        invoices.append(
            Invoice(
                status=InvoiceStatus.from_server_value(row.get_str("descEstado")).value,
                amount=max(row.get_float("importeOrdenacion", 0.0), 0.0),
                date=parse_date(row.get_str("fecha")),
                invoice_id=index,
            )
        )
    return invoices


class RemoteInvoiceService(InvoiceService):
    """
    Invoice service reading from an HTTP backend.

    Attributes:
        base_url: Endpoint the invoice listing is fetched from.
        cache_ttl: Seconds a downloaded payload is served without refetching.
    """

    def __init__(
        self,
        base_url: str,
        cache: DiskCache,
        cache_ttl: int = 300,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            base_url: Base URL of the backend (with trailing slash).
            cache: Cache holding the last downloaded payload.
            cache_ttl: Freshness window for the cached payload, in seconds.
            timeout: HTTP timeout in seconds when no client is given.
            client: Preconfigured httpx client (tests pass a MockTransport).
        """
        self.base_url = base_url
        self.cache_ttl = cache_ttl
        self._cache = cache
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)
        self._payload_key = f"invoices:{base_url}"
        self._fresh_key = f"invoices-fresh:{base_url}"

    def list_invoices(self) -> list[Invoice]:
        """
        Return invoices, preferring a fresh cached payload.

        Raises:
            InvoiceServiceError: If the download fails and nothing is cached.
        """
        cached = self._cache.get(self._payload_key)
        if cached is not None and self._cache.get(self._fresh_key) is not None:
            LOG.info("Serving cached invoices for %s", self.base_url)
            return parse_invoices(cached.value)

        try:
            return self._download()
        except Exception as exc:
            error = classify(exc)
            if cached is None:
                raise error from exc
            LOG.warning(
                "Invoice download failed (%s), serving cached copy", error, exc_info=True
            )
            return parse_invoices(cached.value)

    def refresh(self) -> None:
        """
        Download the listing now, replacing the cached payload.

        Raises:
            InvoiceServiceError: If the download fails.
        """
        LOG.info("Refreshing invoices from %s", self.base_url)
        try:
            self._download()
        except Exception as exc:
            raise classify(exc) from exc

    def close(self) -> None:
        """Close the HTTP client and the cache."""
        self._client.close()
        self._cache.close()

    def _download(self) -> list[Invoice]:
        response = self._client.get(INVOICES_PATH)
        response.raise_for_status()
        payload = response.json()
        # Only well-formed listings reach the cache.
        invoices = parse_invoices(payload)
        self._cache.set(self._payload_key, payload)
        self._cache.set(self._fresh_key, True, expire=self.cache_ttl)
        LOG.info("Downloaded %d invoices from %s", len(invoices), response.request.url)
        return invoices
