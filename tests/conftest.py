"""Pytest configuration and fixtures for invoice filter tests."""

from datetime import date

import pytest

from invoice_filters.lib.caches import DiskCache
from invoice_filters.models.invoice import Invoice, InvoiceStatus


@pytest.fixture
def invoices():
    """Three invoices with distinct statuses, amounts and dates."""
    return [
        Invoice(InvoiceStatus.PAID.value, 100.0, date(2024, 1, 5), invoice_id=1),
        Invoice(InvoiceStatus.PENDING.value, 50.0, date(2024, 3, 1), invoice_id=2),
        Invoice(InvoiceStatus.CANCELLED.value, 200.0, date(2024, 2, 15), invoice_id=3),
    ]


@pytest.fixture
def disk_cache(tmp_path):
    """A DiskCache in a per-test directory."""
    cache = DiskCache(tmp_path / "cache")
    yield cache
    cache.close()


@pytest.fixture
def listing_payload():
    """An invoice listing as returned by the backend."""
    return {
        "numFacturas": 3,
        "facturas": [
            {"descEstado": "Pendiente de pago", "importeOrdenacion": 54.56, "fecha": "20/01/2025"},
            {"descEstado": "Pagada", "importeOrdenacion": 67.54, "fecha": "18/12/2024"},
            {"descEstado": "Anulada", "importeOrdenacion": 12.0, "fecha": "05/11/2024"},
        ],
    }
