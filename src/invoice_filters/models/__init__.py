"""
Data models for the invoice filters package.

This package provides:
- Invoice domain models (Invoice, InvoiceStatus, ALL_STATUS_CODES)
- Filter state models (InvoiceFilters, DatasetStatistics)
"""

from invoice_filters.models.filters import (
    DatasetStatistics,
    InvoiceFilters,
    is_unbounded,
)
from invoice_filters.models.invoice import (
    ALL_STATUS_CODES,
    Invoice,
    InvoiceStatus,
)

__all__ = [
    "ALL_STATUS_CODES",
    "DatasetStatistics",
    "Invoice",
    "InvoiceFilters",
    "InvoiceStatus",
    "is_unbounded",
]
