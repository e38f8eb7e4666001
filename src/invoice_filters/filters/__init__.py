"""
The invoice filtering engine.

Modules:
- statistics: dataset extremes used as default bounds
- validation: null-safe date range checks
- algorithm: the pure AND-combined filter
- manager: filter state ownership, validation and default resolution
"""

from invoice_filters.filters.algorithm import filter_invoices
from invoice_filters.filters.manager import (
    INVALID_RANGE_ERROR,
    NULL_FILTERS_ERROR,
    InvoiceFilterManager,
    clamp_opposite_date,
    swap_inverted_dates,
)
from invoice_filters.filters.statistics import (
    dataset_statistics,
    max_amount,
    newest_date,
    oldest_date,
)
from invoice_filters.filters.validation import is_valid_range

__all__ = [
    "INVALID_RANGE_ERROR",
    "NULL_FILTERS_ERROR",
    "InvoiceFilterManager",
    "clamp_opposite_date",
    "dataset_statistics",
    "filter_invoices",
    "is_valid_range",
    "max_amount",
    "newest_date",
    "oldest_date",
    "swap_inverted_dates",
]
