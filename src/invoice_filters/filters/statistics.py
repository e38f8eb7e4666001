"""
Dataset statistics used to fill in absent filter bounds.

All functions are pure, accept None as an empty collection and never raise:
None (for dates) and 0 (for amounts) are the only empty-input signals.
"""

from datetime import date
from typing import Iterable, Sequence

from invoice_filters.models.filters import DatasetStatistics
from invoice_filters.models.invoice import Invoice


def _dates(invoices: Iterable[Invoice] | None) -> list[date]:
    return [invoice.date for invoice in invoices or () if invoice.date is not None]


def oldest_date(invoices: Iterable[Invoice] | None) -> date | None:
    """Return the earliest invoice date, or None if there is none."""
    return min(_dates(invoices), default=None)


def newest_date(invoices: Iterable[Invoice] | None) -> date | None:
    """Return the latest invoice date, or None if there is none."""
    return max(_dates(invoices), default=None)


def max_amount(invoices: Iterable[Invoice] | None) -> float:
    """
    Return the largest invoice amount.

    Returns 0 for an empty collection; callers use the result as the upper
    bound of the amount slider, so it is never None or negative.
    """
    return max((invoice.amount for invoice in invoices or ()), default=0.0)


def dataset_statistics(invoices: Sequence[Invoice] | None) -> DatasetStatistics:
    """Bundle the bounds the filter panel needs into one object."""
    return DatasetStatistics(
        oldest_date=oldest_date(invoices),
        newest_date=newest_date(invoices),
        max_amount=max_amount(invoices),
    )
