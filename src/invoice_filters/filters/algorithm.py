"""
The filtering algorithm.

filter_invoices() expects fully resolved constraints; the filter manager is
responsible for substituting defaults (all statuses, dataset date extremes)
before calling it. All criteria are AND-combined.
"""

from datetime import date
from typing import Collection, Sequence

from invoice_filters.models.filters import is_unbounded
from invoice_filters.models.invoice import Invoice


def filter_invoices(
    invoices: Sequence[Invoice],
    status_codes: Collection[str],
    start_date: date,
    end_date: date,
    min_amount: float,
    max_amount: float | None,
) -> list[Invoice]:
    """
    Return the invoices matching every constraint, in their original order.

    Args:
        invoices: Source invoices. Not modified.
        status_codes: Status codes to keep.
        start_date: Inclusive lower date bound.
        end_date: Inclusive upper date bound.
        min_amount: Inclusive lower amount bound.
        max_amount: Inclusive upper amount bound; None or inf for no limit.

    Returns:
        A new list, possibly empty.
    """
    if not invoices:
        return []
    codes = frozenset(status_codes)
    return [
        invoice
        for invoice in invoices
        if invoice.status in codes
        and _matches_date(invoice, start_date, end_date)
        and _matches_amount(invoice, min_amount, max_amount)
    ]


def _matches_date(invoice: Invoice, start_date: date, end_date: date) -> bool:
    # An invoice without a date cannot fall inside any range.
    if invoice.date is None:
        return False
    return start_date <= invoice.date <= end_date


def _matches_amount(
    invoice: Invoice, min_amount: float, max_amount: float | None
) -> bool:
    if invoice.amount < min_amount:
        return False
    return is_unbounded(max_amount) or invoice.amount <= max_amount
