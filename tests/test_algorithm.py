"""Tests for the filtering algorithm."""

import math
from datetime import date

from invoice_filters.filters.algorithm import filter_invoices
from invoice_filters.models.invoice import ALL_STATUS_CODES, Invoice

START = date(2024, 1, 1)
END = date(2024, 12, 31)


class TestFilterInvoices:
    """Tests for filter_invoices()."""

    def test_everything_matches(self, invoices):
        """Test that wide-open constraints keep every invoice in order."""
        result = filter_invoices(invoices, ALL_STATUS_CODES, START, END, 0.0, None)
        assert result == invoices
        assert result is not invoices

    def test_status_filter(self, invoices):
        """Test selecting a single status."""
        result = filter_invoices(invoices, {"PAID"}, START, END, 0.0, None)
        assert [invoice.invoice_id for invoice in result] == [1]

    def test_date_range_is_inclusive(self, invoices):
        """Test that both date bounds are inclusive."""
        result = filter_invoices(
            invoices, ALL_STATUS_CODES, date(2024, 1, 5), date(2024, 2, 15), 0.0, None
        )
        assert [invoice.invoice_id for invoice in result] == [1, 3]

    def test_amount_range_is_inclusive(self, invoices):
        """Test that both amount bounds are inclusive."""
        result = filter_invoices(invoices, ALL_STATUS_CODES, START, END, 50.0, 100.0)
        assert [invoice.invoice_id for invoice in result] == [1, 2]

    def test_min_amount_only(self, invoices):
        """Test a lower amount bound with no upper bound."""
        result = filter_invoices(invoices, ALL_STATUS_CODES, START, END, 150.0, None)
        assert [invoice.invoice_id for invoice in result] == [3]

    def test_infinite_max_is_unbounded(self, invoices):
        """Test that inf behaves like None for the upper bound."""
        result = filter_invoices(invoices, ALL_STATUS_CODES, START, END, 0.0, math.inf)
        assert result == invoices

    def test_combined_constraints(self, invoices):
        """Test that all criteria are AND-combined."""
        result = filter_invoices(
            invoices, {"PAID", "CANCELLED"}, date(2024, 2, 1), END, 0.0, 150.0
        )
        assert result == []

    def test_dateless_invoices_never_match(self):
        """Test that an invoice without a date is excluded."""
        data = [Invoice("PAID", 10.0, None), Invoice("PAID", 10.0, date(2024, 5, 1))]
        result = filter_invoices(data, ALL_STATUS_CODES, START, END, 0.0, None)
        assert result == [data[1]]

    def test_empty_input(self):
        """Test that empty input gives an empty list."""
        assert filter_invoices([], ALL_STATUS_CODES, START, END, 0.0, None) == []

    def test_result_is_subset(self, invoices):
        """Test that every result comes from the input and input is untouched."""
        snapshot = list(invoices)
        result = filter_invoices(invoices, {"PENDING", "PAID"}, START, END, 60.0, None)
        assert all(invoice in invoices for invoice in result)
        assert invoices == snapshot
