"""Tests for parsing and formatting helpers."""

from datetime import date

import pytest

from invoice_filters.utils import (
    format_currency,
    format_date,
    parse_date,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("20/01/2025", date(2025, 1, 20)),
        ("02/03/2024", date(2024, 3, 2)),
        ("12/25/2024", date(2024, 12, 25)),
        ("2/3/24", date(2024, 2, 3)),
        ("2024-12-25", date(2024, 12, 25)),
        ("2024-12-25T10:00:00", date(2024, 12, 25)),
        (" 20/01/2025 ", date(2025, 1, 20)),
        ("", None),
        (None, None),
        ("not a date", None),
    ],
)
def test_parse_date(value, expected):
    """Test the supported date formats."""
    assert parse_date(value) == expected


def test_format_date():
    """Test date formatting."""
    assert format_date(date(2025, 1, 20)) == "20 Jan 2025"
    assert format_date(None) == ""


def test_format_currency():
    """Test currency formatting."""
    assert format_currency(1234.5) == "EUR 1,234.50"
    assert format_currency(0, "USD") == "USD 0.00"
