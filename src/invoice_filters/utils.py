"""
Utility functions for invoice data parsing and formatting.

Provides helpers for:
- Date parsing (backend dd/mm/yyyy, US m/d/y and ISO formats)
- Date formatting for list rows
- Currency formatting
"""

from datetime import date, datetime

_DATE_FORMATS = ("%d/%m/%Y", "%m/%d/%Y", "%m/%d/%y")


def parse_date(date_str: str | None) -> date | None:
    """
    Parse a date string into a calendar date.

    The backend sends dates as dd/mm/yyyy, which is tried first. Ambiguous
    values such as "02/03/2024" therefore read as 2 March 2024.

    Args:
        date_str: Date string in dd/mm/yyyy, m/d/y or ISO format.

    Returns:
        date object if parsing succeeds, None otherwise.
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            pass

    # Try ISO format as fallback (e.g., "2024-12-25")
    try:
        return date.fromisoformat(date_str[:10])
    except (ValueError, TypeError):
        pass

    return None


def format_date(value: date | None) -> str:
    """Format a date for display, e.g. "20 Jan 2025"; empty string for None."""
    if not value:
        return ""
    return value.strftime("%d %b %Y")


def format_currency(value: float, currency: str = "EUR") -> str:
    """
    Format a currency amount with the currency code prefix.

    Args:
        value: Numeric amount to format.
        currency: Currency code (e.g., 'USD', 'EUR').

    Returns:
        Formatted string like 'EUR 1,234.56'.
    """
    return f"{currency} {value:,.2f}"
