"""
Reflex UI components for the invoice filter screen.

- filter_panel: Status, date and amount filters with apply/reset
- invoice_list: Filtered invoice rows with empty and error states
"""

from invoice_filters.components.filter_panel import filter_panel
from invoice_filters.components.invoice_list import invoice_list, invoice_row

__all__ = ["filter_panel", "invoice_list", "invoice_row"]
