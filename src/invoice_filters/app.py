"""
Reflex application entry point for the invoice filters UI.

This module initializes the Reflex app and defines the main page layout.
"""

import os

import reflex as rx

from invoice_filters.components import filter_panel, invoice_list
from invoice_filters.lib import logs
from invoice_filters.state import SERVICE_CONFIG, InvoiceFilterState

LOG = logs.logger(__file__)

APP_PORT = int(os.getenv("INVOICE_FILTERS_PORT", "8000"))

APP_TITLE = "Invoices"
APP_SUBTITLE = "Filter invoices by status, date and amount."

LOG.info("Invoice backend: %s", SERVICE_CONFIG.backend.value)


def page_header() -> rx.Component:
    """Build the title area at the top of the page."""
    return rx.box(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        rx.text(APP_SUBTITLE, class_name="muted"),
        class_name="page-header",
    )


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page component with header, filters, and invoice list.
    """
    return rx.box(
        rx.box(
            page_header(),
            filter_panel(),
            invoice_list(),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
)

# Add the index page
app.add_page(
    index,
    title=APP_TITLE,
    on_load=InvoiceFilterState.on_load,
)


def main() -> None:
    """Entrypoint for `invoice-filters`; wraps `reflex run`."""
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--backend-port", str(APP_PORT)]
    )


if __name__ == "__main__":
    main()
