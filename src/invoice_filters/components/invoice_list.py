"""
Invoice list component.

Renders the filtered invoices as rows with an empty state and a load
error banner.
"""

import reflex as rx

from invoice_filters.state import InvoiceFilterState


def invoice_row(invoice: dict) -> rx.Component:
    """Render a single invoice row."""
    return rx.hstack(
        rx.vstack(
            rx.text(invoice["date"], weight="medium"),
            rx.text(invoice["status"], class_name="muted"),
            spacing="0",
        ),
        rx.spacer(),
        rx.text(invoice["amount"], class_name="invoice-amount"),
        class_name="invoice-row",
        key=invoice["id"],
    )


def invoice_list() -> rx.Component:
    """
    Build the invoice list with summary, empty state and error banner.

    Returns:
        The invoice list component.
    """
    return rx.box(
        rx.cond(
            InvoiceFilterState.load_error != "",
            rx.callout(
                InvoiceFilterState.load_error,
                icon="wifi_off",
                color_scheme="red",
            ),
        ),
        rx.hstack(
            rx.text(InvoiceFilterState.result_summary, class_name="muted"),
            rx.spacer(),
            rx.button(
                rx.icon("refresh_cw", size=16),
                variant="ghost",
                on_click=InvoiceFilterState.refresh,
                title="Refresh",
            ),
        ),
        rx.cond(
            InvoiceFilterState.is_loading,
            rx.center(rx.spinner()),
            rx.cond(
                InvoiceFilterState.is_empty,
                rx.text("No invoices match the selected filters.", class_name="muted"),
                rx.vstack(rx.foreach(InvoiceFilterState.invoices, invoice_row)),
            ),
        ),
        class_name="card results-card",
    )
