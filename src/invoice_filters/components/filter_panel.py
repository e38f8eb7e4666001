"""
Filter panel component for the invoice list.

Provides status checkboxes, a date range, an amount slider bounded by the
largest loaded invoice, and apply/reset buttons.
"""

import reflex as rx

from invoice_filters.models.invoice import InvoiceStatus
from invoice_filters.state import FILTERABLE_STATUSES, InvoiceFilterState


def _status_checkbox(status: InvoiceStatus) -> rx.Component:
    return rx.checkbox(
        status.label,
        checked=InvoiceFilterState.selected_states.contains(status.value),
        on_change=lambda checked: InvoiceFilterState.toggle_status(
            status.value, checked
        ),
    )


def _date_field(label: str, value, minimum, maximum, on_change) -> rx.Component:
    return rx.box(
        rx.text(label, class_name="field-label"),
        rx.input(
            type="date",
            value=value,
            min=minimum,
            max=maximum,
            on_change=on_change,
            class_name="date-input",
        ),
        class_name="date-field",
    )


def filter_panel() -> rx.Component:
    """
    Build the filter panel.

    Returns:
        The filter panel component.
    """
    return rx.box(
        rx.hstack(
            rx.heading("Filters", size="4"),
            rx.cond(
                InvoiceFilterState.has_active_filters,
                rx.badge("Active", color_scheme="orange"),
            ),
            align="center",
        ),
        # Date range
        rx.hstack(
            _date_field(
                "From",
                InvoiceFilterState.start_date,
                InvoiceFilterState.start_min,
                InvoiceFilterState.start_max,
                InvoiceFilterState.pick_start_date,
            ),
            _date_field(
                "To",
                InvoiceFilterState.end_date,
                InvoiceFilterState.end_min,
                InvoiceFilterState.end_max,
                InvoiceFilterState.pick_end_date,
            ),
        ),
        # Amount range
        rx.box(
            rx.text(
                f"Amount: {InvoiceFilterState.amount_range[0]} - "
                f"{InvoiceFilterState.amount_range[1]}",
                class_name="field-label",
            ),
            rx.slider(
                value=InvoiceFilterState.amount_range,
                min=0,
                max=InvoiceFilterState.amount_ceiling,
                on_change=InvoiceFilterState.preview_amount_range,
                on_value_commit=InvoiceFilterState.commit_amount_range,
            ),
            class_name="amount-field",
        ),
        # Status
        rx.vstack(
            *[_status_checkbox(status) for status in FILTERABLE_STATUSES],
            class_name="status-field",
        ),
        rx.cond(
            InvoiceFilterState.validation_error != "",
            rx.callout(
                InvoiceFilterState.validation_error,
                icon="triangle_alert",
                color_scheme="red",
            ),
        ),
        rx.hstack(
            rx.button("Apply", on_click=InvoiceFilterState.apply_filters),
            rx.button(
                "Clear filters",
                variant="outline",
                on_click=InvoiceFilterState.reset_filters,
            ),
        ),
        class_name="card filter-card",
    )
