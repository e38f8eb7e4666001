"""
Reflex state management for the invoice filter screen.

InvoiceFilterState is a thin bridge between the widgets and one
InvoiceFilterManager per session: widget events are forwarded to the
manager, which publishes its filters and validation error to the state
through subscriptions that mirror them into plain vars for rendering.
"""

import functools

import reflex as rx

from invoice_filters.config import ServiceConfig
from invoice_filters.filters import InvoiceFilterManager, dataset_statistics
from invoice_filters.lib import logs
from invoice_filters.models.filters import InvoiceFilters, is_unbounded
from invoice_filters.models.invoice import Invoice, InvoiceStatus
from invoice_filters.services import (
    InvoiceService,
    InvoiceServiceError,
    build_invoice_service,
    user_message,
)
from invoice_filters.utils import parse_date

LOG = logs.logger(__file__)

SERVICE_CONFIG = ServiceConfig.from_env()

# Status checkboxes shown in the filter panel.
FILTERABLE_STATUSES = [
    InvoiceStatus.PAID,
    InvoiceStatus.CANCELLED,
    InvoiceStatus.FIXED_FEE,
    InvoiceStatus.PENDING,
    InvoiceStatus.PAYMENT_PLAN,
]


@functools.cache
def _get_service() -> InvoiceService:
    """Get the configured invoice service (lazy loaded)."""
    return build_invoice_service(SERVICE_CONFIG)


def _iso(value) -> str:
    return value.isoformat() if value else ""


def _to_row(invoice: Invoice) -> dict[str, str]:
    """Convert an invoice to the string row rendered by the list."""
    return {
        "id": str(invoice.invoice_id),
        "status": invoice.status_enum.label,
        "code": invoice.status,
        "amount": invoice.formatted_amount(),
        "date": invoice.formatted_date(),
    }


class InvoiceFilterState(rx.State):
    """
    State for the invoice list and its filter panel.

    Handles loading, filter editing, applying and resetting.
    """

    # Invoice list
    invoices: list[dict[str, str]] = []
    total: int = 0
    is_loading: bool = True
    load_error: str = ""

    # Filter form mirror
    selected_states: list[str] = []
    start_date: str = ""
    end_date: str = ""
    amount_range: list[float] = [0.0, 0.0]
    amount_ceiling: float = 0.0
    start_min: str = ""
    start_max: str = ""
    end_min: str = ""
    end_max: str = ""
    validation_error: str = ""
    has_active_filters: bool = False

    # Backend-only
    _manager: InvoiceFilterManager | None = None
    _all_invoices: list[Invoice] = []

    @rx.var
    def result_summary(self) -> str:
        """Generate summary text for the invoice list."""
        noun = "invoice" if len(self.invoices) == 1 else "invoices"
        if len(self.invoices) == self.total:
            return f"{self.total} {noun}"
        return f"{len(self.invoices)} of {self.total} {noun}"

    @rx.var
    def is_empty(self) -> bool:
        """Check if the empty state should be shown."""
        return not self.is_loading and len(self.invoices) == 0

    @rx.event
    def on_load(self):
        """Load the invoices and reset the filters to the dataset bounds."""
        self.is_loading = True
        self.load_error = ""
        try:
            self._all_invoices = _get_service().list_invoices()
        except InvoiceServiceError as e:
            LOG.error("Failed to load invoices: %s", e, exc_info=True)
            self._all_invoices = []
            self.load_error = user_message(e)
        finally:
            self.is_loading = False
        self.reset_filters()

    @rx.event
    def refresh(self):
        """Reload invoices from the backend."""
        try:
            _get_service().refresh()
        except InvoiceServiceError as e:
            LOG.error("Refresh failed: %s", e, exc_info=True)
            self.load_error = user_message(e)
            return
        self.on_load()

    @rx.event
    def toggle_status(self, code: str, checked: bool):
        """Checkbox handler for a status code."""
        self._get_manager().toggle_status(code, checked)

    @rx.event
    def pick_start_date(self, value: str):
        """Date input handler for the start date."""
        self._get_manager().set_start_date(parse_date(value))

    @rx.event
    def pick_end_date(self, value: str):
        """Date input handler for the end date."""
        self._get_manager().set_end_date(parse_date(value))

    @rx.event
    def preview_amount_range(self, values: list[float]):
        """Move the slider handles without touching the filters."""
        self.amount_range = [float(v) for v in values]

    @rx.event
    def commit_amount_range(self, values: list[float]):
        """Slider release handler; commits both amount bounds."""
        low, high = (float(v) for v in values)
        self._get_manager().set_amount_range(low, high)

    @rx.event
    def apply_filters(self):
        """Filter the invoice list with the filters in force."""
        manager = self._get_manager()
        self._show(manager.apply_current_filters(self._all_invoices))

    @rx.event
    def reset_filters(self):
        """Reset the filters to the dataset bounds and show every invoice."""
        self._get_manager().reset_filters(self._all_invoices)
        self._show(self._all_invoices)

    def _get_manager(self) -> InvoiceFilterManager:
        if self._manager is None:
            manager = InvoiceFilterManager()
            self._manager = manager
            manager.current_filters.subscribe(self._mirror_filters)
            manager.validation_error.subscribe(self._mirror_error)
        return self._manager

    def _show(self, invoices: list[Invoice]) -> None:
        self.invoices = [_to_row(invoice) for invoice in invoices]
        self.total = len(self._all_invoices)

    def _mirror_filters(self, filters: InvoiceFilters) -> None:
        """Copy newly published filters into the form vars."""
        stats = dataset_statistics(self._all_invoices)

        self.selected_states = sorted(filters.filtered_states)
        self.start_date = _iso(filters.start_date)
        self.end_date = _iso(filters.end_date)
        self.amount_ceiling = stats.max_amount
        high = stats.max_amount if is_unbounded(filters.max_amount) else filters.max_amount
        self.amount_range = [filters.min_amount, high]

        start_min, start_max = stats.start_date_bounds(filters)
        end_min, end_max = stats.end_date_bounds(filters)
        self.start_min, self.start_max = _iso(start_min), _iso(start_max)
        self.end_min, self.end_max = _iso(end_min), _iso(end_max)

        self.has_active_filters = self._manager.has_active_filters()

    def _mirror_error(self, error: str | None) -> None:
        self.validation_error = error or ""
