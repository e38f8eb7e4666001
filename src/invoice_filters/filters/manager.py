"""
Filter state manager.

InvoiceFilterManager owns the filters currently in force and the latest
validation error, both published as ObservableValues. It repairs inverted
date ranges, validates input, and on apply substitutes dataset-derived
defaults for absent constraints before delegating to filter_invoices().

Two different policies resolve a start date that lies after the end date:

- swap_inverted_dates: used by update(), when a whole filter set is
  submitted. The two dates trade places.
- clamp_opposite_date: used by update_single_field(), when one date picker
  commits a value. The other endpoint is pushed onto the new value.

The manager must be driven from one sequential context; it holds no locks.
"""

from datetime import date
from typing import Callable, Collection, Sequence

from invoice_filters.filters import statistics
from invoice_filters.filters.algorithm import filter_invoices
from invoice_filters.filters.validation import is_valid_range
from invoice_filters.lib import logs
from invoice_filters.lib.observables import ObservableValue
from invoice_filters.models.filters import InvoiceFilters, is_unbounded
from invoice_filters.models.invoice import ALL_STATUS_CODES, Invoice

LOG = logs.logger(__file__)

NULL_FILTERS_ERROR = "Filters must not be empty"
INVALID_RANGE_ERROR = "Start date cannot be after the end date"

FilterFunction = Callable[..., list[Invoice]]


def swap_inverted_dates(filters: InvoiceFilters) -> InvoiceFilters:
    """
    Return filters whose dates are in order, swapping them if inverted.

    The argument is left untouched; a copy is returned when a swap happens.
    """
    start, end = filters.start_date, filters.end_date
    if start is None or end is None or start <= end:
        return filters
    corrected = filters.copy()
    corrected.start_date, corrected.end_date = end, start
    return corrected


def clamp_opposite_date(
    published_start: date | None, proposed: InvoiceFilters
) -> InvoiceFilters:
    """
    Resolve a single moved date endpoint by dragging the other one along.

    The moved endpoint is found by comparing against the last published
    start date; proposed may be the published object edited in place.
    Moving the start past the end sets the end to the new start; moving the
    end before the start sets the start to the new end.
    """
    start, end = proposed.start_date, proposed.end_date
    if start is None or end is None or start <= end:
        return proposed
    clamped = proposed.copy()
    if start != published_start:
        clamped.end_date = start
    else:
        clamped.start_date = end
    return clamped


class InvoiceFilterManager:
    """
    Holds, validates and applies the invoice filters.

    Attributes:
        current_filters: Observable holding the filters in force.
        validation_error: Observable holding the latest error message, or None.
    """

    def __init__(
        self,
        filter_function: FilterFunction = filter_invoices,
        status_codes: Collection[str] = ALL_STATUS_CODES,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialize the manager with default filters.

        Args:
            filter_function: Algorithm used by apply_current_filters().
            status_codes: Every known status code; substituted for an empty
                status selection.
            today: Clock used when the dataset has no dates at all.
        """
        self._filter_function = filter_function
        self._status_codes = frozenset(status_codes)
        self._today = today
        # Dataset ceiling installed by reset_filters(); not an active filter
        # until the user changes something.
        self._reset_ceiling: float | None = None
        # Start date as last published; filters may be edited in place.
        self._published_start: date | None = None
        self.current_filters: ObservableValue[InvoiceFilters] = ObservableValue(
            InvoiceFilters()
        )
        self.validation_error: ObservableValue[str | None] = ObservableValue(None)

    @property
    def filters(self) -> InvoiceFilters:
        """The filters currently in force."""
        return self.current_filters.value

    @property
    def error(self) -> str | None:
        """The latest validation error, or None."""
        return self.validation_error.value

    def update(self, filters: InvoiceFilters | None) -> bool:
        """
        Validate and publish a complete filter set.

        Inverted dates are swapped silently. If the result still fails
        validation, the error is published and the previous filters stay in
        force.

        Returns:
            True when the filters were published.
        """
        if filters is None:
            LOG.warning("Rejected filter update: no filters given")
            self.validation_error.set(NULL_FILTERS_ERROR)
            return False

        corrected = swap_inverted_dates(filters)
        if corrected is not filters:
            LOG.info(
                "Swapped inverted dates: %s - %s",
                corrected.start_date,
                corrected.end_date,
            )
        return self._publish(corrected)

    def update_single_field(self, filters: InvoiceFilters | None) -> bool:
        """
        Publish filters in which a single field (checkbox, date) changed.

        A date endpoint moved past the other one drags the other endpoint
        with it instead of swapping.

        Returns:
            True when the filters were published.
        """
        if filters is None:
            LOG.warning("Rejected single field update: no filters given")
            self.validation_error.set(NULL_FILTERS_ERROR)
            return False
        return self._publish(clamp_opposite_date(self._published_start, filters))

    def set_start_date(self, value: date | None) -> bool:
        """Change only the start date."""
        filters = self.filters.copy()
        filters.start_date = value
        return self.update_single_field(filters)

    def set_end_date(self, value: date | None) -> bool:
        """Change only the end date."""
        filters = self.filters.copy()
        filters.end_date = value
        return self.update_single_field(filters)

    def toggle_status(self, code: str, checked: bool) -> bool:
        """Add or remove a status code from the selection."""
        filters = self.filters.copy()
        if checked:
            filters.filtered_states.add(code)
        else:
            filters.filtered_states.discard(code)
        return self.update_single_field(filters)

    def set_amount_range(self, min_amount: float, max_amount: float | None) -> bool:
        """Change both amount bounds, as a dual-handle slider commits them."""
        filters = self.filters.copy()
        filters.min_amount = min_amount
        filters.max_amount = max_amount
        return self.update_single_field(filters)

    def reset_filters(self, invoices: Sequence[Invoice] | None) -> None:
        """
        Publish default filters bounded by the dataset's largest amount.

        Args:
            invoices: The loaded invoices; None is treated as empty.
        """
        ceiling = statistics.max_amount(invoices)
        self._reset_ceiling = ceiling
        self._published_start = None
        self.current_filters.set(InvoiceFilters(min_amount=0.0, max_amount=ceiling))
        self.validation_error.set(None)
        LOG.info("Filters reset, amount ceiling: %s", ceiling)

    def has_active_filters(self) -> bool:
        """Return True if any constraint would narrow the invoice list."""
        filters = self.filters
        if filters.filtered_states:
            return True
        if filters.start_date is not None or filters.end_date is not None:
            return True
        if filters.min_amount > 0:
            return True
        if is_unbounded(filters.max_amount):
            return False
        if self._reset_ceiling is not None and filters.max_amount == self._reset_ceiling:
            return False
        return True

    def apply_current_filters(
        self, invoices: Sequence[Invoice] | None
    ) -> list[Invoice]:
        """
        Filter the invoices with the current filters.

        Absent constraints are resolved first: an empty status selection
        becomes every known status, a missing start date becomes the oldest
        invoice date and a missing end date the newest one (today if the
        dataset has no dates).

        Args:
            invoices: The invoices to filter; None is treated as empty.

        Returns:
            The matching invoices in their original order.
        """
        if not invoices:
            return []

        filters = self.filters
        status_codes = filters.filtered_states or self._status_codes
        start = filters.start_date or statistics.oldest_date(invoices)
        end = (
            filters.end_date or statistics.newest_date(invoices) or self._today()
        )

        result = self._filter_function(
            invoices,
            status_codes,
            start,
            end,
            filters.min_amount,
            filters.max_amount,
        )
        LOG.info("Applied filters: %d/%d invoices match", len(result), len(invoices))
        return result

    def _publish(self, filters: InvoiceFilters) -> bool:
        if not is_valid_range(filters.start_date, filters.end_date):
            LOG.warning(
                "Rejected filter update: %s is after %s",
                filters.start_date,
                filters.end_date,
            )
            self.validation_error.set(INVALID_RANGE_ERROR)
            return False

        self._reset_ceiling = None
        self._published_start = filters.start_date
        self.current_filters.set(filters)
        self.validation_error.set(None)
        return True
