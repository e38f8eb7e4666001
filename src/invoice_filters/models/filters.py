"""
Filter state models.

InvoiceFilters is the constraint set the user builds in the filter panel.
DatasetStatistics holds the dataset-dependent bounds that the filter panel
uses to limit its date pickers and amount slider.
"""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable


def is_unbounded(amount: float | None) -> bool:
    """Return True when an upper amount bound means "no limit"."""
    return amount is None or math.isinf(amount)


@dataclass
class InvoiceFilters:
    """
    The constraint set applied to the invoice list.

    Attributes:
        start_date: Inclusive lower date bound, None when not chosen.
        end_date: Inclusive upper date bound, None when not chosen.
        min_amount: Inclusive lower amount bound.
        max_amount: Inclusive upper amount bound, None for unbounded.
        filtered_states: Status codes to keep. Empty means every status.
    """

    start_date: date | None = None
    end_date: date | None = None
    min_amount: float = 0.0
    max_amount: float | None = None
    filtered_states: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        # Accept any iterable of codes (lists from checkboxes, enum members).
        self.filtered_states = _normalize_states(self.filtered_states)

    def copy(self) -> "InvoiceFilters":
        """Return an independent copy, including the status set."""
        return InvoiceFilters(
            start_date=self.start_date,
            end_date=self.end_date,
            min_amount=self.min_amount,
            max_amount=self.max_amount,
            filtered_states=set(self.filtered_states),
        )


def _normalize_states(states: Iterable[str] | None) -> set[str]:
    if not states:
        return set()
    # str(Enum) would give "InvoiceStatus.PAID", so read .value when present.
    return {getattr(state, "value", state) for state in states}


@dataclass(frozen=True)
class DatasetStatistics:
    """
    Bounds derived from the loaded invoices.

    Attributes:
        oldest_date: Earliest invoice date, None for an empty dataset.
        newest_date: Latest invoice date, None for an empty dataset.
        max_amount: Largest invoice amount, 0 for an empty dataset.
    """

    oldest_date: date | None = None
    newest_date: date | None = None
    max_amount: float = 0.0

    def start_date_bounds(
        self, filters: InvoiceFilters
    ) -> tuple[date | None, date | None]:
        """
        Return the selectable range for the start date picker.

        The start date may not pass the chosen end date, or the newest
        invoice when no end date is chosen.
        """
        return self.oldest_date, filters.end_date or self.newest_date

    def end_date_bounds(
        self, filters: InvoiceFilters
    ) -> tuple[date | None, date | None]:
        """Return the selectable range for the end date picker."""
        return filters.start_date or self.oldest_date, self.newest_date
