"""
Invoice domain models.

An invoice, as far as the filter engine is concerned, is a status code, an
amount and a calendar date. The status codes form a closed enumeration;
each code also carries the label the backend uses for it, so payloads can be
mapped onto codes without the rest of the package knowing the labels.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from invoice_filters.utils import format_currency, format_date


class InvoiceStatus(str, Enum):
    """Lifecycle state of an invoice."""

    PENDING = "PENDING"
    PAID = "PAID"
    CANCELLED = "CANCELLED"
    FIXED_FEE = "FIXED_FEE"
    PAYMENT_PLAN = "PAYMENT_PLAN"
    UNKNOWN = "UNKNOWN"

    @property
    def server_value(self) -> str:
        """Return the label the backend uses for this status."""
        return _SERVER_VALUES[self]

    @property
    def label(self) -> str:
        """Return a human readable label for checkboxes and list rows."""
        return self.value.replace("_", " ").capitalize()

    @classmethod
    def from_server_value(cls, value: str | None) -> "InvoiceStatus":
        """
        Map a backend label or a status code to the enum.

        Matching is case-insensitive. Anything unrecognised maps to UNKNOWN.
        """
        if value is None:
            return cls.UNKNOWN
        normalized = value.strip().lower()
        for status in cls:
            if normalized in (status.server_value.lower(), status.value.lower()):
                return status
        return cls.UNKNOWN


_SERVER_VALUES = {
    InvoiceStatus.PENDING: "Pendiente de pago",
    InvoiceStatus.PAID: "Pagada",
    InvoiceStatus.CANCELLED: "Anulada",
    InvoiceStatus.FIXED_FEE: "Cuota fija",
    InvoiceStatus.PAYMENT_PLAN: "Plan de pago",
    InvoiceStatus.UNKNOWN: "",
}

# Every known status code, UNKNOWN included so unrecognised rows still match
# an empty ("all statuses") selection.
ALL_STATUS_CODES: frozenset[str] = frozenset(status.value for status in InvoiceStatus)


@dataclass(frozen=True, slots=True)
class Invoice:
    """Primary dataclass for invoices. Read-only to the filter engine."""

    status: str
    amount: float
    date: date | None
    invoice_id: int = 0

    @property
    def status_enum(self) -> InvoiceStatus:
        """Return the status as an InvoiceStatus, UNKNOWN when unrecognised."""
        return InvoiceStatus.from_server_value(self.status)

    def formatted_amount(self, currency: str = "EUR") -> str:
        """Return the amount formatted for display."""
        return format_currency(self.amount, currency)

    def formatted_date(self) -> str:
        """Return the invoice date formatted for display or the N/A label."""
        return format_date(self.date) or "N/A"
