"""
Demo invoice scenarios used by DemoInvoiceService.

Each scenario mirrors one of the canned backend responses the app was
developed against: everything unpaid, a mix of paid and unpaid, everything
paid, and a spread of every status.
"""

from datetime import date

from invoice_filters.models.invoice import Invoice, InvoiceStatus

_PENDING = InvoiceStatus.PENDING.value
_PAID = InvoiceStatus.PAID.value
_CANCELLED = InvoiceStatus.CANCELLED.value
_FIXED_FEE = InvoiceStatus.FIXED_FEE.value
_PAYMENT_PLAN = InvoiceStatus.PAYMENT_PLAN.value

ALL_PENDING: list[Invoice] = [
    Invoice(_PENDING, 54.56, date(2025, 1, 20), invoice_id=1),
    Invoice(_PENDING, 67.54, date(2024, 12, 18), invoice_id=2),
    Invoice(_PENDING, 56.38, date(2024, 11, 19), invoice_id=3),
    Invoice(_PENDING, 25.14, date(2024, 10, 20), invoice_id=4),
    Invoice(_PENDING, 48.98, date(2024, 9, 17), invoice_id=5),
]

SOME_PAID: list[Invoice] = [
    Invoice(_PENDING, 54.56, date(2025, 1, 20), invoice_id=1),
    Invoice(_PENDING, 67.54, date(2024, 12, 18), invoice_id=2),
    Invoice(_PAID, 56.38, date(2024, 11, 19), invoice_id=3),
    Invoice(_PAID, 25.14, date(2024, 10, 20), invoice_id=4),
    Invoice(_PAID, 48.98, date(2024, 9, 17), invoice_id=5),
    Invoice(_PAID, 91.02, date(2024, 8, 16), invoice_id=6),
]

ALL_PAID: list[Invoice] = [
    Invoice(_PAID, 54.56, date(2025, 1, 20), invoice_id=1),
    Invoice(_PAID, 67.54, date(2024, 12, 18), invoice_id=2),
    Invoice(_PAID, 56.38, date(2024, 11, 19), invoice_id=3),
    Invoice(_PAID, 25.14, date(2024, 10, 20), invoice_id=4),
]

MIXED_STATUSES: list[Invoice] = [
    Invoice(_PAID, 100.0, date(2024, 1, 5), invoice_id=1),
    Invoice(_PENDING, 50.0, date(2024, 3, 1), invoice_id=2),
    Invoice(_CANCELLED, 200.0, date(2024, 2, 15), invoice_id=3),
    Invoice(_FIXED_FEE, 35.5, date(2024, 4, 10), invoice_id=4),
    Invoice(_PAYMENT_PLAN, 120.75, date(2024, 5, 22), invoice_id=5),
    Invoice(_PAID, 80.2, date(2024, 6, 30), invoice_id=6),
]

DEMO_SCENARIOS: list[list[Invoice]] = [
    MIXED_STATUSES,
    ALL_PENDING,
    SOME_PAID,
    ALL_PAID,
]
