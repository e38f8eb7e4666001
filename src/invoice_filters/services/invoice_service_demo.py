"""
Demo implementation of InvoiceService using static in-memory data.

This service is useful for:
- Local development without a reachable backend
- Testing the filter panel with realistic data
- Demonstrating the application offline

Each refresh() moves on to the next scenario, so pulling to refresh shows
how the filters behave on different datasets.
"""

from typing import Sequence

from invoice_filters.data.demo_invoices import DEMO_SCENARIOS
from invoice_filters.lib import logs
from invoice_filters.models.invoice import Invoice
from invoice_filters.services.invoice_service import InvoiceService

LOG = logs.logger(__file__)


class DemoInvoiceService(InvoiceService):
    """
    In-memory invoice service backed by static demo scenarios.

    Attributes:
        scenario_index: Index of the scenario currently served.
    """

    def __init__(self, invoices: Sequence[Invoice] | None = None) -> None:
        """
        Initialize with invoice data.

        Args:
            invoices: Custom invoice list, or None to cycle DEMO_SCENARIOS.
        """
        self._scenarios: list[list[Invoice]] = (
            [list(invoices)] if invoices is not None else DEMO_SCENARIOS
        )
        self.scenario_index = 0

    def list_invoices(self) -> list[Invoice]:
        """Return a copy of the current scenario."""
        invoices = list(self._scenarios[self.scenario_index])
        LOG.info(
            "list_invoices - scenario:%s count:%s", self.scenario_index, len(invoices)
        )
        return invoices

    def refresh(self) -> None:
        """Advance to the next scenario, wrapping around."""
        self.scenario_index = (self.scenario_index + 1) % len(self._scenarios)
