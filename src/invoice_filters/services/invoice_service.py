"""
Abstract base class defining the invoice data access contract.

Implementations:
- DemoInvoiceService: Static in-memory scenarios for development/testing
- RemoteInvoiceService: HTTP backend with an on-disk payload cache
"""

from abc import ABC, abstractmethod

from invoice_filters.models.invoice import Invoice


class InvoiceService(ABC):
    """
    Abstract base class for invoice data access.

    The filter engine only reads the collection returned here; it never
    fetches or persists invoices itself.
    """

    @abstractmethod
    def list_invoices(self) -> list[Invoice]:
        """
        Return the full invoice collection.

        Raises:
            InvoiceServiceError: If the invoices cannot be loaded.
        """

    def refresh(self) -> None:
        """
        Discard any local copy so the next list_invoices() reloads.

        Default implementation does nothing.
        """
