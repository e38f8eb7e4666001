"""
Errors raised by invoice data services.

The filter engine never raises; these describe failures to load the invoice
collection. classify() turns httpx exceptions into one of the kinds below so
the presentation layer can pick a message without knowing about httpx.
"""

import json

import httpx


class InvoiceServiceError(Exception):
    """Base class for invoice loading failures."""


class NetworkError(InvoiceServiceError):
    """The backend could not be reached (no connection, timeout)."""


class ServerError(InvoiceServiceError):
    """The backend answered with an HTTP error status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PayloadError(InvoiceServiceError):
    """The backend answered with a body that is not an invoice listing."""


def classify(exc: BaseException) -> InvoiceServiceError:
    """
    Map an exception raised while loading invoices to an InvoiceServiceError.

    Args:
        exc: The original exception.

    Returns:
        The matching InvoiceServiceError (exc itself if it already is one).
    """
    if isinstance(exc, InvoiceServiceError):
        return exc
    if isinstance(exc, httpx.HTTPStatusError):
        code = exc.response.status_code
        return ServerError(f"HTTP {code}", status_code=code)
    if isinstance(exc, httpx.TransportError):
        return NetworkError(str(exc) or type(exc).__name__)
    if isinstance(exc, (json.JSONDecodeError, ValueError)):
        return PayloadError(str(exc))
    return InvoiceServiceError(str(exc) or type(exc).__name__)


def user_message(error: InvoiceServiceError) -> str:
    """Return a human-readable message for an invoice loading failure."""
    if isinstance(error, NetworkError):
        return "No internet connection. Check your network."
    if isinstance(error, ServerError):
        detail = f" ({error})" if str(error) else ""
        return f"The server is not responding correctly{detail}."
    if isinstance(error, PayloadError):
        return "The server sent invoices in an unexpected format."
    detail = f": {error}" if str(error) else ""
    return f"Unexpected error{detail}."
