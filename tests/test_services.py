"""Tests for the invoice services and the service factory."""

from datetime import date

import httpx
import pytest

from invoice_filters.config import Backend, ServiceConfig
from invoice_filters.data.demo_invoices import DEMO_SCENARIOS
from invoice_filters.models.invoice import Invoice
from invoice_filters.services import (
    DemoInvoiceService,
    NetworkError,
    PayloadError,
    RemoteInvoiceService,
    ServerError,
    build_invoice_service,
)
from invoice_filters.services.invoice_service_remote import parse_invoices

BASE_URL = "https://invoices.test/api/"


def _client(handler):
    return httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(handler))


def _json_handler(payload, calls=None):
    def handler(request):
        if calls is not None:
            calls.append(request.url)
        return httpx.Response(200, json=payload)

    return handler


def _failing_handler(request):
    raise httpx.ConnectError("no route", request=request)


class TestDemoInvoiceService:
    """Tests for DemoInvoiceService."""

    def test_scenarios_cycle(self):
        """Test that refresh moves through every scenario and wraps."""
        service = DemoInvoiceService()
        seen = []
        for _ in range(len(DEMO_SCENARIOS) + 1):
            seen.append(service.list_invoices())
            service.refresh()
        assert seen[0] == DEMO_SCENARIOS[0]
        assert seen[1] == DEMO_SCENARIOS[1]
        assert seen[-1] == seen[0]

    def test_injected_invoices(self, invoices):
        """Test serving a custom list."""
        service = DemoInvoiceService(invoices)
        result = service.list_invoices()
        assert result == invoices
        result.clear()
        assert service.list_invoices() == invoices


class TestParseInvoices:
    """Tests for parse_invoices()."""

    def test_listing(self, listing_payload):
        """Test parsing a well-formed listing."""
        result = parse_invoices(listing_payload)
        assert result == [
            Invoice("PENDING", 54.56, date(2025, 1, 20), invoice_id=1),
            Invoice("PAID", 67.54, date(2024, 12, 18), invoice_id=2),
            Invoice("CANCELLED", 12.0, date(2024, 11, 5), invoice_id=3),
        ]

    def test_lenient_fields(self):
        """Test unknown labels, bad dates and missing amounts."""
        result = parse_invoices(
            {"facturas": [{"descEstado": "Devuelta", "fecha": "yesterday"}]}
        )
        assert result == [Invoice("UNKNOWN", 0.0, None, invoice_id=1)]

    def test_empty_listing(self):
        """Test a payload without invoices."""
        assert parse_invoices({"numFacturas": 0, "facturas": []}) == []
        assert parse_invoices({}) == []

    @pytest.mark.parametrize("payload", [[], "text", None, {"facturas": ["x"]}])
    def test_malformed(self, payload):
        """Test that non-listings are rejected."""
        with pytest.raises(PayloadError):
            parse_invoices(payload)


class TestRemoteInvoiceService:
    """Tests for RemoteInvoiceService."""

    def test_downloads_and_caches(self, disk_cache, listing_payload):
        """Test that a fresh cached payload avoids a second request."""
        calls = []
        service = RemoteInvoiceService(
            BASE_URL, disk_cache, client=_client(_json_handler(listing_payload, calls))
        )
        first = service.list_invoices()
        second = service.list_invoices()
        assert len(first) == 3
        assert second == first
        assert len(calls) == 1
        assert str(calls[0]) == BASE_URL + "invoices.json"

    def test_stale_cache_refetches(self, disk_cache, listing_payload):
        """Test that an expired payload is downloaded again."""
        calls = []
        service = RemoteInvoiceService(
            BASE_URL,
            disk_cache,
            cache_ttl=0,
            client=_client(_json_handler(listing_payload, calls)),
        )
        disk_cache.set(f"invoices:{BASE_URL}", {"facturas": []})
        assert len(service.list_invoices()) == 3
        assert len(calls) == 1

    def test_falls_back_to_cache_when_offline(self, disk_cache, listing_payload):
        """Test serving the last payload when the download fails."""
        disk_cache.set(f"invoices:{BASE_URL}", listing_payload)
        service = RemoteInvoiceService(
            BASE_URL, disk_cache, client=_client(_failing_handler)
        )
        assert len(service.list_invoices()) == 3

    def test_offline_without_cache(self, disk_cache):
        """Test that a failed first download raises a network error."""
        service = RemoteInvoiceService(
            BASE_URL, disk_cache, client=_client(_failing_handler)
        )
        with pytest.raises(NetworkError):
            service.list_invoices()

    def test_server_error(self, disk_cache):
        """Test that HTTP errors are classified."""
        service = RemoteInvoiceService(
            BASE_URL,
            disk_cache,
            client=_client(lambda request: httpx.Response(500)),
        )
        with pytest.raises(ServerError) as info:
            service.list_invoices()
        assert info.value.status_code == 500

    def test_bad_payload_is_not_cached(self, disk_cache):
        """Test that malformed bodies raise and leave the cache empty."""
        service = RemoteInvoiceService(
            BASE_URL,
            disk_cache,
            client=_client(lambda request: httpx.Response(200, text="<html>")),
        )
        with pytest.raises(PayloadError):
            service.list_invoices()
        assert disk_cache.get(f"invoices:{BASE_URL}") is None

    def test_refresh_replaces_cache(self, disk_cache, listing_payload):
        """Test that refresh always downloads."""
        calls = []
        service = RemoteInvoiceService(
            BASE_URL, disk_cache, client=_client(_json_handler(listing_payload, calls))
        )
        service.list_invoices()
        service.refresh()
        assert len(calls) == 2

    def test_refresh_raises(self, disk_cache, listing_payload):
        """Test that refresh reports failures even with a cached copy."""
        disk_cache.set(f"invoices:{BASE_URL}", listing_payload)
        service = RemoteInvoiceService(
            BASE_URL, disk_cache, client=_client(_failing_handler)
        )
        with pytest.raises(NetworkError):
            service.refresh()


class TestBuildInvoiceService:
    """Tests for the service factory."""

    def test_mock_backend(self):
        """Test that the mock backend serves demo data."""
        service = build_invoice_service(ServiceConfig(backend=Backend.MOCK))
        assert isinstance(service, DemoInvoiceService)

    @pytest.mark.parametrize("backend", [Backend.PRIMARY, Backend.SECONDARY])
    def test_remote_backends(self, backend, tmp_path):
        """Test that each remote backend gets its own endpoint."""
        config = ServiceConfig(backend=backend, cache_dir=tmp_path)
        service = build_invoice_service(config)
        try:
            assert isinstance(service, RemoteInvoiceService)
            assert service.base_url == config.base_url
        finally:
            service.close()

    def test_services_are_not_shared(self):
        """Test that each call builds a new service."""
        config = ServiceConfig()
        assert build_invoice_service(config) is not build_invoice_service(config)
