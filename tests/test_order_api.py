"""
Tests for the HTTP generation client.

These tests verify:
- The request hits POST /api/generate-order with the JSON contract
- Server-provided errors are surfaced verbatim
- Missing/unparsable error bodies fall back to a generic message
- The /health check never raises
"""

import json

import httpx
import pytest

from adapters.order_api import FAILED_TO_GENERATE, HttpOrderGenerator
from core.domain.errors import TransportError
from core.domain.mode import Mode
from core.domain.models import GenerationRequest, RawInputPair


def _request(mode=Mode.NORMAL):
    pair = RawInputPair(list_menu="Fried Rice\nNoodles", current_orders="1. Alice: fried rice")
    return GenerationRequest.from_pair(pair, mode)


def _generator(settings, handler):
    return HttpOrderGenerator(settings, transport=httpx.MockTransport(handler))


class TestGenerate:
    """Test suite for HttpOrderGenerator.generate()."""

    async def test_posts_contract_payload(self, settings):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"generatedMessage": "1. Alice - Fried Rice"})

        message = await _generator(settings, handler).generate(_request())

        assert message == "1. Alice - Fried Rice"
        assert len(seen) == 1
        sent = seen[0]
        assert sent.method == "POST"
        assert str(sent.url) == "http://fast-order.test/api/generate-order"
        assert sent.headers["content-type"] == "application/json"
        assert json.loads(sent.content) == {
            "listMenu": "Fried Rice\nNoodles",
            "currentOrders": "1. Alice: fried rice",
            "mode": "normal",
        }

    async def test_server_error_is_surfaced_verbatim(self, settings):
        def handler(request):
            return httpx.Response(500, json={"error": "rate limited"})

        with pytest.raises(TransportError) as excinfo:
            await _generator(settings, handler).generate(_request(Mode.NITRO))

        assert excinfo.value.message == "rate limited"
        assert excinfo.value.status_code == 500

    async def test_error_without_reason_uses_fallback(self, settings):
        def handler(request):
            return httpx.Response(502, json={})

        with pytest.raises(TransportError) as excinfo:
            await _generator(settings, handler).generate(_request())

        assert excinfo.value.message == FAILED_TO_GENERATE == "Failed to generate order"

    async def test_unparsable_error_body_uses_fallback(self, settings):
        def handler(request):
            return httpx.Response(503, text="<html>Service Unavailable</html>")

        with pytest.raises(TransportError) as excinfo:
            await _generator(settings, handler).generate(_request())

        assert excinfo.value.message == "Failed to generate order"

    async def test_malformed_success_body_is_a_transport_error(self, settings):
        def handler(request):
            return httpx.Response(200, json={"message": "wrong key"})

        with pytest.raises(TransportError) as excinfo:
            await _generator(settings, handler).generate(_request())

        assert excinfo.value.message == "Failed to generate order"

    async def test_network_failure_is_a_transport_error(self, settings):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError) as excinfo:
            await _generator(settings, handler).generate(_request())

        assert excinfo.value.message == "connection refused"
        assert excinfo.value.status_code is None


class TestHealth:
    async def test_healthy(self, settings):
        def handler(request):
            assert request.url.path == "/health"
            return httpx.Response(200, text="OK")

        assert await _generator(settings, handler).check_health() == (True, "HTTP 200")

    async def test_unhealthy_status(self, settings):
        def handler(request):
            return httpx.Response(503)

        ok, detail = await _generator(settings, handler).check_health()
        assert not ok
        assert detail == "HTTP 503"

    async def test_unreachable(self, settings):
        def handler(request):
            raise httpx.ConnectError("no route to host", request=request)

        ok, detail = await _generator(settings, handler).check_health()
        assert not ok
        assert "no route to host" in detail
