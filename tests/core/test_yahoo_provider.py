"""
Tests for the Yahoo chart provider.

HTTP traffic is served by ``httpx.MockTransport``; nothing leaves the process.
"""

import httpx
import pytest

from candlefeed.core.data.providers import HttpConfig, YahooChartProvider, parse_chart_payload
from candlefeed.core.exceptions import (
    ErrorCode,
    UnknownUpstreamError,
    UpstreamMalformedError,
    UpstreamNotFoundError,
    UpstreamRateLimitedError,
)
from tests.helpers import chart_payload


def _provider(handler) -> YahooChartProvider:
    return YahooChartProvider(HttpConfig(base_url="https://chart.test"), transport=httpx.MockTransport(handler))


class TestHttpConfig:
    def test_defaults(self):
        config = HttpConfig()

        assert config.base_url == "https://query1.finance.yahoo.com"
        assert config.timeout == 30.0
        assert config.user_agent.startswith("Mozilla/5.0")

    def test_empty_base_url(self):
        with pytest.raises(ValueError, match="base_url cannot be empty"):
            HttpConfig(base_url="")

    def test_non_positive_timeout(self):
        with pytest.raises(ValueError, match="timeout must be positive"):
            HttpConfig(timeout=0)


class TestFetchQuotes:
    @pytest.mark.asyncio
    async def test_success_sends_expected_request(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=chart_payload())

        async with _provider(handler) as provider:
            block = await provider.fetch_quotes("INFY.NS", "5y", "1wk")

        assert block.timestamp == [1700000000, 1700086400]
        assert block.close == [104.0, 103.0]
        request = seen[0]
        assert request.url.path == "/v8/finance/chart/INFY.NS"
        assert request.url.params["range"] == "5y"
        assert request.url.params["interval"] == "1wk"
        assert request.url.params["events"] == "history"
        assert request.url.params["includeAdjustedClose"] == "true"
        assert request.headers["User-Agent"].startswith("Mozilla/5.0")

    @pytest.mark.asyncio
    async def test_404_is_not_found(self):
        provider = _provider(lambda request: httpx.Response(404, json={"chart": {"result": None}}))

        with pytest.raises(UpstreamNotFoundError) as exc_info:
            await provider.fetch_quotes("NOPE.NS", "1y", "1d")
        await provider.aclose()

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Stock symbol not found"

    @pytest.mark.asyncio
    async def test_429_is_rate_limited(self):
        provider = _provider(lambda request: httpx.Response(429, headers={"Retry-After": "30"}, text="slow down"))

        with pytest.raises(UpstreamRateLimitedError) as exc_info:
            await provider.fetch_quotes("INFY.NS", "1y", "1d")
        await provider.aclose()

        assert exc_info.value.status_code == 429
        assert exc_info.value.retry_after == 30
        assert exc_info.value.message == "Too many requests. Please try again later."

    @pytest.mark.asyncio
    async def test_server_error_is_unknown_failure(self):
        provider = _provider(lambda request: httpx.Response(503, text="unavailable"))

        with pytest.raises(UnknownUpstreamError) as exc_info:
            await provider.fetch_quotes("INFY.NS", "1y", "1d")
        await provider.aclose()

        assert exc_info.value.status_code == 500
        assert "503" in exc_info.value.details["error"]

    @pytest.mark.asyncio
    async def test_transport_error_is_unknown_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        provider = _provider(handler)
        with pytest.raises(UnknownUpstreamError) as exc_info:
            await provider.fetch_quotes("INFY.NS", "1y", "1d")
        await provider.aclose()

        assert "connection refused" in exc_info.value.cause

    @pytest.mark.asyncio
    async def test_invalid_json_is_unknown_failure(self):
        provider = _provider(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(UnknownUpstreamError):
            await provider.fetch_quotes("INFY.NS", "1y", "1d")
        await provider.aclose()

    @pytest.mark.asyncio
    async def test_empty_result_is_malformed(self):
        provider = _provider(lambda request: httpx.Response(200, json={"chart": {"result": [], "error": None}}))

        with pytest.raises(UpstreamMalformedError) as exc_info:
            await provider.fetch_quotes("INFY.NS", "1y", "1d")
        await provider.aclose()

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "No data available for this symbol"
        assert exc_info.value.error_code is ErrorCode.UPSTREAM_MALFORMED


class TestParseChartPayload:
    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"chart": None},
            {"chart": {"result": None}},
            {"chart": {"result": [None]}},
            {"chart": {"result": [{"indicators": {"quote": [{}]}}]}},
            {"chart": {"result": [{"timestamp": [1], "indicators": {"quote": []}}]}},
            [],
        ],
    )
    def test_malformed_documents(self, payload):
        with pytest.raises(UpstreamMalformedError):
            parse_chart_payload(payload, "X.NS")

    def test_nulls_are_preserved_for_the_normalizer(self):
        payload = chart_payload(open=[None, 102])

        block = parse_chart_payload(payload)

        assert block.open == [None, 102.0]

    def test_adjclose_is_read(self):
        payload = chart_payload()
        payload["chart"]["result"][0]["indicators"]["adjclose"] = [{"adjclose": [99.5, 98.5]}]

        assert parse_chart_payload(payload).adjclose == [99.5, 98.5]

    def test_missing_adjclose_falls_back_to_close(self):
        payload = chart_payload()
        del payload["chart"]["result"][0]["indicators"]["adjclose"]

        assert parse_chart_payload(payload).adjclose == [104.0, 103.0]
