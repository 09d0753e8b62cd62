from __future__ import annotations

import asyncio
from decimal import Decimal

import httpx
import pytest

from token_bridge.domain.errors import PriceFeedError
from token_bridge.infrastructure.prices import CoinGeckoPriceClient


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def _client(
    handler, clock: FakeClock | None = None, cache_ttl_seconds: float = 60.0
) -> CoinGeckoPriceClient:
    return CoinGeckoPriceClient(
        base_url="https://prices.example.com/api/v3/",
        cache_ttl_seconds=cache_ttl_seconds,
        transport=httpx.MockTransport(handler),
        clock=clock or FakeClock(),
    )


def test_get_usd_prices_queries_simple_price_endpoint() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(
            200,
            json={"wrapped-bitcoin": {"usd": 64250.12}, "usd-coin": {"usd": 1}},
        )

    prices = asyncio.run(_client(handler).get_usd_prices(["wrapped-bitcoin", "usd-coin"]))

    assert prices == {"wrapped-bitcoin": Decimal("64250.12"), "usd-coin": Decimal("1")}
    assert len(requests) == 1
    request = requests[0]
    assert request.method == "GET"
    assert request.url.path == "/api/v3/simple/price"
    assert request.url.params["ids"] == "usd-coin,wrapped-bitcoin"
    assert request.url.params["vs_currencies"] == "usd"


def test_prices_are_cached_until_ttl_expires() -> None:
    calls: list[httpx.Request] = []
    clock = FakeClock()

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"dai": {"usd": 1.001}})

    client = _client(handler, clock)

    async def scenario() -> None:
        await client.get_usd_prices(["dai"])
        clock.now += 59.0
        await client.get_usd_prices(["dai"])
        assert len(calls) == 1

        clock.now += 1.0
        await client.get_usd_prices(["dai"])
        assert len(calls) == 2

        client.invalidate()
        await client.get_usd_prices(["dai"])
        assert len(calls) == 3

    asyncio.run(scenario())


def test_cached_prices_are_not_shared_by_reference() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"dai": {"usd": 1}})

    client = _client(handler)

    async def scenario() -> None:
        first = await client.get_usd_prices(["dai"])
        first["dai"] = Decimal("0")
        second = await client.get_usd_prices(["dai"])
        assert second == {"dai": Decimal("1")}

    asyncio.run(scenario())


def test_non_positive_and_malformed_prices_are_dropped() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "dai": {"usd": 0},
                "usd-coin": {"usd": -1},
                "wrapped-bitcoin": {"usd": "not-a-number"},
                "ethereum": {"eur": 3000},
                "weird": [1, 2],
                "flag": {"usd": True},
                "tether": {"usd": "0.9998"},
            },
        )

    prices = asyncio.run(
        _client(handler).get_usd_prices(
            ["dai", "usd-coin", "wrapped-bitcoin", "ethereum", "weird", "flag", "tether"]
        )
    )

    assert prices == {"tether": Decimal("0.9998")}


def test_empty_id_list_skips_network() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("unexpected request")

    assert asyncio.run(_client(handler).get_usd_prices(["", "  "])) == {}


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(429, json={"status": {"error_code": 429}}),
        httpx.Response(200, text="not json"),
        httpx.Response(200, json=["dai"]),
    ],
)
def test_bad_responses_raise_price_feed_error(response: httpx.Response) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return response

    with pytest.raises(PriceFeedError):
        asyncio.run(_client(handler).get_usd_prices(["dai"]))


def test_transport_error_raises_price_feed_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("dns failure", request=request)

    with pytest.raises(PriceFeedError, match="Failed to fetch token prices: dns failure"):
        asyncio.run(_client(handler).get_usd_prices(["dai"]))


def test_empty_base_url_is_rejected() -> None:
    with pytest.raises(PriceFeedError):
        CoinGeckoPriceClient(base_url=" / ")
