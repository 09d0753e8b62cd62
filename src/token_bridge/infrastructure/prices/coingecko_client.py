"""CoinGecko-compatible USD price client with a TTL cache."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from token_bridge.domain.errors import PriceFeedError
from token_bridge.domain.ports import PriceSource

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class _CachedPrices:
    fetched_at: float
    prices: dict[str, Decimal]


class CoinGeckoPriceClient(PriceSource):
    """Fetch USD prices from `/simple/price` and cache them per id set."""

    def __init__(
        self,
        base_url: str = "https://api.coingecko.com/api/v3",
        timeout_seconds: float = 10.0,
        cache_ttl_seconds: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._base_url = base_url.strip().rstrip("/")
        if not self._base_url:
            raise PriceFeedError("Price API base URL cannot be empty.")
        self._timeout_seconds = timeout_seconds
        self._cache_ttl_seconds = max(cache_ttl_seconds, 0.0)
        self._transport = transport
        self._clock = clock
        self._cache: dict[tuple[str, ...], _CachedPrices] = {}
        self._lock = asyncio.Lock()

    async def get_usd_prices(self, price_ids: Iterable[str]) -> dict[str, Decimal]:
        """Return positive USD prices for `price_ids`, served from cache while fresh."""

        key = tuple(sorted({price_id.strip() for price_id in price_ids if price_id.strip()}))
        if not key:
            return {}

        async with self._lock:
            cached = self._cache.get(key)
            if cached is not None and self._clock() - cached.fetched_at < self._cache_ttl_seconds:
                return dict(cached.prices)

            prices = await self._fetch(key)
            self._cache[key] = _CachedPrices(fetched_at=self._clock(), prices=prices)
            return dict(prices)

    def invalidate(self) -> None:
        """Drop every cached price set."""

        self._cache.clear()

    async def _fetch(self, price_ids: tuple[str, ...]) -> dict[str, Decimal]:
        url = f"{self._base_url}/simple/price"
        params = {"ids": ",".join(price_ids), "vs_currencies": "usd"}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as http_client:
                response = await http_client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise PriceFeedError(f"Failed to fetch token prices: {exc}") from exc

        if not response.is_success:
            raise PriceFeedError(
                f"Failed to fetch token prices: {response.status_code} "
                f"{response.reason_phrase}".strip()
            )
        try:
            payload = response.json()
        except ValueError as exc:
            raise PriceFeedError("Price API returned invalid JSON.") from exc
        if not isinstance(payload, dict):
            raise PriceFeedError("Price API returned non-object JSON.")

        prices = self._positive_prices(payload)
        logger.debug("Fetched %s USD prices for %s.", len(prices), ",".join(price_ids))
        return prices

    def _positive_prices(self, payload: dict[str, Any]) -> dict[str, Decimal]:
        prices: dict[str, Decimal] = {}
        for price_id, entry in payload.items():
            if not isinstance(entry, dict):
                continue
            raw_price = entry.get("usd")
            if isinstance(raw_price, bool) or not isinstance(raw_price, int | float | str):
                continue
            try:
                price = Decimal(str(raw_price))
            except InvalidOperation:
                continue
            if price.is_finite() and price > 0:
                prices[price_id] = price
        return prices


__all__ = ["CoinGeckoPriceClient"]
