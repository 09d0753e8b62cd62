"""Ports for the transfer backend, price feed, and timing."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from decimal import Decimal
from typing import Protocol

from token_bridge.domain.transfer_models import TransferRequest

SleepFunction = Callable[[float], Awaitable[None]]


class TransferBackend(Protocol):
    """Outbound port to the service that accepts bridge transfers."""

    async def submit_transfer(self, request: TransferRequest) -> str:
        """Submit a transfer and return the backend transaction id.

        Raises `TransferRejectedError` when the backend declines and
        `TransferTransportError` when the round trip fails.
        """


class PriceSource(Protocol):
    """Outbound port for USD token prices."""

    async def get_usd_prices(self, price_ids: Iterable[str]) -> dict[str, Decimal]:
        """Return positive USD prices keyed by price-feed id."""


__all__ = ["PriceSource", "SleepFunction", "TransferBackend"]
