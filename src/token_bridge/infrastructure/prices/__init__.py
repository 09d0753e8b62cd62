"""Price feed adapters."""

from token_bridge.infrastructure.prices.coingecko_client import CoinGeckoPriceClient

__all__ = ["CoinGeckoPriceClient"]
