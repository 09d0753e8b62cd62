"""USD <-> token quote use-case service."""

from __future__ import annotations

from decimal import Decimal

from token_bridge.domain.assets import get_asset
from token_bridge.domain.conversion import format_token, format_usd, token_to_usd, usd_to_token
from token_bridge.domain.errors import PriceFeedError
from token_bridge.domain.market_models import ConversionQuote
from token_bridge.domain.ports import PriceSource


class ConversionService:
    """Quote conversions between USD and catalog tokens."""

    def __init__(self, price_source: PriceSource) -> None:
        self._price_source = price_source

    async def usd_price(self, asset_id: str) -> Decimal:
        """Return the current USD price of one token."""

        asset = get_asset(asset_id)
        prices = await self._price_source.get_usd_prices([asset.price_id])
        price = prices.get(asset.price_id)
        if price is None:
            raise PriceFeedError(f"No USD price available for '{asset.asset_id}'.")
        return price

    async def quote(
        self,
        asset_id: str,
        *,
        usd: Decimal | None = None,
        amount: Decimal | None = None,
    ) -> ConversionQuote:
        """Convert exactly one of `usd` or token `amount` into the other."""

        if (usd is None) == (amount is None):
            raise ValueError("Provide exactly one of usd or amount.")

        asset = get_asset(asset_id)
        price = await self.usd_price(asset.asset_id)
        if usd is not None:
            token_amount = usd_to_token(usd, price)
            usd_amount = usd
        else:
            assert amount is not None
            token_amount = amount
            usd_amount = token_to_usd(amount, price)

        return ConversionQuote(
            asset_id=asset.asset_id,
            symbol=asset.symbol,
            price_usd=price,
            usd=usd_amount,
            amount=token_amount,
            formatted_usd=format_usd(usd_amount),
            formatted_amount=format_token(token_amount, asset.symbol, asset.display_decimals),
        )


__all__ = ["ConversionService"]
