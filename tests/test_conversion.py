from __future__ import annotations

import asyncio
from collections.abc import Iterable
from decimal import Decimal

import pytest

from token_bridge.application.services import ConversionService
from token_bridge.domain.assets import (
    ASSETS,
    all_asset_chain_combinations,
    assets_on_chain,
    create_asset_chain_key,
    find_asset,
    get_asset,
    parse_asset_chain_key,
)
from token_bridge.domain.conversion import (
    format_token,
    format_usd,
    parse_input_value,
    token_to_usd,
    usd_to_token,
    validate_token_input,
    validate_usd_input,
)
from token_bridge.domain.errors import PriceFeedError, UnknownAssetError
from token_bridge.domain.ports import PriceSource


class StaticPriceSource(PriceSource):
    def __init__(self, prices: dict[str, Decimal]) -> None:
        self.prices = prices
        self.requested: list[list[str]] = []

    async def get_usd_prices(self, price_ids: Iterable[str]) -> dict[str, Decimal]:
        ids = list(price_ids)
        self.requested.append(ids)
        return {price_id: self.prices[price_id] for price_id in ids if price_id in self.prices}


def test_usd_and_token_conversions() -> None:
    assert usd_to_token(Decimal("100"), Decimal("50000")) == Decimal("0.002")
    assert usd_to_token(Decimal("100"), Decimal("0")) == Decimal("0")
    assert token_to_usd(Decimal("0.5"), Decimal("64000")) == Decimal("32000.0")


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (Decimal("1234.5"), "$1,234.50"),
        (Decimal("0.005"), "$0.01"),
        (Decimal("-12"), "-$12.00"),
        (Decimal("0"), "$0.00"),
        (
            Decimal("123456789012345678901234567890.125"),
            "$123,456,789,012,345,678,901,234,567,890.13",
        ),
    ],
)
def test_format_usd(amount: Decimal, expected: str) -> None:
    assert format_usd(amount) == expected


def test_format_token_trims_trailing_zeros() -> None:
    assert format_token(Decimal("0.00123456789"), "wBTC") == "0.00123457 wBTC"
    assert format_token(Decimal("2"), "DAI") == "2 DAI"
    assert format_token(Decimal("10.5"), "USDC", 6) == "10.5 USDC"
    assert format_token(Decimal("2E+25"), "wBTC") == "20000000000000000000000000 wBTC"


@pytest.mark.parametrize(
    ("value", "accepted"),
    [
        ("", True),
        (".", True),
        ("12", True),
        ("12.", True),
        ("12.34", True),
        ("12.345", False),
        ("-1", False),
        ("1a", False),
    ],
)
def test_validate_usd_input(value: str, accepted: bool) -> None:
    assert validate_usd_input(value) is accepted


def test_validate_token_input_respects_max_decimals() -> None:
    assert validate_token_input("0.12345678") is True
    assert validate_token_input("0.123456789") is False
    assert validate_token_input("1.1234567", max_decimals=6) is False


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", Decimal("0")),
        (".", Decimal("0")),
        ("abc", Decimal("0")),
        ("Infinity", Decimal("0")),
        (" 1.5 ", Decimal("1.5")),
    ],
)
def test_parse_input_value(value: str, expected: Decimal) -> None:
    assert parse_input_value(value) == expected


def test_asset_lookup_is_case_insensitive() -> None:
    assert find_asset(" WBTC ") is ASSETS["wbtc"]
    assert find_asset("doge") is None
    with pytest.raises(UnknownAssetError, match="doge"):
        get_asset("doge")


def test_assets_on_chain() -> None:
    assert {asset.asset_id for asset in assets_on_chain(1)} == {"wbtc", "usdc", "dai"}
    assert [asset.asset_id for asset in assets_on_chain(137)] == ["usdc"]
    assert assets_on_chain(10) == []


def test_asset_chain_combinations_have_parseable_keys() -> None:
    combinations = all_asset_chain_combinations()

    assert {combination.key for combination in combinations} == {
        "wbtc-1",
        "wbtc-11155111",
        "usdc-1",
        "usdc-137",
        "dai-1",
        "dai-42161",
    }
    for combination in combinations:
        assert parse_asset_chain_key(combination.key) == (
            combination.asset_id,
            combination.chain_id,
        )


def test_asset_chain_key_parsing() -> None:
    assert create_asset_chain_key("WBTC", 1) == "wbtc-1"
    assert parse_asset_chain_key("wrapped-btc-137") == ("wrapped-btc", 137)
    assert parse_asset_chain_key("wbtc") is None
    assert parse_asset_chain_key("-1") is None
    assert parse_asset_chain_key("wbtc-mainnet") is None


def test_quote_from_usd() -> None:
    source = StaticPriceSource({"wrapped-bitcoin": Decimal("50000")})
    service = ConversionService(source)

    quote = asyncio.run(service.quote("wbtc", usd=Decimal("100")))

    assert quote.amount == Decimal("0.002")
    assert quote.formatted_amount == "0.002 wBTC"
    assert quote.formatted_usd == "$100.00"
    assert quote.price_usd == Decimal("50000")
    assert source.requested == [["wrapped-bitcoin"]]


def test_quote_from_token_amount() -> None:
    service = ConversionService(StaticPriceSource({"usd-coin": Decimal("1")}))

    quote = asyncio.run(service.quote("USDC", amount=Decimal("10")))

    assert quote.asset_id == "usdc"
    assert quote.usd == Decimal("10")
    assert quote.formatted_usd == "$10.00"
    assert quote.formatted_amount == "10 USDC"
    assert quote.model_dump(by_alias=True)["priceUsd"] == Decimal("1")


@pytest.mark.parametrize(
    "kwargs",
    [{}, {"usd": Decimal("1"), "amount": Decimal("1")}],
)
def test_quote_requires_exactly_one_side(kwargs: dict[str, Decimal]) -> None:
    service = ConversionService(StaticPriceSource({}))

    with pytest.raises(ValueError, match="exactly one"):
        asyncio.run(service.quote("dai", **kwargs))


def test_quote_without_price_raises_price_feed_error() -> None:
    service = ConversionService(StaticPriceSource({}))

    with pytest.raises(PriceFeedError, match="dai"):
        asyncio.run(service.quote("dai", usd=Decimal("5")))
