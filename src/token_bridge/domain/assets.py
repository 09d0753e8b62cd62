"""Supported tokens and the chains they live on."""

from __future__ import annotations

from dataclasses import dataclass, field

from token_bridge.domain.errors import UnknownAssetError


@dataclass(slots=True, frozen=True)
class Chain:
    """EVM chain known to the bridge."""

    chain_id: int
    name: str
    testnet: bool = False


@dataclass(slots=True, frozen=True)
class ChainDeployment:
    """Token contract deployed on one chain."""

    address: str
    decimals: int


@dataclass(slots=True, frozen=True)
class AssetMetadata:
    """ERC-20 token metadata across chains."""

    asset_id: str
    symbol: str
    name: str
    decimals: int
    price_id: str
    display_decimals: int = 8
    icon: str | None = None
    chains: dict[int, ChainDeployment] = field(default_factory=dict)


@dataclass(slots=True, frozen=True)
class AssetChainCombination:
    """One asset on one chain."""

    asset_id: str
    chain_id: int
    asset: AssetMetadata
    chain: Chain

    @property
    def key(self) -> str:
        return create_asset_chain_key(self.asset_id, self.chain_id)


MAINNET = Chain(chain_id=1, name="Ethereum")
SEPOLIA = Chain(chain_id=11155111, name="Sepolia", testnet=True)
POLYGON = Chain(chain_id=137, name="Polygon")
ARBITRUM = Chain(chain_id=42161, name="Arbitrum One")

CHAINS: dict[int, Chain] = {
    chain.chain_id: chain for chain in (MAINNET, SEPOLIA, POLYGON, ARBITRUM)
}

ASSETS: dict[str, AssetMetadata] = {
    "wbtc": AssetMetadata(
        asset_id="wbtc",
        symbol="wBTC",
        name="Wrapped Bitcoin",
        decimals=8,
        price_id="wrapped-bitcoin",
        icon="https://assets.coingecko.com/coins/images/7598/standard/wrapped_bitcoin_wbtc.png",
        chains={
            MAINNET.chain_id: ChainDeployment(
                address="0x2260fac5e5542a773aa44fbcfedf7c193bc2c599", decimals=8
            ),
            SEPOLIA.chain_id: ChainDeployment(
                address="0x29f2D40B0605204364af54EC677bD022dA425d03", decimals=8
            ),
        },
    ),
    "usdc": AssetMetadata(
        asset_id="usdc",
        symbol="USDC",
        name="USD Coin",
        decimals=6,
        price_id="usd-coin",
        display_decimals=6,
        icon="https://assets.coingecko.com/coins/images/6319/standard/USD_Coin_icon.png",
        chains={
            MAINNET.chain_id: ChainDeployment(
                address="0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", decimals=6
            ),
            POLYGON.chain_id: ChainDeployment(
                address="0x3c499c542cEF5E3811e1192ce70d8cC03d5c3359", decimals=6
            ),
        },
    ),
    "dai": AssetMetadata(
        asset_id="dai",
        symbol="DAI",
        name="Dai Stablecoin",
        decimals=18,
        price_id="dai",
        icon="https://assets.coingecko.com/coins/images/9956/standard/Badge_Dai.png",
        chains={
            MAINNET.chain_id: ChainDeployment(
                address="0x6b175474e89094c44da98b954eedeac495271d0f", decimals=18
            ),
            ARBITRUM.chain_id: ChainDeployment(
                address="0xda10009cbd5d07dd0cecc66161fc93d7c9000da1", decimals=18
            ),
        },
    ),
}


def find_asset(asset_id: str) -> AssetMetadata | None:
    """Return asset metadata by id, case-insensitively."""

    return ASSETS.get(asset_id.strip().lower())


def get_asset(asset_id: str) -> AssetMetadata:
    """Return asset metadata or raise `UnknownAssetError`."""

    asset = find_asset(asset_id)
    if asset is None:
        raise UnknownAssetError(f"Unknown asset '{asset_id}'.")
    return asset


def assets_on_chain(chain_id: int) -> list[AssetMetadata]:
    """Return every asset deployed on `chain_id`."""

    return [asset for asset in ASSETS.values() if chain_id in asset.chains]


def all_asset_chain_combinations() -> list[AssetChainCombination]:
    """Return every (asset, chain) pair where the chain is known."""

    combinations: list[AssetChainCombination] = []
    for asset in ASSETS.values():
        for chain_id in asset.chains:
            chain = CHAINS.get(chain_id)
            if chain is None:
                continue
            combinations.append(
                AssetChainCombination(
                    asset_id=asset.asset_id,
                    chain_id=chain_id,
                    asset=asset,
                    chain=chain,
                )
            )
    return combinations


def create_asset_chain_key(asset_id: str, chain_id: int) -> str:
    """Build a composite key such as `wbtc-1`."""

    return f"{asset_id.lower()}-{chain_id}"


def parse_asset_chain_key(key: str) -> tuple[str, int] | None:
    """Split a composite key into (asset_id, chain_id).

    The chain id is the last dash-separated part so asset ids may contain
    dashes themselves. Returns None for malformed keys.
    """

    asset_id, separator, raw_chain_id = key.rpartition("-")
    if not separator or not asset_id:
        return None
    try:
        chain_id = int(raw_chain_id)
    except ValueError:
        return None
    return asset_id, chain_id


__all__ = [
    "ASSETS",
    "AssetChainCombination",
    "AssetMetadata",
    "CHAINS",
    "Chain",
    "ChainDeployment",
    "all_asset_chain_combinations",
    "assets_on_chain",
    "create_asset_chain_key",
    "find_asset",
    "get_asset",
    "parse_asset_chain_key",
]
