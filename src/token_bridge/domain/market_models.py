"""Response models for asset listing and conversion quotes."""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field

from token_bridge.domain.assets import AssetMetadata
from token_bridge.domain.transfer_models import BridgeModel


class AssetDeploymentResponse(BridgeModel):
    """Token contract on one chain."""

    chain_id: int = Field(alias="chainId")
    address: str
    decimals: int


class AssetResponse(BridgeModel):
    """Public view of one catalog asset."""

    asset_id: str = Field(alias="id")
    symbol: str
    name: str
    decimals: int
    icon: str | None = None
    deployments: list[AssetDeploymentResponse] = Field(default_factory=list)

    @classmethod
    def from_metadata(cls, asset: AssetMetadata) -> AssetResponse:
        return cls(
            asset_id=asset.asset_id,
            symbol=asset.symbol,
            name=asset.name,
            decimals=asset.decimals,
            icon=asset.icon,
            deployments=[
                AssetDeploymentResponse(
                    chain_id=chain_id,
                    address=deployment.address,
                    decimals=deployment.decimals,
                )
                for chain_id, deployment in asset.chains.items()
            ],
        )


class AssetListResponse(BridgeModel):
    """Every supported asset."""

    assets: list[AssetResponse]


class ConversionQuote(BridgeModel):
    """USD <-> token conversion at the current price."""

    asset_id: str = Field(alias="asset")
    symbol: str
    price_usd: Decimal = Field(alias="priceUsd")
    usd: Decimal
    amount: Decimal
    formatted_usd: str = Field(alias="formattedUsd")
    formatted_amount: str = Field(alias="formattedAmount")


__all__ = [
    "AssetDeploymentResponse",
    "AssetListResponse",
    "AssetResponse",
    "ConversionQuote",
]
