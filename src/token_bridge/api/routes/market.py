"""Asset catalog and USD conversion routes."""

from __future__ import annotations

from decimal import Decimal
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Query

from token_bridge.api.dependencies import get_conversion_service
from token_bridge.application.services import ConversionService
from token_bridge.domain.assets import ASSETS
from token_bridge.domain.errors import PriceFeedError, UnknownAssetError
from token_bridge.domain.market_models import AssetListResponse, AssetResponse, ConversionQuote

router = APIRouter(prefix="/api", tags=["market"])


def _raise_http_exception(exc: Exception) -> NoReturn:
    if isinstance(exc, UnknownAssetError):
        raise HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, ValueError):
        raise HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, PriceFeedError):
        raise HTTPException(status_code=502, detail=str(exc))
    raise HTTPException(status_code=500, detail="Unexpected conversion error")


@router.get("/assets", response_model=AssetListResponse, status_code=200)
async def list_assets() -> AssetListResponse:
    """List supported assets and their chain deployments."""

    return AssetListResponse(
        assets=[AssetResponse.from_metadata(asset) for asset in ASSETS.values()]
    )


@router.get("/convert", response_model=ConversionQuote, status_code=200)
async def convert(
    asset: str = Query(...),
    usd: Decimal | None = Query(default=None, ge=0),
    amount: Decimal | None = Query(default=None, ge=0),
    service: ConversionService = Depends(get_conversion_service),
) -> ConversionQuote:
    """Convert a USD value to token units, or token units to USD."""

    try:
        return await service.quote(asset, usd=usd, amount=amount)
    except Exception as exc:  # noqa: BLE001
        _raise_http_exception(exc)


__all__ = ["router"]
