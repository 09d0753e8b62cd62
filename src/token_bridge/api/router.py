"""Top-level API router composition."""

from fastapi import APIRouter

from token_bridge.api.routes import bridge_router, health_router, market_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(bridge_router)
api_router.include_router(market_router)

__all__ = ["api_router"]
