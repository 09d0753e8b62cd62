"""Route modules public API."""

from token_bridge.api.routes.bridge import router as bridge_router
from token_bridge.api.routes.health import router as health_router
from token_bridge.api.routes.market import router as market_router

__all__ = ["bridge_router", "health_router", "market_router"]
