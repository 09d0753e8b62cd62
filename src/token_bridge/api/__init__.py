"""HTTP API public API."""

from token_bridge.api.router import api_router

__all__ = ["api_router"]
