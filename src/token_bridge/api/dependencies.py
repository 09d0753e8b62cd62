"""Dependency providers for FastAPI routes."""

from functools import lru_cache

from token_bridge.application.services import ConversionService
from token_bridge.bootstrap import build_conversion_service, build_simulated_backend
from token_bridge.config import Settings
from token_bridge.infrastructure.bridge_backend import SimulatedBridgeBackend


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return singleton settings."""

    return Settings()


@lru_cache(maxsize=1)
def get_simulated_backend() -> SimulatedBridgeBackend:
    """Return singleton simulated bridge backend."""

    return build_simulated_backend(get_settings())


@lru_cache(maxsize=1)
def get_conversion_service() -> ConversionService:
    """Return singleton conversion service."""

    return build_conversion_service(get_settings())


__all__ = ["get_conversion_service", "get_settings", "get_simulated_backend"]
