"""Application bootstrap/wiring."""

import logging

from token_bridge.application.services import BridgeTransactionService, ConversionService
from token_bridge.config import Settings
from token_bridge.domain.ports import TransferBackend
from token_bridge.infrastructure.bridge_backend import (
    HttpTransferBackend,
    SimulatedBridgeBackend,
)
from token_bridge.infrastructure.prices import CoinGeckoPriceClient

logger = logging.getLogger(__name__)


def build_simulated_backend(settings: Settings) -> SimulatedBridgeBackend:
    """Build the simulated backend served at `/api/bridge`."""

    return SimulatedBridgeBackend(
        min_latency_seconds=settings.simulated_min_latency_seconds,
        max_latency_seconds=settings.simulated_max_latency_seconds,
        success_ratio=settings.simulated_success_ratio,
    )


def _build_transfer_backend(settings: Settings) -> TransferBackend:
    if settings.bridge_backend_url is None:
        logger.info(
            "TOKEN_BRIDGE_BRIDGE_BACKEND_URL is not set. "
            "Using the in-process simulated bridge backend."
        )
        return build_simulated_backend(settings)
    return HttpTransferBackend(
        endpoint_url=settings.bridge_backend_url,
        timeout_seconds=settings.bridge_backend_timeout_seconds,
    )


def build_bridge_transaction_service(settings: Settings) -> BridgeTransactionService:
    """Compose a transaction orchestrator for one consumer."""

    return BridgeTransactionService(
        backend=_build_transfer_backend(settings),
        retry_delay_seconds=settings.bridge_retry_delay_seconds,
        confirmation_delay_seconds=settings.bridge_confirmation_delay_seconds,
    )


def build_conversion_service(settings: Settings) -> ConversionService:
    """Compose price-backed conversion service."""

    return ConversionService(
        price_source=CoinGeckoPriceClient(
            base_url=settings.price_api_base_url,
            timeout_seconds=settings.price_timeout_seconds,
            cache_ttl_seconds=settings.price_cache_ttl_seconds,
        )
    )


__all__ = [
    "build_bridge_transaction_service",
    "build_conversion_service",
    "build_simulated_backend",
]
