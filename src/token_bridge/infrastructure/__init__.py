"""Infrastructure layer public API."""

from token_bridge.infrastructure.bridge_backend import (
    HttpTransferBackend,
    SimulatedBridgeBackend,
)
from token_bridge.infrastructure.prices import CoinGeckoPriceClient

__all__ = [
    "CoinGeckoPriceClient",
    "HttpTransferBackend",
    "SimulatedBridgeBackend",
]
