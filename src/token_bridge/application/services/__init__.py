"""Application services public API."""

from token_bridge.application.services.bridge_transaction_service import (
    BridgeTransactionService,
    StateListener,
)
from token_bridge.application.services.conversion_service import ConversionService

__all__ = ["BridgeTransactionService", "ConversionService", "StateListener"]
