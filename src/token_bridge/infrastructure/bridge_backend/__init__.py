"""Bridge backend adapters."""

from token_bridge.infrastructure.bridge_backend.client import HttpTransferBackend
from token_bridge.infrastructure.bridge_backend.simulated import (
    FAILURE_REASONS,
    BridgeCommandResult,
    SimulatedBridgeBackend,
)

__all__ = [
    "BridgeCommandResult",
    "FAILURE_REASONS",
    "HttpTransferBackend",
    "SimulatedBridgeBackend",
]
