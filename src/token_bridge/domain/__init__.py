"""Domain public API."""

from token_bridge.domain.assets import (
    ASSETS,
    CHAINS,
    AssetChainCombination,
    AssetMetadata,
    Chain,
    ChainDeployment,
    all_asset_chain_combinations,
    assets_on_chain,
    create_asset_chain_key,
    find_asset,
    get_asset,
    parse_asset_chain_key,
)
from token_bridge.domain.bridge_state_machine import (
    IDLE,
    BackendAccepted,
    BackendRejected,
    BridgeEvent,
    BridgeState,
    BridgeStatus,
    ConfirmationReceived,
    Confirmed,
    Failed,
    Idle,
    Pending,
    Reset,
    Retry,
    Retrying,
    Submit,
    Submitting,
    ValidationFailed,
    ValidationSucceeded,
    Validating,
    can_retry,
    error_of,
    is_submitting,
    reduce_bridge_state,
)
from token_bridge.domain.errors import (
    BridgeError,
    PriceFeedError,
    TransferBackendError,
    TransferRejectedError,
    TransferTransportError,
    TransferValidationError,
    UnknownAssetError,
)
from token_bridge.domain.market_models import (
    AssetDeploymentResponse,
    AssetListResponse,
    AssetResponse,
    ConversionQuote,
)
from token_bridge.domain.ports import PriceSource, SleepFunction, TransferBackend
from token_bridge.domain.transfer_models import (
    BridgeTransferMessage,
    TransferRequest,
    TransferResponseMessage,
)
from token_bridge.domain.validation import validate_transfer_request

__all__ = [
    "ASSETS",
    "AssetChainCombination",
    "AssetDeploymentResponse",
    "AssetListResponse",
    "AssetMetadata",
    "AssetResponse",
    "BackendAccepted",
    "BackendRejected",
    "BridgeError",
    "BridgeEvent",
    "BridgeState",
    "BridgeStatus",
    "BridgeTransferMessage",
    "CHAINS",
    "Chain",
    "ChainDeployment",
    "ConfirmationReceived",
    "ConversionQuote",
    "Confirmed",
    "Failed",
    "IDLE",
    "Idle",
    "Pending",
    "PriceFeedError",
    "PriceSource",
    "Reset",
    "Retry",
    "Retrying",
    "SleepFunction",
    "Submit",
    "Submitting",
    "TransferBackend",
    "TransferBackendError",
    "TransferRejectedError",
    "TransferRequest",
    "TransferResponseMessage",
    "TransferTransportError",
    "TransferValidationError",
    "UnknownAssetError",
    "ValidationFailed",
    "ValidationSucceeded",
    "Validating",
    "all_asset_chain_combinations",
    "assets_on_chain",
    "can_retry",
    "create_asset_chain_key",
    "error_of",
    "find_asset",
    "get_asset",
    "is_submitting",
    "parse_asset_chain_key",
    "reduce_bridge_state",
    "validate_transfer_request",
]
