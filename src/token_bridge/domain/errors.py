"""Domain exceptions for bridge transfers and pricing."""

GENERIC_TRANSFER_FAILURE = "Bridge transaction failed. Please try again."


class BridgeError(Exception):
    """Base class for bridge errors."""


class TransferValidationError(BridgeError):
    """Raised when a transfer request fails structural validation."""


class TransferBackendError(BridgeError):
    """Raised when the transfer backend cannot accept a request."""


class TransferRejectedError(TransferBackendError):
    """Raised when the backend completed the round trip but declined the transfer."""


class TransferTransportError(TransferBackendError):
    """Raised when the round trip to the backend itself failed."""


class UnknownAssetError(BridgeError):
    """Raised when an asset id is not in the catalog."""


class PriceFeedError(BridgeError):
    """Raised when token prices cannot be fetched."""


__all__ = [
    "BridgeError",
    "GENERIC_TRANSFER_FAILURE",
    "PriceFeedError",
    "TransferBackendError",
    "TransferRejectedError",
    "TransferTransportError",
    "TransferValidationError",
    "UnknownAssetError",
]
