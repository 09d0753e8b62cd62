"""Pydantic models mapped from the bridge transfer JSON contract."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BridgeModel(BaseModel):
    """Base model for bridge wire messages."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class TransferRequest(BridgeModel):
    """User intent for one cross-chain transfer.

    Only field types are enforced here. Semantic checks live in
    `token_bridge.domain.validation` so invalid input can still flow through
    the state machine and end up in a failed state with a readable reason.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    source_chain_id: int = Field(alias="sourceChain")
    destination_chain_id: int = Field(alias="destinationChain")
    asset_id: str = Field(alias="asset")
    amount: str
    recipient_address: str = Field(alias="recipientAddress")

    def to_wire(self) -> dict[str, object]:
        """Serialize using backend field names."""

        return self.model_dump(by_alias=True)


class BridgeTransferMessage(BridgeModel):
    """Inbound transfer payload accepted by the simulated backend.

    Every field is optional so the endpoint can answer with its own
    `Missing required fields` error instead of a schema error.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    source_chain: int | None = Field(default=None, alias="sourceChain")
    destination_chain: int | None = Field(default=None, alias="destinationChain")
    asset: str | None = None
    amount: str | None = None
    recipient_address: str | None = Field(default=None, alias="recipientAddress")

    def missing_fields(self) -> list[str]:
        """Return wire names of fields that are absent or empty."""

        values = {
            "sourceChain": self.source_chain,
            "destinationChain": self.destination_chain,
            "asset": self.asset,
            "amount": self.amount,
            "recipientAddress": self.recipient_address,
        }
        return [name for name, value in values.items() if not value]


class TransferResponseMessage(BridgeModel):
    """Backend response for a transfer submission."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    success: bool
    transaction_id: str | None = Field(default=None, alias="transactionId")
    message: str | None = None
    error: str | None = None


__all__ = [
    "BridgeModel",
    "BridgeTransferMessage",
    "TransferRequest",
    "TransferResponseMessage",
]
