"""Simulated bridge backend with random latency and failures."""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass

from token_bridge.domain.errors import GENERIC_TRANSFER_FAILURE, TransferRejectedError
from token_bridge.domain.ports import SleepFunction, TransferBackend
from token_bridge.domain.transfer_models import (
    BridgeTransferMessage,
    TransferRequest,
    TransferResponseMessage,
)

FAILURE_REASONS = (
    "Insufficient balance for bridge fees",
    "Bridge service temporarily unavailable",
    "Network congestion detected",
    "Invalid recipient address format",
    "Bridge contract interaction failed",
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BridgeCommandResult:
    """HTTP mapping result for a simulated transfer."""

    status_code: int
    body: TransferResponseMessage


class SimulatedBridgeBackend(TransferBackend):
    """Stand-in for a real bridge service.

    Every accepted request waits a random latency, then succeeds with
    probability `success_ratio` and a random 32-byte hex transaction id, or
    fails with one of `FAILURE_REASONS`.
    """

    def __init__(
        self,
        *,
        min_latency_seconds: float = 1.0,
        max_latency_seconds: float = 3.0,
        success_ratio: float = 0.7,
        rng: random.Random | None = None,
        sleep: SleepFunction = asyncio.sleep,
    ) -> None:
        self._min_latency_seconds = max(min_latency_seconds, 0.0)
        self._max_latency_seconds = max(max_latency_seconds, self._min_latency_seconds)
        self._success_ratio = max(min(success_ratio, 1.0), 0.0)
        self._rng = rng or random.Random()
        self._sleep = sleep

    @property
    def success_ratio(self) -> float:
        return self._success_ratio

    async def handle(self, message: BridgeTransferMessage) -> BridgeCommandResult:
        """Process one `/api/bridge` request."""

        missing = message.missing_fields()
        if missing:
            logger.info("Rejecting bridge request with missing fields: %s", ", ".join(missing))
            return BridgeCommandResult(
                status_code=400,
                body=TransferResponseMessage(success=False, error="Missing required fields"),
            )

        await self._sleep(
            self._rng.uniform(self._min_latency_seconds, self._max_latency_seconds)
        )

        if self._rng.random() < self._success_ratio:
            transaction_id = self._new_transaction_id()
            logger.info("Simulated bridge transfer accepted as %s.", transaction_id)
            return BridgeCommandResult(
                status_code=200,
                body=TransferResponseMessage(
                    success=True,
                    transaction_id=transaction_id,
                    message="Bridge transaction initiated successfully",
                ),
            )

        reason = self._rng.choice(FAILURE_REASONS)
        logger.info("Simulated bridge transfer failed: %s", reason)
        return BridgeCommandResult(
            status_code=500,
            body=TransferResponseMessage(success=False, error=reason),
        )

    async def submit_transfer(self, request: TransferRequest) -> str:
        """In-process variant of `handle` for wiring without HTTP."""

        result = await self.handle(BridgeTransferMessage.model_validate(request.to_wire()))
        body = result.body
        if not body.success or body.transaction_id is None:
            raise TransferRejectedError(body.error or GENERIC_TRANSFER_FAILURE)
        return body.transaction_id

    def _new_transaction_id(self) -> str:
        return f"0x{self._rng.getrandbits(256):064x}"


__all__ = ["BridgeCommandResult", "FAILURE_REASONS", "SimulatedBridgeBackend"]
