"""Bridge transaction use-case service."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from token_bridge.domain.bridge_state_machine import (
    IDLE,
    BackendAccepted,
    BackendRejected,
    BridgeEvent,
    BridgeState,
    ConfirmationReceived,
    Failed,
    Idle,
    Reset,
    Retry,
    Submit,
    ValidationFailed,
    ValidationSucceeded,
    can_retry,
    error_of,
    is_submitting,
    reduce_bridge_state,
)
from token_bridge.domain.errors import (
    GENERIC_TRANSFER_FAILURE,
    TransferBackendError,
    TransferValidationError,
)
from token_bridge.domain.ports import SleepFunction, TransferBackend
from token_bridge.domain.transfer_models import TransferRequest
from token_bridge.domain.validation import validate_transfer_request

_DEFAULT_RETRY_DELAY_SECONDS = 0.5
_DEFAULT_CONFIRMATION_DELAY_SECONDS = 2.0

StateListener = Callable[[BridgeState], None]

logger = logging.getLogger(__name__)


class BridgeTransactionService:
    """Orchestrates bridge transaction state transitions.

    The service is the only writer of its state. Every attempt captures a
    generation number when it starts; `reset_transaction` and each new
    attempt advance the counter, and continuations of older attempts drop
    their events instead of dispatching them.
    """

    def __init__(
        self,
        backend: TransferBackend,
        *,
        sleep: SleepFunction = asyncio.sleep,
        retry_delay_seconds: float = _DEFAULT_RETRY_DELAY_SECONDS,
        confirmation_delay_seconds: float = _DEFAULT_CONFIRMATION_DELAY_SECONDS,
    ) -> None:
        self._backend = backend
        self._sleep = sleep
        self._retry_delay_seconds = max(retry_delay_seconds, 0.0)
        self._confirmation_delay_seconds = max(confirmation_delay_seconds, 0.0)
        self._state: BridgeState = IDLE
        self._generation = 0
        self._listeners: list[StateListener] = []
        self._confirmation_tasks: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> BridgeState:
        return self._state

    @property
    def is_submitting(self) -> bool:
        return is_submitting(self._state)

    @property
    def can_retry(self) -> bool:
        return can_retry(self._state)

    @property
    def error(self) -> str | None:
        return error_of(self._state)

    @property
    def retry_delay_seconds(self) -> float:
        return self._retry_delay_seconds

    @property
    def confirmation_delay_seconds(self) -> float:
        return self._confirmation_delay_seconds

    def add_listener(self, listener: StateListener) -> None:
        """Register a callback invoked with every new state."""

        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def submit(self, request: TransferRequest) -> None:
        """Validate and submit `request`.

        Ignored unless the service is idle. Returns after the first backend
        round trip; confirmation arrives later from a background task.
        """

        if not isinstance(self._state, Idle):
            logger.debug("Ignoring submit while bridge transaction is '%s'.", self._state.status)
            return

        generation = self._next_generation()
        self._dispatch(Submit(request=request))
        try:
            validated = validate_transfer_request(request)
        except TransferValidationError as exc:
            logger.info("Bridge transfer request rejected by validation: %s", exc)
            self._dispatch(ValidationFailed(reason=str(exc)))
            return

        self._dispatch(ValidationSucceeded(request=validated))
        if not self._is_current(generation):
            return
        await self._submit_to_backend(validated, generation)

    async def retry_transaction(self) -> None:
        """Resubmit the stored request of a failed attempt."""

        state = self._state
        if not isinstance(state, Failed):
            logger.debug("Ignoring retry while bridge transaction is '%s'.", state.status)
            return

        generation = self._next_generation()
        self._dispatch(Retry())
        await self._sleep(self._retry_delay_seconds)
        if not self._is_current(generation):
            logger.debug("Dropping retry of superseded attempt %s.", generation)
            return

        self._dispatch(Retry())
        try:
            validated = validate_transfer_request(state.request)
        except TransferValidationError as exc:
            # Never send a request the validator refuses.
            self._dispatch(BackendRejected(reason=str(exc)))
            return
        await self._submit_to_backend(validated, generation)

    def reset_transaction(self) -> None:
        """Return to idle and abandon any in-flight attempt."""

        self._next_generation()
        self._dispatch(Reset())

    async def drain(self) -> None:
        """Wait for scheduled confirmations to finish."""

        while self._confirmation_tasks:
            await asyncio.gather(*self._confirmation_tasks, return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel scheduled confirmations."""

        tasks = list(self._confirmation_tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _submit_to_backend(self, request: TransferRequest, generation: int) -> None:
        try:
            transaction_id = await self._backend.submit_transfer(request)
        except TransferBackendError as exc:
            self._reject(generation, str(exc).strip() or GENERIC_TRANSFER_FAILURE)
            return
        except Exception as exc:  # noqa: BLE001
            logger.exception("Unexpected error from bridge backend.")
            detail = str(exc).strip()
            reason = f"Network error: {detail}" if detail else GENERIC_TRANSFER_FAILURE
            self._reject(generation, reason)
            return

        if not self._is_current(generation):
            logger.debug(
                "Dropping backend acceptance %s of superseded attempt %s.",
                transaction_id,
                generation,
            )
            return

        self._dispatch(BackendAccepted(transaction_id=transaction_id))
        task = asyncio.create_task(
            self._confirm_after_delay(transaction_id, generation),
            name=f"bridge-confirmation-{generation}",
        )
        self._confirmation_tasks.add(task)
        task.add_done_callback(self._confirmation_tasks.discard)

    async def _confirm_after_delay(self, transaction_id: str, generation: int) -> None:
        await self._sleep(self._confirmation_delay_seconds)
        if not self._is_current(generation):
            logger.debug(
                "Dropping confirmation %s of superseded attempt %s.",
                transaction_id,
                generation,
            )
            return
        self._dispatch(ConfirmationReceived(transaction_id=transaction_id))
        logger.info("Bridge transaction %s confirmed.", transaction_id)

    def _reject(self, generation: int, reason: str) -> None:
        if not self._is_current(generation):
            logger.debug("Dropping failure of superseded attempt %s: %s", generation, reason)
            return
        logger.warning("Bridge transfer attempt %s failed: %s", generation, reason)
        self._dispatch(BackendRejected(reason=reason))

    def _dispatch(self, event: BridgeEvent) -> None:
        previous = self._state
        current = reduce_bridge_state(previous, event)
        if current is previous:
            logger.debug(
                "Ignored %s in bridge state '%s'.",
                type(event).__name__,
                previous.status,
            )
            return

        self._state = current
        logger.debug("Bridge transaction '%s' -> '%s'.", previous.status, current.status)
        for listener in list(self._listeners):
            try:
                listener(current)
            except Exception:
                logger.exception("Bridge state listener failed.")

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation


__all__ = ["BridgeTransactionService", "StateListener"]
