"""Bridge transaction states, events, and the pure transition reducer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from token_bridge.domain.transfer_models import TransferRequest


class BridgeStatus(StrEnum):
    """Discriminator for bridge transaction states."""

    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    FAILED = "failed"
    RETRYING = "retrying"


TERMINAL_STATUSES = frozenset({BridgeStatus.CONFIRMED, BridgeStatus.FAILED})
IN_PROGRESS_STATUSES = frozenset(
    {
        BridgeStatus.VALIDATING,
        BridgeStatus.SUBMITTING,
        BridgeStatus.PENDING,
        BridgeStatus.RETRYING,
    }
)


@dataclass(frozen=True, slots=True)
class Idle:
    """No transaction in progress."""

    status: ClassVar[BridgeStatus] = BridgeStatus.IDLE


@dataclass(frozen=True, slots=True)
class Validating:
    """Request accepted into the machine, validator running."""

    request: TransferRequest
    status: ClassVar[BridgeStatus] = BridgeStatus.VALIDATING


@dataclass(frozen=True, slots=True)
class Submitting:
    """Backend call in flight."""

    request: TransferRequest
    status: ClassVar[BridgeStatus] = BridgeStatus.SUBMITTING


@dataclass(frozen=True, slots=True)
class Pending:
    """Backend accepted the transfer; waiting for confirmation."""

    transaction_id: str
    request: TransferRequest
    status: ClassVar[BridgeStatus] = BridgeStatus.PENDING


@dataclass(frozen=True, slots=True)
class Confirmed:
    """Transfer confirmed."""

    transaction_id: str
    request: TransferRequest
    status: ClassVar[BridgeStatus] = BridgeStatus.CONFIRMED


@dataclass(frozen=True, slots=True)
class Failed:
    """Attempt failed; retry or reset is possible."""

    reason: str
    request: TransferRequest
    status: ClassVar[BridgeStatus] = BridgeStatus.FAILED


@dataclass(frozen=True, slots=True)
class Retrying:
    """Visible pause between a failure and the next submission."""

    reason: str
    request: TransferRequest
    status: ClassVar[BridgeStatus] = BridgeStatus.RETRYING


BridgeState = Idle | Validating | Submitting | Pending | Confirmed | Failed | Retrying

IDLE = Idle()


@dataclass(frozen=True, slots=True)
class Submit:
    request: TransferRequest


@dataclass(frozen=True, slots=True)
class ValidationSucceeded:
    request: TransferRequest


@dataclass(frozen=True, slots=True)
class ValidationFailed:
    reason: str


@dataclass(frozen=True, slots=True)
class BackendAccepted:
    transaction_id: str


@dataclass(frozen=True, slots=True)
class ConfirmationReceived:
    transaction_id: str


@dataclass(frozen=True, slots=True)
class BackendRejected:
    reason: str


@dataclass(frozen=True, slots=True)
class Retry:
    pass


@dataclass(frozen=True, slots=True)
class Reset:
    pass


BridgeEvent = (
    Submit
    | ValidationSucceeded
    | ValidationFailed
    | BackendAccepted
    | ConfirmationReceived
    | BackendRejected
    | Retry
    | Reset
)


def reduce_bridge_state(state: BridgeState, event: BridgeEvent) -> BridgeState:
    """Return the state that follows `event`.

    The reducer is total: an event that is not legal for the current state
    returns `state` itself, unchanged, so stale or duplicated events are
    harmless.

    `BackendAccepted` received while already pending is treated as the
    confirmation signal, same as `ConfirmationReceived`. Both require the id
    to match the pending transaction.
    """

    if isinstance(event, Reset):
        return state if isinstance(state, Idle) else IDLE

    if isinstance(event, Submit):
        if isinstance(state, Idle):
            return Validating(request=event.request)
        return state

    if isinstance(event, ValidationSucceeded):
        if isinstance(state, Validating):
            return Submitting(request=event.request)
        return state

    if isinstance(event, ValidationFailed):
        if isinstance(state, Validating):
            return Failed(reason=event.reason, request=state.request)
        return state

    if isinstance(event, BackendAccepted):
        if isinstance(state, Submitting):
            return Pending(transaction_id=event.transaction_id, request=state.request)
        if isinstance(state, Pending) and state.transaction_id == event.transaction_id:
            return Confirmed(transaction_id=state.transaction_id, request=state.request)
        return state

    if isinstance(event, ConfirmationReceived):
        if isinstance(state, Pending) and state.transaction_id == event.transaction_id:
            return Confirmed(transaction_id=state.transaction_id, request=state.request)
        return state

    if isinstance(event, BackendRejected):
        if isinstance(state, Submitting | Pending):
            return Failed(reason=event.reason, request=state.request)
        return state

    if isinstance(event, Retry):
        if isinstance(state, Failed):
            return Retrying(reason=state.reason, request=state.request)
        if isinstance(state, Retrying):
            return Submitting(request=state.request)
        return state

    return state


def is_submitting(state: BridgeState) -> bool:
    """Return whether an attempt is in progress."""

    return state.status in IN_PROGRESS_STATUSES


def can_retry(state: BridgeState) -> bool:
    """Return whether retry is allowed from `state`."""

    return isinstance(state, Failed)


def error_of(state: BridgeState) -> str | None:
    """Return the failure reason, or None outside the failed state."""

    if isinstance(state, Failed):
        return state.reason
    return None


def request_of(state: BridgeState) -> TransferRequest | None:
    """Return the request carried by `state`, if any."""

    if isinstance(state, Idle):
        return None
    return state.request


__all__ = [
    "BackendAccepted",
    "BackendRejected",
    "BridgeEvent",
    "BridgeState",
    "BridgeStatus",
    "ConfirmationReceived",
    "Confirmed",
    "Failed",
    "IDLE",
    "IN_PROGRESS_STATUSES",
    "Idle",
    "Pending",
    "Reset",
    "Retry",
    "Retrying",
    "Submit",
    "Submitting",
    "TERMINAL_STATUSES",
    "ValidationFailed",
    "ValidationSucceeded",
    "Validating",
    "can_retry",
    "error_of",
    "is_submitting",
    "reduce_bridge_state",
    "request_of",
]
