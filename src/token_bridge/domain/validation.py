"""Structural validation for transfer requests."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from token_bridge.domain.errors import TransferValidationError
from token_bridge.domain.transfer_models import TransferRequest

MAX_AMOUNT_DECIMALS = 18

_AMOUNT_PATTERN = re.compile(r"^([0-9]+\.?[0-9]*|\.[0-9]+)$")
_ADDRESS_PATTERN = re.compile(r"^0x[0-9a-fA-F]{40}$")


def _fail(field_name: str, message: str) -> TransferValidationError:
    return TransferValidationError(f"{field_name}: {message}")


def _ensure_positive_amount(amount: str) -> None:
    if not amount:
        raise _fail("amount", "Amount is required")
    if _AMOUNT_PATTERN.match(amount) is None:
        raise _fail("amount", "Amount must be a positive number")
    try:
        value = Decimal(amount)
    except InvalidOperation as exc:
        raise _fail("amount", "Amount must be a positive number") from exc
    if not value.is_finite() or value <= 0:
        raise _fail("amount", "Amount must be a positive number")


def _ensure_amount_precision(amount: str) -> None:
    _, _, fraction = amount.partition(".")
    if len(fraction) > MAX_AMOUNT_DECIMALS:
        raise _fail(
            "amount",
            f"Amount must have at most {MAX_AMOUNT_DECIMALS} decimal places",
        )


def _ensure_positive_chain_id(field_name: str, label: str, chain_id: object) -> None:
    # bool is an int subclass.
    if isinstance(chain_id, bool) or not isinstance(chain_id, int) or chain_id <= 0:
        raise _fail(field_name, f"{label} chain ID must be a positive integer")


def validate_transfer_request(request: TransferRequest) -> TransferRequest:
    """Return `request` unchanged or raise `TransferValidationError`.

    Checks run in a fixed order and stop at the first failure: amount value,
    amount precision, recipient address, chain ids, distinct chains, asset.
    The reason carries the wire field name so it can be shown verbatim.
    Values are checked exactly as given; surrounding whitespace fails the
    amount and address checks instead of being trimmed.
    """

    _ensure_positive_amount(request.amount)
    _ensure_amount_precision(request.amount)

    if _ADDRESS_PATTERN.match(request.recipient_address) is None:
        raise _fail(
            "recipientAddress",
            "Recipient address must be 0x followed by 40 hexadecimal characters",
        )

    _ensure_positive_chain_id("sourceChain", "Source", request.source_chain_id)
    _ensure_positive_chain_id("destinationChain", "Destination", request.destination_chain_id)
    if request.source_chain_id == request.destination_chain_id:
        raise _fail("destinationChain", "Destination chain must differ from source chain")

    if not request.asset_id.strip():
        raise _fail("asset", "Asset is required")

    return request


__all__ = ["MAX_AMOUNT_DECIMALS", "validate_transfer_request"]
