"""USD <-> token conversion and input helpers."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

_ZERO = Decimal("0")
_CENT = Decimal("0.01")
_USD_INPUT_PATTERN = re.compile(r"^[0-9]+(\.[0-9]{0,2})?$")


def _quantize(amount: Decimal, quantum: Decimal) -> Decimal:
    # quantize fails once the result has more digits than the context precision.
    with localcontext() as context:
        context.prec = max(context.prec, amount.adjusted() - quantum.adjusted() + 2)
        return amount.quantize(quantum, rounding=ROUND_HALF_UP)


def usd_to_token(usd_amount: Decimal, token_price: Decimal) -> Decimal:
    """Convert a USD amount to token units at `token_price` USD per token."""

    if token_price <= 0:
        return _ZERO
    return usd_amount / token_price


def token_to_usd(token_amount: Decimal, token_price: Decimal) -> Decimal:
    """Convert token units to USD."""

    return token_amount * token_price


def format_usd(amount: Decimal) -> str:
    """Format as `$1,234.56`."""

    rounded = _quantize(amount, _CENT)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${rounded.copy_abs():,.2f}"


def format_token(amount: Decimal, symbol: str, decimals: int = 8) -> str:
    """Format with at most `decimals` places and no trailing zeros."""

    quantum = Decimal(1).scaleb(-decimals)
    text = f"{_quantize(amount, quantum):.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return f"{text} {symbol}"


def validate_usd_input(value: str) -> bool:
    """Accept partial USD input with at most two decimals."""

    if value in ("", "."):
        return True
    return _USD_INPUT_PATTERN.match(value) is not None


def validate_token_input(value: str, max_decimals: int = 8) -> bool:
    """Accept partial token input with at most `max_decimals` decimals."""

    if value in ("", "."):
        return True
    pattern = rf"^[0-9]+(\.[0-9]{{0,{max_decimals}}})?$"
    return re.match(pattern, value) is not None


def parse_input_value(value: str) -> Decimal:
    """Parse form input, treating empty or invalid text as zero."""

    stripped = value.strip()
    if stripped in ("", "."):
        return _ZERO
    try:
        parsed = Decimal(stripped)
    except InvalidOperation:
        return _ZERO
    if not parsed.is_finite():
        return _ZERO
    return parsed


__all__ = [
    "format_token",
    "format_usd",
    "parse_input_value",
    "token_to_usd",
    "usd_to_token",
    "validate_token_input",
    "validate_usd_input",
]
