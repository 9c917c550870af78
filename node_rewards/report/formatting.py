"""Display formatting for addresses, amounts and dates."""

from datetime import datetime
from decimal import Decimal

from node_rewards.helpers.constants import (
    AMOUNT_DIGITS,
    MASK_PREFIX,
    MASK_VISIBLE_CHARS,
    NO_CLAIMS_TEXT,
    TOKEN_SYMBOL,
)


def mask_address(address: str, visible: int = MASK_VISIBLE_CHARS) -> str:
    """Hide all but the last ``visible`` characters of an address.

    Example:
        >>> mask_address("0x1234567890abcdef1234567890abcdef12345678")
        '0x******ef12345678'
    """
    return f"{MASK_PREFIX}{address[-visible:]}"


def format_amount(amount: Decimal, digits: int = AMOUNT_DIGITS) -> str:
    """Format an amount with a fixed number of decimal places.

    Non-finite values come out as ``NaN``, ``Infinity`` or ``-Infinity``.
    """
    return f"{amount:.{digits}f}"


def format_value(amount: Decimal, eur_rate: Decimal) -> str:
    """Format a token amount together with its EUR value.

    Example:
        >>> format_value(Decimal("10"), Decimal("0.5"))
        '10.00 DATA (5.00 €)'
    """
    eur = format_amount(amount * eur_rate)
    return f"{format_amount(amount)} {TOKEN_SYMBOL} ({eur} €)"


def format_claim_date(date: datetime | None) -> str:
    """Format a claim date, or the no-claims text when there is none."""
    if date is None:
        return NO_CLAIMS_TEXT
    return date.isoformat(sep=" ", timespec="seconds")


__all__ = [
    "format_amount",
    "format_claim_date",
    "format_value",
    "mask_address",
]
