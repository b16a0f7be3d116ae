"""Helper utilities for formatting projection figures for display."""
from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

NOT_APPLICABLE = "N/A"
PENDING = "..."
MAX_GROUPED_DIGITS = 60


def to_decimal(value: object) -> Decimal | None:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def format_number(value: object, digits: int = 0, *, placeholder: str = NOT_APPLICABLE) -> str:
    """Round half-up to *digits* places and group thousands (``1,234.5``).

    Magnitudes of ``10**MAX_GROUPED_DIGITS`` and beyond are shown in
    scientific notation (``1.00E+999999``).
    """

    amount = to_decimal(value)
    if amount is None or not amount.is_finite():
        return placeholder
    if amount.adjusted() >= MAX_GROUPED_DIGITS:
        return f"{amount:.{max(digits, 2)}E}"
    quant = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the decimals.
        ctx.prec = max(ctx.prec, amount.adjusted() + digits + 2)
        rounded = amount.quantize(quant, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:,.{digits}f}"


def format_currency(
    value: object, symbol: str, digits: int = 0, *, placeholder: str = NOT_APPLICABLE
) -> str:
    formatted = format_number(value, digits, placeholder=placeholder)
    return formatted if formatted == placeholder else f"{symbol}{formatted}"


def format_percent(value: object, digits: int = 1, *, placeholder: str = NOT_APPLICABLE) -> str:
    formatted = format_number(value, digits, placeholder=placeholder)
    return formatted if formatted == placeholder else f"{formatted}%"


def format_multiple(value: object, digits: int = 1, *, placeholder: str = NOT_APPLICABLE) -> str:
    formatted = format_number(value, digits, placeholder=placeholder)
    return formatted if formatted == placeholder else f"~{formatted}x"


__all__ = [
    "NOT_APPLICABLE",
    "PENDING",
    "format_currency",
    "format_multiple",
    "format_number",
    "format_percent",
    "to_decimal",
]
