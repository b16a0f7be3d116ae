"""Coercion helpers for user supplied numeric inputs.

Numeric form fields hold free text. Instead of rejecting bad input the
helpers read the longest numeric prefix (``"12abc"`` reads as 12) and fall
back to zero, so editing never blocks on a typo.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation

_DECIMAL_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_PREFIX = re.compile(r"^[+-]?\d+")
_ZERO = Decimal("0")


def _finite_or_zero(value: Decimal) -> Decimal:
    if not value.is_finite() or value == 0:
        return _ZERO
    return value


def coerce_number(value: object) -> Decimal:
    """Return *value* as a finite :class:`Decimal`, ``0`` when it is not numeric."""

    if value is None or isinstance(value, bool):
        return _ZERO
    if isinstance(value, Decimal):
        return _finite_or_zero(value)
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return _ZERO
        return _finite_or_zero(Decimal(str(value)))
    match = _DECIMAL_PREFIX.match(str(value).strip())
    if match is None:
        return _ZERO
    try:
        return _finite_or_zero(Decimal(match.group(0)))
    except InvalidOperation:
        return _ZERO


def coerce_int(value: object) -> int:
    """Return *value* as an ``int`` (truncating decimals), ``0`` when it is not numeric."""

    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        number = coerce_number(value)
        return int(number)
    match = _INTEGER_PREFIX.match(str(value).strip())
    if match is None:
        return 0
    return int(match.group(0))


__all__ = ["coerce_int", "coerce_number"]
