"""Fixed-point money helpers.

Amounts travel over the wire as strings with exactly two fractional digits
(``"1000.00"``) and are handled in Python as :class:`~decimal.Decimal` so
sums over many small transactions never pick up binary floating point error.
"""
from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable, Union

from sqlalchemy import Numeric
from sqlalchemy.types import TypeDecorator

from app.core.errors import InvalidAmount

MoneyLike = Union[Decimal, int, str]

CENT = Decimal("0.01")
ZERO = Decimal("0.00")
# Numeric(12, 2) leaves ten integer digits.
MAX_ABS_AMOUNT = Decimal("9999999999.99")

_NUMERIC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


def parse_money(value: Any, label: str = "Amount") -> Decimal:
    """Parse a JSON number or numeric string into a 2-digit Decimal.

    Accepts ints, floats and strings such as ``"12"``, ``" 12.5 "``,
    ``"-3.10"``, ``".5"`` or ``"1e3"``. Booleans, empty strings, NaN/Infinity
    and anything else raise :class:`InvalidAmount`.
    """
    invalid = InvalidAmount(f"{label} must be a valid number")

    if value is None or isinstance(value, bool):
        raise invalid

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise invalid
        number = Decimal(repr(value))
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_RE.match(text):
            raise invalid
        number = Decimal(text)
    else:
        raise invalid

    if not number.is_finite():
        raise invalid

    try:
        result = normalize(number)
    except InvalidOperation:
        raise InvalidAmount(f"{label} is out of range") from None

    if abs(result) > MAX_ABS_AMOUNT:
        raise InvalidAmount(f"{label} is out of range")
    return result


def _to_decimal(value: MoneyLike) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, (int, str)) and not isinstance(value, bool):
        return Decimal(value)
    raise TypeError(f"Unsupported money value: {value!r}")


def normalize(value: MoneyLike) -> Decimal:
    """Round to exactly two fractional digits, half away from zero."""
    result = _to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    if result.is_zero():
        return ZERO
    return result


def add(a: MoneyLike, b: MoneyLike) -> Decimal:
    return normalize(_to_decimal(a) + _to_decimal(b))


def subtract(a: MoneyLike, b: MoneyLike) -> Decimal:
    return normalize(_to_decimal(a) - _to_decimal(b))


def total(values: Iterable[MoneyLike]) -> Decimal:
    """Fixed-point sum, starting at 0.00."""
    result = ZERO
    for value in values:
        result = add(result, value)
    return result


def format_money(value: MoneyLike | None) -> str:
    """Render the canonical wire form, e.g. ``"1000.00"``."""
    if value is None:
        value = ZERO
    return format(normalize(value), "f")


class Money(TypeDecorator):
    """Numeric(12, 2) column that always round-trips two fractional digits."""

    impl = Numeric
    cache_ok = True

    def __init__(self, precision: int = 12, scale: int = 2) -> None:
        super().__init__(precision=precision, scale=scale, asdecimal=True)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return normalize(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return normalize(value)


__all__ = [
    "CENT",
    "MAX_ABS_AMOUNT",
    "Money",
    "ZERO",
    "add",
    "format_money",
    "normalize",
    "parse_money",
    "subtract",
    "total",
]
