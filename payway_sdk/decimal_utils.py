"""Helpers for working with :class:`decimal.Decimal` amounts."""
from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Union


def to_decimal(value: object) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to Decimal")

    text = str(value).strip()
    try:
        return Decimal(text)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValueError(f"Cannot convert {value!r} to Decimal") from exc


def to_json_number(value: object) -> Union[int, float]:
    """Return the JSON number the gateway expects for ``value``.

    Integral amounts are emitted without a fractional part (``20`` rather
    than ``20.0``), everything else as a float. Amounts a double cannot hold
    exactly, or at all, raise :class:`ValueError`.
    """

    amount = to_decimal(value)
    as_float = float(amount)
    if not math.isfinite(as_float):
        raise ValueError(f"Amount {value!r} is out of range")
    if Decimal(repr(as_float)) != amount:
        raise ValueError(f"Amount {value!r} cannot be represented exactly")

    if amount == amount.to_integral_value():
        return int(amount)
    return as_float
