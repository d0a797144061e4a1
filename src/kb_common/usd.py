"""Float helpers for USD figures coming back from the exchange.

Exchange payloads mix numbers, numeric strings, None and nested dicts.
Everything shown on the page goes through these helpers.
"""

import math
from collections.abc import Mapping
from typing import Any


def as_finite_number(value: Any) -> float | None:
    """Return value as float if it is a real, finite number (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def parse_float(value: Any) -> float | None:
    """Parse a number or numeric string. None if unparseable or non-finite."""
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return number if math.isfinite(number) else None
    return as_finite_number(value)


def finite_numbers(obj: Any) -> dict[str, float]:
    """Copy of a currency mapping keeping only finite numeric values."""
    if not isinstance(obj, Mapping):
        return {}
    out: dict[str, float] = {}
    for key, value in obj.items():
        number = as_finite_number(value)
        if number is not None:
            out[str(key)] = number
    return out


def format_amount(value: float | None) -> str:
    """Shortest plain rendering: 150.5 -> '150.5', 100.0 -> '100', None -> '0'."""
    if value is None:
        return "0"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_fixed(value: float) -> str:
    """Two-decimal rendering used for profit and percent: 200 -> '200.00'."""
    return f"{value:.2f}"
