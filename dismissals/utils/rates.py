"""
Batting rate and numeric-entry helpers.

Rates are reported to one decimal place, rounded half-up on the exact
binary value of the float (the same result a fixed-point display gives).
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

NumericEntry = Union[str, int, float, None]


def one_decimal(value: float) -> float:
    """Round to one decimal place, half-up on the exact stored value."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def strike_rate(runs: int, balls: int) -> float:
    """Runs per 100 balls, one decimal. 0.0 when no balls were faced."""
    if balls <= 0:
        return 0.0
    return one_decimal(runs / balls * 100)


def average(total: int, count: int) -> Optional[float]:
    """Mean to one decimal, or None for an empty sample."""
    if count <= 0:
        return None
    return one_decimal(total / count)


def parse_leading_int(raw: NumericEntry) -> Optional[int]:
    """Parse the leading integer of a form entry.

    Accepts leading whitespace and a sign, ignores trailing characters:
    "12abc" -> 12, " 3.9" -> 3, "" -> None, "abc" -> None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if raw != raw or raw in (float("inf"), float("-inf")):
            return None
        return int(raw)
    match = _LEADING_INT.match(str(raw))
    if not match:
        return None
    return int(match.group(1))


def coerce_runs(raw: NumericEntry) -> int:
    """Runs scored: non-negative, 0 when missing or unparsable."""
    value = parse_leading_int(raw)
    if value is None or value < 0:
        return 0
    return value


def coerce_balls(raw: NumericEntry) -> int:
    """Balls faced: positive, 1 when missing, unparsable or zero."""
    value = parse_leading_int(raw)
    if value is None or value <= 0:
        return 1
    return value
