from __future__ import annotations

import math

from .extended import ExtendedFloat, Operand, as_extended


def is_close(result: ExtendedFloat, expected: Operand, rel_err: float) -> bool:
    """``|result - expected| <= |rel_err * expected|``, difference taken in extended precision."""
    expected = as_extended(expected, "is_close")
    diff = result.minus(expected).to_native()
    return abs(diff) <= abs(rel_err * expected.to_native())


def relative_error(result: ExtendedFloat, expected: Operand) -> float:
    expected = as_extended(expected, "relative_error")
    if result.equals(expected):
        return 0.0
    diff = abs(result.minus(expected).to_native())
    scale = abs(expected.to_native())
    if math.isnan(diff):
        return math.nan
    if scale == 0.0:
        return math.inf
    return diff / scale
