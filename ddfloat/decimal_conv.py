"""Conversions between ExtendedFloat and exact decimal/rational values.

The standard library ``decimal`` and ``fractions`` modules provide the
exact arithmetic; this module only rounds into and out of the double-double
representation.
"""

from __future__ import annotations

import math
from decimal import Context, Decimal
from fractions import Fraction
from typing import Optional, Union

from .config import DisplayConfig
from .extended import ExtendedFloat, InvalidOperandError, canonicalize

ExactValue = Union[Decimal, Fraction, int]

_DEFAULT_DISPLAY = DisplayConfig()


def from_exact_decimal(value: ExactValue) -> ExtendedFloat:
    """Nearest double-double to an exact decimal or rational value.

    ``high`` is ``value`` rounded to the nearest double and ``low`` the exact
    remainder ``value - high`` rounded to a double. Decimal infinities and
    NaN map to the matching singleton, magnitudes beyond the double range to
    the signed infinity.
    """
    if value is None:
        raise InvalidOperandError("from_exact_decimal: value must not be None")
    if isinstance(value, Decimal):
        if value.is_nan():
            return canonicalize(math.nan, 0.0)
        if value.is_infinite():
            return canonicalize(-math.inf if value.is_signed() else math.inf, 0.0)
        if value.is_zero():
            return canonicalize(-0.0 if value.is_signed() else 0.0, 0.0)
        exact = Fraction(value)
    elif isinstance(value, (Fraction, int)):
        exact = Fraction(value)
    else:
        raise TypeError(
            f"from_exact_decimal: expected Decimal, Fraction or int, got {type(value).__name__!r}"
        )

    try:
        high = float(exact)
    except OverflowError:
        return canonicalize(math.inf if exact > 0 else -math.inf, 0.0)
    if not math.isfinite(high):
        return canonicalize(high, 0.0)
    low = float(exact - Fraction(high))
    return canonicalize(high, low)


def to_exact_fraction(x: ExtendedFloat) -> Fraction:
    """Exact rational value of a finite instance."""
    if not x.is_finite():
        raise ValueError(f"cannot convert non-finite value {x!r} to Fraction")
    return Fraction(x.high) + Fraction(x.low)


def to_display_string(x: ExtendedFloat, display: Optional[DisplayConfig] = None) -> str:
    """Decimal text of ``x``; not guaranteed to parse back to the same instance.

    Finite nonzero values are the exact decimal sum of both components
    rounded once to ``display.digits`` significant digits. Zero, infinities
    and NaN use the native float text.
    """
    display = display or _DEFAULT_DISPLAY
    if not x.is_finite() or x.high == 0.0:
        return repr(x.high)
    ctx = Context(prec=display.digits, rounding=display.decimal_rounding)
    return str(ctx.add(Decimal(x.high), Decimal(x.low)))
