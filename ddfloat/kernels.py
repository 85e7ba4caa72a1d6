"""Compensated double-double kernels.

Every kernel works on native floats only and returns a ``(high, low)``
tuple. Results of the ``*_dd`` kernels are not renormalized; callers pass
them through :func:`ddfloat.extended.canonicalize`.
"""

from __future__ import annotations

import math

import numpy as np

from .constants import (
    DIVIDE_DOWN_SCALE,
    DIVIDE_LOWER_GUARD,
    DIVIDE_UP_SCALE,
    DIVIDE_UPPER_GUARD,
    MIN_NORMAL,
    SPLIT_MASK,
    SUBNORMAL_SCALE,
    SUBNORMAL_UNSCALE,
)

Pair = tuple[float, float]

_SPLIT_MASK_U64 = np.uint64(SPLIT_MASK)


def two_sum(x: float, y: float) -> Pair:
    """Knuth two-sum: ``s = fl(x + y)`` and the exact rounding error ``e``."""
    s = x + y
    v = s - x
    e = (x - (s - v)) + (y - v)
    return s, e


def two_sum_dd(xh: float, xl: float, yh: float, yl: float) -> Pair:
    s, e = two_sum(xh, yh)
    return s, e + (xl + yl)


def split(x: float) -> Pair:
    """Split ``x`` into ``(hi, lo)`` with ``hi + lo == x`` exactly.

    ``hi`` is ``x`` with the low 27 significand bits cleared. Subnormals are
    lifted by 2**56 first so that the mask sees a full significand.
    Zero and non-finite values are returned as ``(x, 0.0)``.
    """
    if not math.isfinite(x) or x == 0.0:
        return x, 0.0

    scaled = abs(x) < MIN_NORMAL
    if scaled:
        x *= SUBNORMAL_SCALE

    bits = np.array([x], dtype=np.float64).view(np.uint64)
    hi = float((bits & _SPLIT_MASK_U64).view(np.float64)[0])
    lo = x - hi

    if scaled:
        hi *= SUBNORMAL_UNSCALE
        lo *= SUBNORMAL_UNSCALE
    return hi, lo


def two_prod(x: float, y: float) -> Pair:
    """Dekker product: ``p = fl(x * y)`` and the exact rounding error ``e``."""
    p = x * y
    xh, xl = split(x)
    yh, yl = split(y)
    e = ((xh * yh - p) + xh * yl + xl * yh) + xl * yl
    return p, e


def two_prod_dd(xh: float, xl: float, yh: float, yl: float) -> Pair:
    # xl * yl is below the working precision and is dropped
    p, e = two_prod(xh, yh)
    return p, e + (xl * yh + xh * yl)


def two_divide_dd(xh: float, xl: float, yh: float, yl: float) -> Pair:
    """Quotient ``x / y`` as ``(zh, zl)``.

    ``zh`` is the native quotient of the high parts and ``zl`` the residual
    ``(x - y * zh) / yh``. When ``zh`` is zero or non-finite it is returned
    as is with a zero correction. Operands near the ends of the exponent
    range are rescaled by a common power of two; the factor cancels in the
    quotient.
    """
    zh = xh / yh if yh != 0.0 else _divide_by_zero(xh, yh)
    if not math.isfinite(zh) or zh == 0.0:
        return zh, 0.0

    ax, ay = abs(xh), abs(yh)
    if ax > DIVIDE_UPPER_GUARD or ay > DIVIDE_UPPER_GUARD:
        scale = DIVIDE_DOWN_SCALE
    elif ax < DIVIDE_LOWER_GUARD or ay < DIVIDE_LOWER_GUARD:
        scale = DIVIDE_UP_SCALE
    else:
        scale = 1.0
    if scale != 1.0:
        xh *= scale; xl *= scale
        yh *= scale; yl *= scale

    rh, rl = two_prod_dd(zh, 0.0, yh, yl)
    rh, rl = two_sum_dd(xh, xl, -rh, -rl)
    zl = (rh + rl) / yh
    return zh, zl


def _divide_by_zero(x: float, y: float) -> float:
    # native IEEE division: x / ±0 is a signed infinity, 0 / 0 and nan / 0 are nan
    if x == 0.0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


def bit_string(x: float) -> str:
    """64-character IEEE-754 bit pattern of ``x`` (sign, exponent, fraction)."""
    bits = np.array([x], dtype=np.float64).view(np.uint64)
    return np.binary_repr(int(bits[0]), width=64)
