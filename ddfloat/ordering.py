"""Total order on native doubles and on (high, low) pairs.

IEEE comparison is extended so that ``-0.0 < +0.0`` and every NaN belongs
to a single equivalence class above ``+inf``. Equality and hashing of
:class:`ddfloat.extended.ExtendedFloat` are derived from this order.
"""

from __future__ import annotations

import math


def compare_float(x: float, y: float) -> int:
    """Three-way comparison of two doubles in the total order."""
    if x < y:
        return -1
    if x > y:
        return 1
    x_nan, y_nan = math.isnan(x), math.isnan(y)
    if x_nan or y_nan:
        return int(x_nan) - int(y_nan)
    # numerically equal, only the sign of a zero can still differ
    sx, sy = math.copysign(1.0, x), math.copysign(1.0, y)
    return (sx > sy) - (sx < sy)


def compare_pairs(xh: float, xl: float, yh: float, yl: float) -> int:
    result = compare_float(xh, yh)
    return result if result != 0 else compare_float(xl, yl)
