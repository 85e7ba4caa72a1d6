"""Named numeric constants for ddfloat.

These constants replace the magic numbers of the compensated kernels and
of the display layer. Any change to these values is a behaviour change of
the arithmetic and must be verified with the full test suite.

Categories
----------
MAX_FINITE, MIN_NORMAL
    Range limits of the native double. ``MAX_FINITE`` drives the overflow
    promotion in canonicalization, ``MIN_NORMAL`` the subnormal path of the
    splitter.

SPLIT_MASK
    Bit mask clearing the low 27 significand bits of an IEEE double. The
    masked value has at most 26 significant bits, so products of two split
    halves are exact.

SUBNORMAL_SCALE, SUBNORMAL_UNSCALE
    2**56 and its inverse. Subnormal inputs of the splitter are lifted into
    the normal range, split, then scaled back.

DIVIDE_UPPER_GUARD, DIVIDE_LOWER_GUARD, DIVIDE_DOWN_SCALE, DIVIDE_UP_SCALE
    Operand magnitudes outside [1e-300, 1e300] are rescaled by a shared
    power of two before the division residual is formed.

DISPLAY_DIGITS
    Significant digits of the default display string.
"""

from __future__ import annotations

import sys

# ---------------------------------------------------------------------------
# Native double range
# ---------------------------------------------------------------------------
MAX_FINITE: float = sys.float_info.max
MIN_NORMAL: float = sys.float_info.min

# ---------------------------------------------------------------------------
# Error-free splitting
# ---------------------------------------------------------------------------
SPLIT_MASK: int = 0xFFFF_FFFF_F800_0000
SUBNORMAL_SCALE: float = float(2**56)
SUBNORMAL_UNSCALE: float = 1.0 / SUBNORMAL_SCALE

# ---------------------------------------------------------------------------
# Compensated division rescaling
# ---------------------------------------------------------------------------
DIVIDE_UPPER_GUARD: float = 1e300
DIVIDE_LOWER_GUARD: float = 1e-300
DIVIDE_DOWN_SCALE: float = 1.0 / float(2**56)
DIVIDE_UP_SCALE: float = float(2**56)

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------
DISPLAY_DIGITS: int = 32
