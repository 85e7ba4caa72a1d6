"""Double-double extended precision float.

An :class:`ExtendedFloat` is the unevaluated sum ``high + low`` of two
native doubles, giving about 106 significand bits. Instances are immutable
and are only produced by :func:`canonicalize`, which keeps them in the
canonical form:

* finite nonzero ``high``: ``|low| <= ulp(high) / 2`` and a zero ``low`` is
  stored as ``+0.0``;
* zero, infinite and NaN values are the shared singletons of
  :data:`SPECIAL_VALUES`.

Order and equality follow :mod:`ddfloat.ordering`:
``-inf < negative < -0 < +0 < positive < +inf < nan``.
"""

from __future__ import annotations

import math
import numbers
import sys
import threading
from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from .constants import MAX_FINITE
from .kernels import two_divide_dd, two_prod_dd, two_sum_dd
from .ordering import compare_pairs


class InvalidOperandError(ValueError):
    pass


Operand = Union["ExtendedFloat", float, int]


class ExtendedFloat:
    __slots__ = ("_high", "_low", "_hash", "_lock", "_negated", "_abs")

    def __new__(cls, value: object = 0.0) -> "ExtendedFloat":
        if isinstance(value, ExtendedFloat):
            return value
        if value is None:
            raise InvalidOperandError("ExtendedFloat() argument must not be None")
        if isinstance(value, numbers.Rational):
            return _from_rational(value)
        if isinstance(value, numbers.Real):
            return from_native(float(value))
        from .decimal_conv import from_exact_decimal
        return from_exact_decimal(value)

    @classmethod
    def _from_components(cls, high: float, low: float) -> "ExtendedFloat":
        self = object.__new__(cls)
        self._high = high
        self._low = low
        self._hash = _numeric_hash(high, low)
        self._lock = threading.Lock()
        self._negated = None
        self._abs = None
        return self

    @classmethod
    def from_native(cls, value: float) -> "ExtendedFloat":
        return from_native(value)

    @classmethod
    def from_exact_decimal(cls, value) -> "ExtendedFloat":
        from .decimal_conv import from_exact_decimal
        return from_exact_decimal(value)

    @property
    def high(self) -> float:
        return self._high

    @property
    def low(self) -> float:
        return self._low

    def to_native(self) -> float:
        return self._high

    def is_finite(self) -> bool:
        return math.isfinite(self._high)

    def is_infinite(self) -> bool:
        return math.isinf(self._high)

    def is_nan(self) -> bool:
        return math.isnan(self._high)

    # -- ordering and equality ----------------------------------------------

    def compare(self, other: Operand) -> int:
        """Negative, zero or positive as ``self`` is below, equal to or above ``other``."""
        o = as_extended(other, "compare")
        if isinstance(other, numbers.Rational) and not _holds_exactly(o, other):
            return self._compare_exact(_as_fraction(other))
        return compare_pairs(self._high, self._low, o._high, o._low)

    def _compare_exact(self, q: Fraction) -> int:
        # q has no double-double representation, so it never ties with self
        if math.isnan(self._high):
            return 1
        if math.isinf(self._high):
            return 1 if self._high > 0.0 else -1
        return 1 if Fraction(self._high) + Fraction(self._low) > q else -1

    def equals(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ExtendedFloat):
            return False
        return self.compare(other) == 0

    def __eq__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) == 0

    def __ne__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) != 0

    def __lt__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object):
        if not _is_operand(other):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return self._hash

    # -- unary operations ---------------------------------------------------

    def negated(self) -> "ExtendedFloat":
        out = self._negated
        if out is not None:
            return out
        with self._lock:
            out = self._negated
            if out is not None:
                return out
            out = canonicalize(-self._high, -self._low)
            self._negated = out
            # singletons are pre-linked; a fresh result is unpublished until returned
            if out._negated is None:
                out._negated = self
            return out

    def abs(self) -> "ExtendedFloat":
        # single-check memo, negated() always yields the same partner
        out = self._abs
        if out is None:
            out = self if self.compare(POSITIVE_ZERO) >= 0 else self.negated()
            self._abs = out
        return out

    def reciprocal(self) -> "ExtendedFloat":
        return POSITIVE_ONE.divided_by(self)

    # -- binary operations --------------------------------------------------

    def plus(self, augend: Operand) -> "ExtendedFloat":
        yh, yl = _components(augend, "plus")
        return canonicalize(*two_sum_dd(self._high, self._low, yh, yl))

    def minus(self, subtrahend: Operand) -> "ExtendedFloat":
        yh, yl = _components(subtrahend, "minus")
        return canonicalize(*two_sum_dd(self._high, self._low, -yh, -yl))

    def times(self, multiplicand: Operand) -> "ExtendedFloat":
        yh, yl = _components(multiplicand, "times")
        return canonicalize(*two_prod_dd(self._high, self._low, yh, yl))

    def divided_by(self, divisor: Operand) -> "ExtendedFloat":
        yh, yl = _components(divisor, "divided_by")
        return canonicalize(*two_divide_dd(self._high, self._low, yh, yl))

    # -- Python number protocol ---------------------------------------------

    def __neg__(self) -> "ExtendedFloat":
        return self.negated()

    def __pos__(self) -> "ExtendedFloat":
        return self

    def __abs__(self) -> "ExtendedFloat":
        return self.abs()

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.plus(other)

    def __radd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return as_extended(other, "plus").plus(self)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.minus(other)

    def __rsub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return as_extended(other, "minus").minus(self)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.times(other)

    def __rmul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return as_extended(other, "times").times(self)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.divided_by(other)

    def __rtruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return as_extended(other, "divided_by").divided_by(self)

    def __float__(self) -> float:
        return self._high

    def __bool__(self) -> bool:
        return self._high != 0.0

    def __reduce__(self):
        return from_pair, (self._high, self._low)

    def __repr__(self) -> str:
        return f"ExtendedFloat(high={self._high!r}, low={self._low!r})"

    def __str__(self) -> str:
        from .decimal_conv import to_display_string
        return to_display_string(self)


def _is_operand(value: object) -> bool:
    return isinstance(value, (ExtendedFloat, numbers.Real))


def _components(value: object, op: str) -> tuple[float, float]:
    if isinstance(value, ExtendedFloat):
        return value._high, value._low
    if value is None:
        raise InvalidOperandError(f"{op}: operand must not be None")
    if isinstance(value, numbers.Rational):
        x = _from_rational(value)
        return x._high, x._low
    if isinstance(value, numbers.Real):
        return float(value), 0.0
    raise TypeError(f"{op}: unsupported operand type {type(value).__name__!r}")


def as_extended(value: object, op: str = "as_extended") -> ExtendedFloat:
    """Promote an operand; integers and fractions round exactly, beyond range to infinity."""
    if isinstance(value, ExtendedFloat):
        return value
    return canonicalize(*_components(value, op))


def _as_fraction(value: numbers.Rational) -> Fraction:
    if isinstance(value, numbers.Integral):
        return Fraction(int(value))
    return Fraction(value.numerator, value.denominator)


def _from_rational(value: numbers.Rational) -> ExtendedFloat:
    from .decimal_conv import from_exact_decimal
    return from_exact_decimal(_as_fraction(value))


def _holds_exactly(x: ExtendedFloat, value: numbers.Rational) -> bool:
    if not x.is_finite():
        return False
    return Fraction(x._high) + Fraction(x._low) == _as_fraction(value)


def _numeric_hash(high: float, low: float) -> int:
    # same hash as any int, float, Fraction or Decimal of equal value
    if math.isnan(high):
        return sys.hash_info.nan
    if low == 0.0:
        return hash(high)
    return hash(Fraction(high) + Fraction(low))


# ---------------------------------------------------------------------------
# Canonicalization
# ---------------------------------------------------------------------------


def canonicalize(raw_high: float, raw_low: float) -> ExtendedFloat:
    """Reduce a raw ``(high, low)`` pair to its canonical instance.

    ``raw_low`` must be finite when ``raw_high`` is and must not carry a
    higher exponent than a nonzero ``raw_high``. Non-finite results and zeros
    come back as singletons; a sum beyond ``MAX_FINITE`` becomes infinity.
    """
    assert not math.isfinite(raw_high) or math.isfinite(raw_low), (
        f"finite high with non-finite low: high={raw_high!r}, low={raw_low!r}"
    )
    if not math.isfinite(raw_high):
        return _non_finite(raw_high)

    if raw_high == 0.0:
        if raw_low != 0.0:
            return ExtendedFloat._from_components(raw_low, 0.0)
        return NEGATIVE_ZERO if math.copysign(1.0, raw_high) < 0.0 else POSITIVE_ZERO

    s = raw_high + raw_low
    e = raw_low - (s - raw_high)

    if not math.isfinite(s):
        return _non_finite(s)
    if s == 0.0:
        return POSITIVE_ZERO

    if abs(s) == MAX_FINITE:
        if s > 0.0 and e > 0.0:
            return POSITIVE_INFINITY
        if s < 0.0 and e < 0.0:
            return NEGATIVE_INFINITY

    assert 0.5 * math.ulp(s) >= abs(e), f"not normalized: s={s!r}, e={e!r}"
    if e == 0.0:  # zero low is always stored as +0.0
        e = 0.0
    return ExtendedFloat._from_components(s, e)


def _non_finite(value: float) -> ExtendedFloat:
    if value == math.inf:
        return POSITIVE_INFINITY
    if value == -math.inf:
        return NEGATIVE_INFINITY
    return NAN


def from_native(value: float) -> ExtendedFloat:
    """Extended value of a native double; ``from_native(v).to_native()`` is ``v``."""
    return canonicalize(float(value), 0.0)


def from_pair(high: float, low: float) -> ExtendedFloat:
    """Canonical instance of ``high + low``. The pair is not validated."""
    return canonicalize(float(high), float(low))


# ---------------------------------------------------------------------------
# Special values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SpecialValues:
    positive_zero: ExtendedFloat
    negative_zero: ExtendedFloat
    positive_one: ExtendedFloat
    negative_one: ExtendedFloat
    max_value: ExtendedFloat
    positive_infinity: ExtendedFloat
    negative_infinity: ExtendedFloat
    nan: ExtendedFloat


def _build_special_values() -> SpecialValues:
    make = ExtendedFloat._from_components
    sv = SpecialValues(
        positive_zero=make(0.0, 0.0),
        negative_zero=make(-0.0, 0.0),
        positive_one=make(1.0, 0.0),
        negative_one=make(-1.0, 0.0),
        max_value=make(MAX_FINITE, 0.0),
        positive_infinity=make(math.inf, 0.0),
        negative_infinity=make(-math.inf, 0.0),
        nan=make(math.nan, math.nan),
    )
    for a, b in (
        (sv.positive_zero, sv.negative_zero),
        (sv.positive_one, sv.negative_one),
        (sv.positive_infinity, sv.negative_infinity),
        (sv.nan, sv.nan),
    ):
        a._negated = b
        b._negated = a
    return sv


SPECIAL_VALUES = _build_special_values()

POSITIVE_ZERO = SPECIAL_VALUES.positive_zero
NEGATIVE_ZERO = SPECIAL_VALUES.negative_zero
POSITIVE_ONE = SPECIAL_VALUES.positive_one
NEGATIVE_ONE = SPECIAL_VALUES.negative_one
MAX_VALUE = SPECIAL_VALUES.max_value
POSITIVE_INFINITY = SPECIAL_VALUES.positive_infinity
NEGATIVE_INFINITY = SPECIAL_VALUES.negative_infinity
NAN = SPECIAL_VALUES.nan

ExtendedFloat.POSITIVE_ZERO = POSITIVE_ZERO
ExtendedFloat.NEGATIVE_ZERO = NEGATIVE_ZERO
ExtendedFloat.POSITIVE_ONE = POSITIVE_ONE
ExtendedFloat.NEGATIVE_ONE = NEGATIVE_ONE
ExtendedFloat.MAX_VALUE = MAX_VALUE
ExtendedFloat.POSITIVE_INFINITY = POSITIVE_INFINITY
ExtendedFloat.NEGATIVE_INFINITY = NEGATIVE_INFINITY
ExtendedFloat.NAN = NAN
