from __future__ import annotations

import math
import random

import pytest

from ddfloat import (
    MAX_VALUE,
    NAN,
    NEGATIVE_INFINITY,
    NEGATIVE_ONE,
    NEGATIVE_ZERO,
    POSITIVE_INFINITY,
    POSITIVE_ONE,
    POSITIVE_ZERO,
    from_native,
    from_pair,
)
from ddfloat.ordering import compare_float, compare_pairs


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (1.0, 2.0, -1),
        (2.0, 1.0, 1),
        (1.5, 1.5, 0),
        (-0.0, 0.0, -1),
        (0.0, -0.0, 1),
        (-0.0, -0.0, 0),
        (math.nan, math.nan, 0),
        (math.nan, math.inf, 1),
        (-math.inf, math.nan, -1),
        (-math.inf, -1e308, -1),
    ],
)
def test_compare_float_total_order(x, y, expected):
    assert compare_float(x, y) == expected


def test_compare_pairs_uses_low_on_tie():
    assert compare_pairs(1.0, 1e-50, 1.0, -1e-50) > 0
    assert compare_pairs(2.0, -0.25, 1.0, 0.25) > 0
    assert compare_pairs(1.0, 0.0, 1.0, 0.0) == 0


def test_greater_high_wins_over_low():
    assert from_pair(2.0, -1e-50).compare(from_pair(1.0, 1e-50)) > 0
    assert from_pair(2.0, -0.25).compare(from_pair(1.0, 0.25)) > 0


def test_low_part_breaks_ties():
    assert from_pair(1.0, 1e-50).compare(from_pair(1.0, -1e-50)) > 0
    assert from_pair(1.0, -1e-50) < from_pair(1.0, 1e-50)


def test_nan_is_self_equal_and_maximal():
    assert NAN.compare(NAN) == 0
    assert NAN.compare(POSITIVE_INFINITY) > 0
    assert NAN == NAN
    assert NAN.equals(from_pair(math.nan, 1.0))


def test_positive_zero_above_negative_zero():
    assert POSITIVE_ZERO.compare(NEGATIVE_ZERO) > 0
    assert POSITIVE_ZERO != NEGATIVE_ZERO


def test_full_chain_sorts_in_total_order():
    chain = [
        NEGATIVE_INFINITY,
        from_native(-1e300),
        NEGATIVE_ONE,
        from_pair(-1e-300, 0.0),
        NEGATIVE_ZERO,
        POSITIVE_ZERO,
        from_native(5e-324),
        POSITIVE_ONE,
        from_pair(1.0, 1e-20),
        MAX_VALUE,
        POSITIVE_INFINITY,
        NAN,
    ]
    shuffled = list(chain)
    random.Random(7).shuffle(shuffled)
    assert sorted(shuffled) == chain
    for a, b in zip(chain, chain[1:]):
        assert a.compare(b) < 0
        assert b.compare(a) > 0


def test_compare_against_native_values():
    x = from_pair(1.0, 1e-20)
    assert x > 1.0
    assert x.compare(1.0) > 0
    assert from_native(2.0) == 2.0
    assert NAN == math.nan
    assert NEGATIVE_ZERO < 0.0
