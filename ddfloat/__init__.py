"""ddfloat: double-double extended precision floats.

Version is single-sourced from the repository root VERSION file.
"""

from __future__ import annotations
from pathlib import Path

from .extended import (
    MAX_VALUE,
    NAN,
    NEGATIVE_INFINITY,
    NEGATIVE_ONE,
    NEGATIVE_ZERO,
    POSITIVE_INFINITY,
    POSITIVE_ONE,
    POSITIVE_ZERO,
    SPECIAL_VALUES,
    ExtendedFloat,
    InvalidOperandError,
    SpecialValues,
    as_extended,
    canonicalize,
    from_native,
    from_pair,
)
from .decimal_conv import from_exact_decimal, to_display_string, to_exact_fraction
from .approx import is_close, relative_error

def _read_version() -> str:
    repo_root = Path(__file__).resolve().parents[1]
    try:
        return (repo_root / "VERSION").read_text(encoding="utf-8").strip()
    except Exception:
        return "1.0.0"

__version__ = _read_version()

__all__ = [
    "ExtendedFloat",
    "InvalidOperandError",
    "SpecialValues",
    "SPECIAL_VALUES",
    "POSITIVE_ZERO",
    "NEGATIVE_ZERO",
    "POSITIVE_ONE",
    "NEGATIVE_ONE",
    "MAX_VALUE",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "NAN",
    "as_extended",
    "canonicalize",
    "from_native",
    "from_pair",
    "from_exact_decimal",
    "to_display_string",
    "to_exact_fraction",
    "is_close",
    "relative_error",
]
