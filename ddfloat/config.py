from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from decimal import ROUND_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP
from typing import Any, Dict, Literal, Optional, Tuple

import yaml

from .constants import DISPLAY_DIGITS

RoundingName = Literal["half_even", "half_up", "down"]

ROUNDING_MODES: Dict[str, str] = {
    "half_even": ROUND_HALF_EVEN,
    "half_up": ROUND_HALF_UP,
    "down": ROUND_DOWN,
}
REPORT_OPS: Tuple[str, ...] = ("plus", "minus", "times", "divided_by", "reciprocal")

_DISPLAY_KEYS = {"digits", "rounding"}
_REPORT_KEYS = {"samples", "seed", "ops", "exponent_range"}
_TOP_KEYS = {"display", "report"}


@dataclass(frozen=True)
class DisplayConfig:
    digits: int = DISPLAY_DIGITS
    rounding: RoundingName = "half_even"

    @property
    def decimal_rounding(self) -> str:
        return ROUNDING_MODES[self.rounding]


@dataclass(frozen=True)
class ReportConfig:
    samples: int = 1000
    seed: int = 1
    ops: Tuple[str, ...] = REPORT_OPS
    exponent_range: int = 30


@dataclass(frozen=True)
class Config:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


def default_config() -> Config:
    return Config()


def _section(d: Dict[str, Any], key: str, allowed: set) -> Dict[str, Any]:
    sec = d.get(key) or {}
    if not isinstance(sec, dict):
        raise ValueError(f"{key} must be a mapping")
    unknown = sorted(set(sec.keys()) - allowed)
    if unknown:
        warnings.warn(f"ignoring unknown {key} keys: {unknown}", RuntimeWarning)
    return sec


def config_from_dict(d: Optional[Dict[str, Any]]) -> Config:
    d = d or {}
    if not isinstance(d, dict):
        raise ValueError("config root must be a mapping")
    unknown = sorted(set(d.keys()) - _TOP_KEYS)
    if unknown:
        warnings.warn(f"ignoring unknown config sections: {unknown}", RuntimeWarning)

    disp = _section(d, "display", _DISPLAY_KEYS)
    digits = int(disp.get("digits", DISPLAY_DIGITS))
    if digits < 1:
        raise ValueError("display.digits must be >= 1")
    rounding = str(disp.get("rounding", "half_even")).strip().lower()
    if rounding not in ROUNDING_MODES:
        raise ValueError(f"display.rounding must be one of: {', '.join(ROUNDING_MODES)}")

    rep = _section(d, "report", _REPORT_KEYS)
    samples = int(rep.get("samples", 1000))
    if samples < 1:
        raise ValueError("report.samples must be >= 1")
    ops = tuple(str(x) for x in rep.get("ops", REPORT_OPS))
    bad = sorted(set(ops) - set(REPORT_OPS))
    if bad:
        raise ValueError(f"report.ops contains unsupported operations: {bad}")
    exponent_range = int(rep.get("exponent_range", 30))
    if not 0 <= exponent_range <= 1000:
        raise ValueError("report.exponent_range must be in [0, 1000]")

    return Config(
        display=DisplayConfig(digits=digits, rounding=rounding),
        report=ReportConfig(
            samples=samples,
            seed=int(rep.get("seed", 1)),
            ops=ops,
            exponent_range=exponent_range,
        ),
    )


def load_config(path: str) -> Config:
    with open(path, "r", encoding="utf-8") as f:
        d = yaml.safe_load(f)
    return config_from_dict(d)
