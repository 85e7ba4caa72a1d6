from __future__ import annotations

import argparse
import csv
import os
from fractions import Fraction
from pathlib import Path
import sys
import warnings

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ddfloat import ExtendedFloat, from_pair, relative_error, to_exact_fraction  # noqa: E402
from ddfloat.config import ReportConfig, default_config, load_config  # noqa: E402


def sample_operands(rng: np.random.Generator, n: int, exponent_range: int) -> list[ExtendedFloat]:
    """Random finite operands ``m * 2**k`` with a full double-double significand."""
    k = rng.integers(-int(exponent_range), int(exponent_range) + 1, size=n)
    sign = rng.choice([-1.0, 1.0], size=n)
    hi = sign * rng.uniform(1.0, 2.0, size=n) * np.exp2(k)
    lo = rng.uniform(-0.5, 0.5, size=n) * np.spacing(np.abs(hi))
    return [from_pair(float(h), float(l)) for h, l in zip(hi, lo)]


def exact_value(op: str, x: Fraction, y: Fraction) -> Fraction:
    if op == "plus":
        return x + y
    if op == "minus":
        return x - y
    if op == "times":
        return x * y
    if op == "divided_by":
        return x / y
    if op == "reciprocal":
        return 1 / x
    raise ValueError(f"unsupported operation: {op}")


def _apply(op: str, x: ExtendedFloat, y: ExtendedFloat) -> ExtendedFloat:
    if op == "reciprocal":
        return x.reciprocal()
    return getattr(x, op)(y)


def run_report(cfg: ReportConfig) -> list[dict[str, float | int | str]]:
    rng = np.random.default_rng(int(cfg.seed))
    xs = sample_operands(rng, int(cfg.samples), int(cfg.exponent_range))
    ys = sample_operands(rng, int(cfg.samples), int(cfg.exponent_range))
    rows: list[dict[str, float | int | str]] = []
    for op in cfg.ops:
        errs: list[float] = []
        skipped = 0
        for x, y in zip(xs, ys):
            got = _apply(op, x, y)
            if not got.is_finite():
                skipped += 1
                continue
            want = ExtendedFloat(exact_value(op, to_exact_fraction(x), to_exact_fraction(y)))
            errs.append(relative_error(got, want))
        if skipped:
            warnings.warn(f"{op}: skipped {skipped} samples with non-finite results", RuntimeWarning)
        arr = np.asarray(errs, dtype=float)
        rows.append({
            "op": op,
            "samples": int(arr.size),
            "skipped": int(skipped),
            "max_rel_err": float(arr.max()) if arr.size else float("nan"),
            "mean_rel_err": float(arr.mean()) if arr.size else float("nan"),
        })
    return rows


def _write_csv(path: str, rows: list[dict[str, float | int | str]]) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=["op", "samples", "skipped", "max_rel_err", "mean_rel_err"])
        w.writeheader()
        for row in rows:
            w.writerow(row)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Relative error of ddfloat operations against exact rationals")
    ap.add_argument("--config", default="", help="YAML config with a report: section")
    ap.add_argument("--samples", type=int, default=None)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--out", default="", help="Optional CSV output path")
    args = ap.parse_args(argv)

    cfg = load_config(args.config) if args.config else default_config()
    rep = cfg.report
    if args.samples is not None or args.seed is not None:
        rep = ReportConfig(
            samples=int(args.samples if args.samples is not None else rep.samples),
            seed=int(args.seed if args.seed is not None else rep.seed),
            ops=rep.ops,
            exponent_range=rep.exponent_range,
        )
    if rep.samples < 1:
        raise ValueError("--samples must be >= 1")

    rows = run_report(rep)
    print(f"{'op':<12} {'samples':>8} {'skipped':>8} {'max_rel_err':>14} {'mean_rel_err':>14}")
    for row in rows:
        print(
            f"{row['op']:<12} {row['samples']:>8} {row['skipped']:>8} "
            f"{row['max_rel_err']:>14.3e} {row['mean_rel_err']:>14.3e}"
        )
    if args.out:
        _write_csv(args.out, rows)
        print(f"[accuracy] wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
