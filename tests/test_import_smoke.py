from __future__ import annotations

import importlib
import py_compile
from pathlib import Path


def test_import_smoke():
    for name in ("ddfloat", "ddfloat.kernels", "ddfloat.extended", "ddfloat.decimal_conv", "ddfloat.config"):
        importlib.import_module(name)


def test_version_is_single_sourced():
    import ddfloat

    root = Path(__file__).resolve().parents[1]
    assert ddfloat.__version__ == (root / "VERSION").read_text(encoding="utf-8").strip()


def test_py_compile_smoke(tmp_path: Path):
    root = Path(__file__).resolve().parents[1]
    targets = [
        root / "ddfloat" / "extended.py",
        root / "ddfloat" / "kernels.py",
        root / "scripts" / "accuracy_report.py",
    ]
    for src in targets:
        py_compile.compile(str(src), cfile=str(tmp_path / f"{src.name}c"), doraise=True)
