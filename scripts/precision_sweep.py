#!/usr/bin/env python3
"""
Sweep real inputs through a FixedPointMapper and record the precision loss.

Usage:
  python scripts/precision_sweep.py --width 16 --divisor 256 \
      --start -10 --stop 10 --steps 201 --out outputs/precision.csv

Width/divisor default to MAPPER_WIDTH / MAPPER_DIVISOR (see mapper/settings.py).
Each row: input, fixed, unsigned, signed, abs_err, rel_err, bound, within_bound, wrapped.
Negative inputs are compared against the signed decoding.
"""
from __future__ import annotations
import argparse
import csv
import sys
from pathlib import Path
from typing import Dict, Iterable, List

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mapper.number_mapper import FixedPointMapper
from mapper.settings import MapperSettings

FIELDS = ["input", "fixed", "unsigned", "signed", "abs_err", "rel_err", "bound", "within_bound", "wrapped"]


def linspace(start: float, stop: float, steps: int) -> List[float]:
    if steps < 1:
        raise ValueError("steps must be >= 1")
    if steps == 1:
        return [start]
    step = (stop - start) / (steps - 1)
    return [start + i * step for i in range(steps)]


def sweep_row(mapper: FixedPointMapper, x: float) -> Dict[str, object]:
    fixed = mapper.encode(x)
    unsigned = mapper.decode_unsigned(fixed)
    signed = mapper.decode_signed(fixed)
    decoded = signed if x < 0 else unsigned
    abs_err = abs(decoded - x)
    rel_err = abs_err / abs(x) if x != 0 else 0.0
    bound = mapper.precision_bound(x)
    if bound is None:
        within = ""
    elif abs(x) >= 1.0:
        within = rel_err < bound
    else:
        within = abs_err < bound
    return {
        "input": x,
        "fixed": fixed,
        "unsigned": unsigned,
        "signed": signed,
        "abs_err": abs_err,
        "rel_err": rel_err,
        "bound": "" if bound is None else bound,
        "within_bound": within,
        "wrapped": abs(x * mapper.divisor) > mapper.group_size,
    }


def sweep(mapper: FixedPointMapper, values: Iterable[float]) -> List[Dict[str, object]]:
    return [sweep_row(mapper, x) for x in values]


def write_rows(path: Path, rows: List[Dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        w.writerows(rows)


def main(argv=None):
    defaults = MapperSettings.from_env()
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=defaults.width)
    ap.add_argument("--divisor", type=int, default=defaults.divisor)
    ap.add_argument("--start", type=float, default=-4.0)
    ap.add_argument("--stop", type=float, default=4.0)
    ap.add_argument("--steps", type=int, default=81)
    ap.add_argument("--out", default="outputs/precision.csv")
    args = ap.parse_args(argv)

    mapper = FixedPointMapper(args.width, args.divisor, overflow=defaults.overflow)
    rows = sweep(mapper, linspace(args.start, args.stop, args.steps))
    out = Path(args.out)
    write_rows(out, rows)

    wrapped = sum(1 for r in rows if r["wrapped"])
    violations = sum(1 for r in rows if r["within_bound"] is False)
    worst = max((r["abs_err"] for r in rows if not r["wrapped"]), default=0.0)
    print(f"{mapper}: {len(rows)} inputs, {wrapped} wrapped, {violations} outside bound, "
          f"max abs err {worst:.3g}. Saved {out}")
    return rows


if __name__ == "__main__":
    main()
