#!/usr/bin/env python3
"""
Plot a precision sweep CSV (see scripts/precision_sweep.py): absolute error per
input against the promised absolute bound. Wrapped inputs are drawn separately.
Outputs: outputs/plots/precision.png
"""
from __future__ import annotations
import argparse
import csv
from pathlib import Path

import matplotlib.pyplot as plt


def load_sweep(path: Path):
    if not path.exists():
        raise FileNotFoundError(f"Sweep CSV not found: {path}. Run scripts/precision_sweep.py first.")
    xs, errs, bounds = [], [], []
    wrapped_xs, wrapped_errs = [], []
    with path.open("r", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            x = float(row["input"])
            err = float(row["abs_err"])
            if row["wrapped"] == "True":
                wrapped_xs.append(x)
                wrapped_errs.append(err)
                continue
            xs.append(x)
            errs.append(err)
            # relative bound -> absolute
            b = float(row["bound"])
            bounds.append(b * abs(x) if abs(x) >= 1.0 else b)
    return xs, errs, bounds, wrapped_xs, wrapped_errs


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", default="outputs/precision.csv")
    ap.add_argument("--out", default="outputs/plots/precision.png")
    args = ap.parse_args()

    xs, errs, bounds, wxs, werrs = load_sweep(Path(args.input))
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    plt.figure(figsize=(8, 5))
    plt.plot(xs, errs, ".", label="abs error")
    if bounds:
        plt.plot(xs, bounds, "-", label="bound")
    if wxs:
        plt.plot(wxs, werrs, "x", color="red", label="wrapped")
    plt.yscale("symlog", linthresh=1e-9)
    plt.xlabel("input")
    plt.ylabel("|decoded - input|")
    plt.title("Fixed-point precision loss")
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(out_path, dpi=150)
    print(f"Saved plot to {out_path}")


if __name__ == "__main__":
    main()
