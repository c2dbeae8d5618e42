#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from fxtrig import cosine, fixed_to_float, sine
from fxtrig.core.types import ANGLE_BITS, OUTPUT_SCALE


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "fxtrig[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "fxtrig[diagnostics]"') from e


def build_series(np, step: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """(turns, sine error, cosine error) on every `step`-th 20-bit angle; errors are signed."""
    idx = np.arange(0, 1 << ANGLE_BITS, step, dtype=np.int64)
    turns = idx / float(1 << ANGLE_BITS)
    s = np.fromiter((fixed_to_float(sine(int(a)), OUTPUT_SCALE) for a in idx), dtype=float, count=len(idx))
    c = np.fromiter((fixed_to_float(cosine(int(a)), OUTPUT_SCALE) for a in idx), dtype=float, count=len(idx))
    return turns, s - np.sin(2 * np.pi * turns), c - np.cos(2 * np.pi * turns)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot the signed error of fixed-point sine/cosine over one turn.")
    p.add_argument("--step", type=int, default=64, help="Plot every step-th 20-bit angle (default: 64).")
    p.add_argument("--outbase", default="fxtrig_error", help="Output base name (writes .png and .pdf)")
    args = p.parse_args(argv)

    if args.step < 1:
        raise SystemExit("--step must be >= 1")

    np = _need_numpy()
    plt = _need_matplotlib()

    turns, sin_err, cos_err = build_series(np, args.step)

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.plot(turns, sin_err, color="tab:blue", linewidth=0.8, label="sine")
    ax.plot(turns, cos_err, color="tab:red", linewidth=0.8, alpha=0.8, label="cosine")
    for q in (0.25, 0.5, 0.75):
        ax.axvline(q, color="0.6", linewidth=0.6, linestyle=":")

    ax.set_xlim(0.0, 1.0)
    ax.set_xlabel("Angle (turns)")
    ax.set_ylabel("Approximation - reference")
    ax.set_title("Fixed-point sine/cosine error (output scale 2^17)")
    ax.legend(loc="upper right", frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    fig.savefig(outbase + ".pdf")
    print(f"Saved: {outbase}.png, {outbase}.pdf")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
