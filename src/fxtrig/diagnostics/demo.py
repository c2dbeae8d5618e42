#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import Iterator, List, Optional, Tuple

from fxtrig import ANGLE_FORMAT, OUTPUT_FORMAT, cosine, fixed_to_float, float_to_fixed, sine


def sample_pairs(samples: int) -> Iterator[Tuple[float, float]]:
    """Evenly spaced (sine, cosine) pairs over one turn, starting at 0."""
    for i in range(samples):
        angle = float_to_fixed(1.0 / samples * i, ANGLE_FORMAT.scale)
        yield (
            fixed_to_float(sine(angle), OUTPUT_FORMAT.scale),
            fixed_to_float(cosine(angle), OUTPUT_FORMAT.scale),
        )


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="fxtrig demo", description="Print sampled fixed-point sine and cosine waves.")
    p.add_argument("--samples", type=int, default=4096, help="Number of samples over one turn (default: 4096).")
    args = p.parse_args(argv)

    if args.samples < 1:
        print("Error: Number of samples must be at least 1.", file=sys.stderr)
        return 1

    print("sine       cosine  ")
    for s, c in sample_pairs(args.samples):
        print(f"{s:+0.6f}, {c:+0.6f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
