#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
import sys
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from functools import reduce
from itertools import repeat
from typing import List, Optional, Sequence, Tuple

from fxtrig import cosine, fixed_to_float, float_to_fixed, sine
from fxtrig.core.types import ANGLE_BITS, OUTPUT_SCALE


@dataclass(frozen=True)
class ErrorStats:
    """
    Partial reduction of absolute errors over some set of samples.

    m2 is the sum of squared deviations from `mean`; keeping it instead of a
    plain sum of squares lets two partials be merged without a second pass.
    """
    count: int
    mean: float
    m2: float
    max_error: float

    @property
    def stdev(self) -> float:
        """Population standard deviation."""
        if self.count == 0:
            return 0.0
        return math.sqrt(self.m2 / self.count)

    @classmethod
    def from_errors(cls, errs: Sequence[float]) -> "ErrorStats":
        n = len(errs)
        if n == 0:
            return EMPTY_STATS
        mean = math.fsum(errs) / n
        m2 = math.fsum((e - mean) ** 2 for e in errs)
        return cls(count=n, mean=mean, m2=m2, max_error=max(errs))


EMPTY_STATS = ErrorStats(count=0, mean=0.0, m2=0.0, max_error=0.0)


def merge_stats(a: ErrorStats, b: ErrorStats) -> ErrorStats:
    """
    Combine two partials (Chan, Golub & LeVeque).

    Commutative and associative up to float rounding, so ranges may be
    reduced in any order.
    """
    if a.count == 0:
        return b
    if b.count == 0:
        return a
    n = a.count + b.count
    delta = b.mean - a.mean
    mean = a.mean + delta * (b.count / n)
    m2 = a.m2 + b.m2 + delta * delta * (a.count * b.count / n)
    return ErrorStats(count=n, mean=mean, m2=m2, max_error=max(a.max_error, b.max_error))


@dataclass(frozen=True)
class ErrorReport:
    sine: ErrorStats
    cosine: ErrorStats


def merge_reports(a: ErrorReport, b: ErrorReport) -> ErrorReport:
    return ErrorReport(sine=merge_stats(a.sine, b.sine), cosine=merge_stats(a.cosine, b.cosine))


def _check_bits(bits: int) -> None:
    if not (2 <= bits <= ANGLE_BITS):
        raise ValueError(f"bits must be in [2, {ANGLE_BITS}]")


def sweep_range(start: int, stop: int, bits: int = ANGLE_BITS) -> ErrorReport:
    """
    Absolute error statistics for sample indices [start, stop) of a 2^bits grid.

    Sample i is the angle i / 2^bits turns; the reference is math.sin/math.cos.
    """
    _check_bits(bits)
    fdomain = float(1 << bits)
    sin_errs: List[float] = []
    cos_errs: List[float] = []
    for i in range(start, stop):
        float_angle = 2 * math.pi * 1.0 / fdomain * i
        fixed_angle = float_to_fixed(1.0 / fdomain * i, ANGLE_BITS)
        sin_errs.append(abs(math.sin(float_angle) - fixed_to_float(sine(fixed_angle), OUTPUT_SCALE)))
        cos_errs.append(abs(math.cos(float_angle) - fixed_to_float(cosine(fixed_angle), OUTPUT_SCALE)))
    return ErrorReport(sine=ErrorStats.from_errors(sin_errs), cosine=ErrorStats.from_errors(cos_errs))


def partition(domain: int, parts: int) -> List[Tuple[int, int]]:
    """Split [0, domain) into at most `parts` contiguous, disjoint, non-empty ranges."""
    if domain <= 0:
        return []
    parts = max(1, min(parts, domain))
    size, extra = divmod(domain, parts)
    out = []
    lo = 0
    for k in range(parts):
        hi = lo + size + (1 if k < extra else 0)
        out.append((lo, hi))
        lo = hi
    return out


def error_stats(bits: int = ANGLE_BITS, workers: int = 1) -> ErrorReport:
    """
    Error statistics over every sample of the 2^bits grid.

    With workers > 1 the grid is split into that many ranges and evaluated in
    separate processes; results then differ from the serial run only in the
    last bits of the float sums.
    """
    _check_bits(bits)
    ranges = partition(1 << bits, workers)
    if workers <= 1:
        parts = [sweep_range(lo, hi, bits) for lo, hi in ranges]
    else:
        with ProcessPoolExecutor(max_workers=workers) as ex:
            parts = list(ex.map(sweep_range, [r[0] for r in ranges], [r[1] for r in ranges], repeat(bits)))
    return reduce(merge_reports, parts, ErrorReport(sine=EMPTY_STATS, cosine=EMPTY_STATS))


def format_report(report: ErrorReport) -> str:
    lines = []
    for name, st in (("sine", report.sine), ("cosine", report.cosine)):
        lines.append(name)
        lines.append(f"\tavg:   {st.mean:0.12f}")
        lines.append(f"\tstdev: {st.stdev:0.12f}")
        lines.append(f"\tmax:   {st.max_error:0.12f}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="fxtrig stats",
        description="Estimation error of fixed-point sine/cosine across the whole input domain.",
    )
    p.add_argument("--bits", type=int, default=ANGLE_BITS, help=f"Sample a 2^bits grid (default: {ANGLE_BITS}, every input).")
    p.add_argument("--workers", type=int, default=1, help="Worker processes (default: 1, in-process).")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if not (2 <= args.bits <= ANGLE_BITS):
        print(f"Error: --bits must be between 2 and {ANGLE_BITS}.", file=sys.stderr)
        return 1
    if args.workers < 1:
        print("Error: --workers must be at least 1.", file=sys.stderr)
        return 1

    output_text = format_report(error_stats(bits=args.bits, workers=args.workers))
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
