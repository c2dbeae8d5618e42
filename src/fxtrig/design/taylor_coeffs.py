# design/taylor_coeffs.py

from __future__ import annotations

import argparse
import math
import sys
from typing import Callable, List, Optional, Sequence, Tuple

from fxtrig.core.types import ANGLE_BITS, WORK_BITS
from fxtrig.engines._fold import MAG_BITS
from fxtrig.engines.coeffs import COSINE_TERMS, SINE_TERMS, Term, with_value
from fxtrig.engines.cosine import COSINE_POWER_SCALES, cosine_poly
from fxtrig.engines.sine import SINE_POWER_SCALES, sine_poly


def _need_scipy():
    try:
        import scipy.optimize as opt
        return opt
    except ImportError as e:
        raise RuntimeError('Need scipy. Install: pip install "fxtrig[diagnostics]"') from e


def widest_scale(value: float, mult_bits: int) -> int:
    """Largest s such that round(value * 2^s) still fits in mult_bits unsigned bits."""
    if value <= 0:
        raise ValueError("value must be positive")
    limit = 1 << mult_bits
    if round(value) >= limit:
        raise ValueError(f"{value:g} does not fit in {mult_bits} bits at any non-negative scale")
    s = 0
    while round(value * (1 << (s + 1))) < limit:
        s += 1
    return s


def quarter_max_error(
    poly: Callable[[int, Sequence[Term]], int],
    ref: Callable[[float], float],
    terms: Sequence[Term],
    step: int = 16,
) -> float:
    """
    Max |poly - ref| over folded magnitudes in [0, 2^18) (a quarter turn).

    The polynomial result is read at scale 2^18, before the final halving.
    """
    worst = 0.0
    for x1 in range(0, 1 << MAG_BITS, step):
        approx = poly(x1, terms) / (1 << WORK_BITS)
        exact = ref(2.0 * math.pi * x1 / (1 << ANGLE_BITS))
        worst = max(worst, abs(approx - exact))
    return worst


def refine_last(
    poly: Callable[[int, Sequence[Term]], int],
    ref: Callable[[float], float],
    terms: Tuple[Term, ...],
    step: int,
) -> Tuple[Tuple[Term, ...], float]:
    """Tune the highest-order coefficient to minimize the quarter-turn max error."""
    opt = _need_scipy()
    last = terms[-1]

    def cost(v: float) -> float:
        return quarter_max_error(poly, ref, with_value(terms, last.power, int(round(v))), step)

    lo, hi = 0.9 * last.nominal, 1.1 * last.nominal
    res = opt.minimize_scalar(cost, bounds=(lo, hi), method="bounded", options={"xatol": 0.5})
    best = with_value(terms, last.power, int(round(res.x)))
    return best, quarter_max_error(poly, ref, best, step)


def describe(name: str, terms: Sequence[Term], power_scales: Sequence[int], mult_bits: int) -> List[str]:
    lines = []
    lines.append(f"\n--- {name} ---")
    lines.append(
        f"{'Power':<6} | {'Exact (2pi)^n/n!':<20} | {'Scale':<6} | {'Nominal':<8} | {'Shipped':<8} | {'Shift':<5} | Note"
    )
    lines.append("-" * 90)
    for t, ps in zip(terms, power_scales):
        exact = t.exact
        s = widest_scale(exact, mult_bits)
        nominal = round(exact * (1 << s))
        note = "adjusted" if t.adjusted else ""
        if s != t.scale:
            note = (note + f" shipped at 2^{t.scale}").strip()
        lines.append(
            f"x^{t.power:<4} | {exact:<20.12f} | 2^{s:<4} | {nominal:<8} | {t.value:<8} | {t.shift(ps):<5} | {note}"
        )
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Generate fixed-point Taylor coefficients for sin/cos(2*pi*x).")
    p.add_argument("--mult-bits", type=int, default=WORK_BITS, help=f"Multiplier operand width (default: {WORK_BITS}).")
    p.add_argument("--step", type=int, default=16, help="Magnitude stride for error evaluation (default: 16).")
    p.add_argument("--refine", action="store_true", help="Tune the highest-order coefficients (needs scipy).")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if args.mult_bits < 2:
        print("Error: Multiplier width must be at least 2 bits.", file=sys.stderr)
        return 1
    if args.step < 1:
        print("Error: Step must be at least 1.", file=sys.stderr)
        return 1

    lines = []
    try:
        sin_rows = describe("sin(2*pi*x)", SINE_TERMS, SINE_POWER_SCALES, args.mult_bits)
        cos_rows = describe("cos(2*pi*x)", COSINE_TERMS, COSINE_POWER_SCALES, args.mult_bits)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    lines.append(f"Fixed-point Taylor coefficients ({args.mult_bits}-bit operands, terms at scale 2^{WORK_BITS})")
    lines.append("=" * 90)
    lines += sin_rows
    lines += cos_rows

    sin_err = quarter_max_error(sine_poly, math.sin, SINE_TERMS, args.step)
    cos_err = quarter_max_error(cosine_poly, math.cos, COSINE_TERMS, args.step)
    lines.append("")
    lines.append(f"Quarter-turn max error (shipped): sine {sin_err:.3e}, cosine {cos_err:.3e}")

    if args.refine:
        sin_best, sin_best_err = refine_last(sine_poly, math.sin, SINE_TERMS, args.step)
        cos_best, cos_best_err = refine_last(cosine_poly, math.cos, COSINE_TERMS, args.step)
        lines.append(f"Refined sine   k{sin_best[-1].power} = {sin_best[-1].value:<8} max error {sin_best_err:.3e}")
        lines.append(f"Refined cosine k{cos_best[-1].power} = {cos_best[-1].value:<8} max error {cos_best_err:.3e}")

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
