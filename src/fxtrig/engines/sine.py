from __future__ import annotations

from typing import Sequence, Tuple

from ..core.fixed import clamp_overflow
from ..core.types import OUTPUT_FORMAT, OUTPUT_SCALE, WORK_BITS
from ._fold import X1_SCALE, fold, plan, product_scale
from .coeffs import SINE_TERMS, Term

# Scales of x^1, x^3, x^5, x^7 as computed in _odd_sum
_X2 = product_scale(X1_SCALE, X1_SCALE)    # 2^22
_X3 = product_scale(_X2, X1_SCALE)         # 2^24
_X5 = product_scale(_X2, _X3)              # 2^28
_X7 = product_scale(_X2, _X5)              # 2^32
SINE_POWER_SCALES: Tuple[int, ...] = (X1_SCALE, _X3, _X5, _X7)

_SINE_PLAN = plan(SINE_TERMS, SINE_POWER_SCALES)


def _odd_sum(x1: int, p: Tuple[Tuple[int, int], ...]) -> int:
    (k1, s1), (k3, s3), (k5, s5), (k7, s7) = p

    # Powers; each one depends on the previous
    x2 = (x1 * x1) >> WORK_BITS
    x3 = (x2 * x1) >> WORK_BITS
    x5 = (x2 * x3) >> WORK_BITS
    x7 = (x2 * x5) >> WORK_BITS

    # All terms at 2^18
    return ((k1 * x1) >> s1) - ((k3 * x3) >> s3) + ((k5 * x5) >> s5) - ((k7 * x7) >> s7)


def sine_poly(x1: int, terms: Sequence[Term] = SINE_TERMS) -> int:
    """
    Evaluate k1*x - k3*x^3 + k5*x^5 - k7*x^7 for a folded magnitude.

    x1 is at scale 2^20 and below 2^18 (at most a quarter turn). The result is
    at scale 2^18 and is not folded, overridden or clamped.
    """
    p = _SINE_PLAN if terms is SINE_TERMS else plan(terms, SINE_POWER_SCALES)
    return _odd_sum(x1, p)


def sine(angle: int) -> int:
    """
    Fixed-point sin(2*pi*x).

    Input:  unsigned angle in turns, scale 2^20 (low 20 bits significant)
    Output: 18-bit two's complement, scale 2^17
    """
    sign, mirror, x1 = fold(angle)

    total = _odd_sum(x1, _SINE_PLAN) >> (WORK_BITS - OUTPUT_SCALE)

    # Quarter turn: the series is least accurate here, so pin the peak
    if mirror and x1 == 0:
        total = OUTPUT_FORMAT.one
    if sign:
        total = -total
    return clamp_overflow(total, OUTPUT_FORMAT.width)
