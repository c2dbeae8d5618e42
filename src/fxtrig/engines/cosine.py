from __future__ import annotations

from typing import Sequence, Tuple

from ..core.fixed import clamp_overflow
from ..core.types import OUTPUT_FORMAT, OUTPUT_SCALE, WORK_BITS
from ._fold import X1_SCALE, fold, plan, product_scale
from .coeffs import COSINE_TERMS, Term

# Scales of x^2, x^4, x^6, x^8 as computed in _even_sum
_X2 = product_scale(X1_SCALE, X1_SCALE)    # 2^22
_X4 = product_scale(_X2, _X2)              # 2^26
_X6 = product_scale(_X4, _X2)              # 2^30
_X8 = product_scale(_X4, _X4)              # 2^34
COSINE_POWER_SCALES: Tuple[int, ...] = (_X2, _X4, _X6, _X8)

_COSINE_PLAN = plan(COSINE_TERMS, COSINE_POWER_SCALES)

# 1.0 at 2^18
_ONE = 1 << WORK_BITS


def _even_sum(x1: int, p: Tuple[Tuple[int, int], ...]) -> int:
    (k2, s2), (k4, s4), (k6, s6), (k8, s8) = p

    x2 = (x1 * x1) >> WORK_BITS
    x4 = (x2 * x2) >> WORK_BITS
    x6 = (x4 * x2) >> WORK_BITS
    x8 = (x4 * x4) >> WORK_BITS

    return _ONE - ((k2 * x2) >> s2) + ((k4 * x4) >> s4) - ((k6 * x6) >> s6) + ((k8 * x8) >> s8)


def cosine_poly(x1: int, terms: Sequence[Term] = COSINE_TERMS) -> int:
    """1 - k2*x^2 + k4*x^4 - k6*x^6 + k8*x^8 at scale 2^18, for x1 at 2^20."""
    p = _COSINE_PLAN if terms is COSINE_TERMS else plan(terms, COSINE_POWER_SCALES)
    return _even_sum(x1, p)


def cosine(angle: int) -> int:
    """
    Fixed-point cos(2*pi*x).

    Input:  unsigned angle in turns, scale 2^20 (low 20 bits significant)
    Output: 18-bit two's complement, scale 2^17
    """
    sign, mirror, x1 = fold(angle)

    # Cosine flips sign across the quarter turns, not the half turn
    negative = sign ^ mirror

    total = _even_sum(x1, _COSINE_PLAN) >> (WORK_BITS - OUTPUT_SCALE)

    if mirror and x1 == 0:
        total = 0
    if negative:
        total = -total
    return clamp_overflow(total, OUTPUT_FORMAT.width)
