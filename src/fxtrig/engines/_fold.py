from __future__ import annotations

from typing import Sequence, Tuple

from ..core.types import ANGLE_BITS, WORK_BITS, FixedFormat
from .coeffs import Term

# Angle layout (scale 2^20, turns):
#   bit 19      -> second half of the turn
#   bit 18      -> second quarter within the half
#   bits 0..17  -> magnitude within the quarter
MAG_BITS = ANGLE_BITS - 2
MAG_FORMAT = FixedFormat(width=MAG_BITS, scale=ANGLE_BITS, signed=False)
MAG_MASK = MAG_FORMAT.mask

# Scale of the folded magnitude x1. It is < 2^18 but still counts 2^-20 turns.
X1_SCALE = ANGLE_BITS


def fold(angle: int) -> Tuple[int, int, int]:
    """
    Split an angle into (sign, mirror, x1).

    Only the low 20 bits are read, so larger values alias into [0, 1) turns.
    When the mirror bit is set the magnitude is reflected about the quarter
    turn, keeping x1 in [0, 1/4] turn where the series is accurate.
    """
    sign = (angle >> (ANGLE_BITS - 1)) & 1
    mirror = (angle >> (ANGLE_BITS - 2)) & 1
    x1 = angle & MAG_MASK
    if mirror:
        x1 = ((1 << MAG_BITS) - x1) & MAG_MASK
    return sign, mirror, x1


def product_scale(a_scale: int, b_scale: int) -> int:
    """Scale of (a * b) >> WORK_BITS."""
    return a_scale + b_scale - WORK_BITS


def plan(terms: Sequence[Term], power_scales: Sequence[int]) -> Tuple[Tuple[int, int], ...]:
    """(coefficient, right shift) pairs bringing each k * x^n to scale 2^WORK_BITS."""
    if len(terms) != len(power_scales):
        raise ValueError("need one power scale per term")
    out = []
    for t, s in zip(terms, power_scales):
        shift = t.shift(s)
        if shift < 0:
            raise ValueError(f"term x^{t.power} is below scale 2^{WORK_BITS} (shift {shift})")
        out.append((t.value, shift))
    return tuple(out)
