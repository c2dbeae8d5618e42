from __future__ import annotations

from .core.fixed import clamp_overflow, fixed_to_float, float_to_fixed
from .core.types import ANGLE_FORMAT, OUTPUT_FORMAT
from .engines.cosine import cosine
from .engines.sine import sine


def sin_turn(x: float) -> float:
    """sin(2*pi*x) through the fixed-point path; x in turns."""
    return fixed_to_float(sine(float_to_fixed(x, ANGLE_FORMAT.scale)), OUTPUT_FORMAT.scale)


def cos_turn(x: float) -> float:
    """cos(2*pi*x) through the fixed-point path; x in turns."""
    return fixed_to_float(cosine(float_to_fixed(x, ANGLE_FORMAT.scale)), OUTPUT_FORMAT.scale)


__all__ = [
    "sine",
    "cosine",
    "float_to_fixed",
    "fixed_to_float",
    "clamp_overflow",
    "sin_turn",
    "cos_turn",
]
