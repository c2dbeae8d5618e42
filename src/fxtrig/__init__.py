"""fxtrig public API.

Fixed-point sine and cosine over one turn: 20-bit unsigned angle at scale 2^20
in, 18-bit two's complement at scale 2^17 out.
"""

from .api import (
    sine,
    cosine,
    float_to_fixed,
    fixed_to_float,
    clamp_overflow,
    sin_turn,
    cos_turn,
)
from .core.errors import FxtrigError, ClampInvariantError
from .core.types import FixedFormat, ANGLE_FORMAT, OUTPUT_FORMAT

__all__ = [
    "sine",
    "cosine",
    "float_to_fixed",
    "fixed_to_float",
    "clamp_overflow",
    "sin_turn",
    "cos_turn",
    "FxtrigError",
    "ClampInvariantError",
    "FixedFormat",
    "ANGLE_FORMAT",
    "OUTPUT_FORMAT",
]
