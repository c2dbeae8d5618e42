from __future__ import annotations

from .errors import ClampInvariantError
from .types import FixedFormat


# ============================================================
# Fixed <-> float
# ============================================================

def fixed_to_float(value: int, scale: int) -> float:
    """Scaled integer -> real value: value / 2^scale."""
    return value / (1 << scale)


def float_to_fixed(value: float, scale: int) -> int:
    """
    Real value -> scaled integer.

    Adds one half and truncates toward zero:
      float_to_fixed(x, s) = trunc(x * 2^s + 0.5)
    This rounds half up for x >= 0. For x < 0 it rounds toward +inf
    (e.g. -2.7 -> -2, -2.0 -> -1), which callers of the integer routines rely on.
    """
    return int(value * (1 << scale) + 0.5)


# ============================================================
# Saturation
# ============================================================

def clamp_overflow(value: int, width: int) -> int:
    """
    Saturate a two's complement value that overflowed `width` bits by one bit.

    Bits `width` and `width - 1` agree for an in-range value. When they differ,
    bit `width` is taken as the true sign and the value is pinned to the
    corresponding end of the range.
    """
    hi0 = (value >> width) & 1
    hi1 = (value >> (width - 1)) & 1
    if hi0 != hi1:
        fmt = FixedFormat(width=width, scale=0)
        value = fmt.min_value if hi0 else fmt.max_value

    high = value >> (width - 1)
    if high not in (0, -1):
        raise ClampInvariantError(f"value {value} does not fit in {width} signed bits after clamping")
    return value
