from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class FixedFormat:
    """Scaled-integer convention: `width` significant bits, value = V / 2**scale."""
    width: int
    scale: int
    signed: bool = True

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    @property
    def min_value(self) -> int:
        return -(1 << (self.width - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.width - 1)) - 1 if self.signed else self.mask

    @property
    def one(self) -> int:
        return 1 << self.scale

ANGLE_BITS = 20
WORK_BITS = 18
OUTPUT_SCALE = 17

# Angle in turns, [0, 1)
ANGLE_FORMAT = FixedFormat(width=ANGLE_BITS, scale=ANGLE_BITS, signed=False)
# Two's complement, [-1, 1)
OUTPUT_FORMAT = FixedFormat(width=WORK_BITS, scale=OUTPUT_SCALE, signed=True)
