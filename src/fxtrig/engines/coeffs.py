from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..core.types import WORK_BITS


@dataclass(frozen=True)
class Term:
    """
    One Taylor term k * x^power of sin(2*pi*x) or cos(2*pi*x).

    value is the coefficient (2*pi)^power / power! upscaled by 2^scale and
    rounded, so that it fits in an 18-bit unsigned multiplier operand.
    Terms marked adjusted were moved off the rounded Taylor value by hand
    to trade truncation error of the series against rounding error.
    """
    power: int
    value: int
    scale: int
    adjusted: bool = False

    @property
    def exact(self) -> float:
        return (2.0 * math.pi) ** self.power / math.factorial(self.power)

    @property
    def nominal(self) -> int:
        return round(self.exact * (1 << self.scale))

    def shift(self, power_scale: int, target_scale: int = WORK_BITS) -> int:
        """Right shift taking k * x^power from 2^(scale + power_scale) to 2^target_scale."""
        return self.scale + power_scale - target_scale


# sin(2*pi*x) = k1*x - k3*x^3 + k5*x^5 - k7*x^7
SINE_TERMS: Tuple[Term, ...] = (
    Term(power=1, value=205887, scale=15),
    Term(power=3, value=169336, scale=12),
    Term(power=5, value=167014, scale=11, adjusted=True),
    Term(power=7, value=150000, scale=11, adjusted=True),
)

# cos(2*pi*x) = 1 - k2*x^2 + k4*x^4 - k6*x^6 + k8*x^8
COSINE_TERMS: Tuple[Term, ...] = (
    Term(power=2, value=161704, scale=13),
    Term(power=4, value=132996, scale=11),
    Term(power=6, value=175016, scale=11),
    Term(power=8, value=241700, scale=12, adjusted=True),
)


def with_value(terms: Tuple[Term, ...], power: int, value: int) -> Tuple[Term, ...]:
    """Copy of `terms` with the coefficient for `power` replaced."""
    out = []
    for t in terms:
        if t.power == power:
            t = Term(power=t.power, value=value, scale=t.scale, adjusted=True)
        out.append(t)
    return tuple(out)
