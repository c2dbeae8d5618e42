# tests/test_fixed.py

import pytest

from fxtrig import ANGLE_FORMAT, OUTPUT_FORMAT, ClampInvariantError, FxtrigError
from fxtrig.core.fixed import clamp_overflow, fixed_to_float, float_to_fixed

def test_float_to_fixed_known_values():
    assert float_to_fixed(0.0, 20) == 0
    assert float_to_fixed(0.25, 20) == 1 << 18
    assert float_to_fixed(1.0, 17) == 131072
    assert float_to_fixed(0.5, 0) == 1
    assert float_to_fixed(2.5, 0) == 3
    assert float_to_fixed(2.4, 0) == 2

def test_float_to_fixed_negative_rounds_toward_positive():
    """
    Adding one half then truncating toward zero rounds negative values up,
    not away from zero.
    """
    assert float_to_fixed(-2.5, 0) == -2
    assert float_to_fixed(-2.7, 0) == -2
    assert float_to_fixed(-2.2, 0) == -1
    assert float_to_fixed(-0.25, 2) == 0
    assert float_to_fixed(-2.0, 0) == -1

def test_fixed_to_float_known_values():
    assert fixed_to_float(131072, 17) == 1.0
    assert fixed_to_float(-65536, 17) == -0.5
    assert fixed_to_float(1, 20) == 2.0 ** -20
    assert fixed_to_float(0, 17) == 0.0

def test_round_trip_error_bound():
    for s in (0, 8, 17, 20, 30):
        for k in range(-500, 501):
            v = k * 0.0123456789
            back = fixed_to_float(float_to_fixed(v, s), s)
            if v >= 0:
                assert abs(back - v) <= 2.0 ** -(s + 1)
            else:
                # biased upward by up to one extra unit
                assert 0.0 <= back - v <= 1.5 * 2.0 ** -s

def test_clamp_in_range_unchanged():
    for v in (0, 1, -1, 5, -5, 131071, -131072, 65536, -65537):
        assert clamp_overflow(v, 18) == v

def test_clamp_positive_overflow_saturates():
    assert clamp_overflow(131072, 18) == 131071
    assert clamp_overflow(131072 + 1000, 18) == 131071
    assert clamp_overflow((1 << 18) - 1, 18) == 131071

def test_clamp_negative_overflow_saturates():
    assert clamp_overflow(-131073, 18) == -131072
    assert clamp_overflow(-262144 + 1, 18) == -131072

def test_clamp_other_widths():
    assert clamp_overflow(8, 4) == 7
    assert clamp_overflow(-9, 4) == -8
    assert clamp_overflow(7, 4) == 7

def test_clamp_invariant_violation_raises():
    # Overflowed by two bits: bits 18 and 17 agree but bit 19 is set
    with pytest.raises(ClampInvariantError):
        clamp_overflow(1 << 19, 18)
    with pytest.raises(AssertionError):
        clamp_overflow(-(1 << 20), 18)
    with pytest.raises(FxtrigError):
        clamp_overflow(3 << 19, 18)

def test_formats():
    assert ANGLE_FORMAT.width == 20 and ANGLE_FORMAT.scale == 20 and not ANGLE_FORMAT.signed
    assert ANGLE_FORMAT.mask == 0xFFFFF
    assert ANGLE_FORMAT.min_value == 0
    assert ANGLE_FORMAT.max_value == 0xFFFFF
    assert OUTPUT_FORMAT.min_value == -131072
    assert OUTPUT_FORMAT.max_value == 131071
    assert OUTPUT_FORMAT.one == 131072
