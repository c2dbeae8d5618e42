# tests/test_coeffs.py

import math

import pytest

from fxtrig.design import taylor_coeffs as tc
from fxtrig.engines.coeffs import COSINE_TERMS, SINE_TERMS, with_value
from fxtrig.engines.cosine import cosine_poly
from fxtrig.engines.sine import sine_poly

def test_shipped_scales_are_widest_18_bit():
    for t in SINE_TERMS + COSINE_TERMS:
        assert tc.widest_scale(t.exact, 18) == t.scale
        assert t.value < 1 << 18

def test_unadjusted_terms_are_rounded_taylor_values():
    for t in SINE_TERMS + COSINE_TERMS:
        if not t.adjusted:
            assert t.value == t.nominal

def test_adjusted_terms_stay_close_to_taylor():
    for t in SINE_TERMS + COSINE_TERMS:
        assert abs(t.value - t.nominal) / t.nominal < 0.05

def test_exact_taylor_coefficients():
    assert SINE_TERMS[0].exact == pytest.approx(2 * math.pi)
    assert COSINE_TERMS[0].exact == pytest.approx(2 * math.pi ** 2)
    assert SINE_TERMS[1].exact == pytest.approx((2 * math.pi) ** 3 / 6)

def test_widest_scale():
    assert tc.widest_scale(2 * math.pi, 18) == 15
    assert tc.widest_scale(1.0, 8) == 7
    with pytest.raises(ValueError):
        tc.widest_scale(0.0, 18)

def test_widest_scale_rejects_value_wider_than_multiplier():
    with pytest.raises(ValueError):
        tc.widest_scale(2 * math.pi, 2)
    with pytest.raises(ValueError):
        tc.widest_scale(256.0, 8)
    # largest value that still fits at scale 0
    assert tc.widest_scale(3.4, 2) == 0
    assert round(3.4) < 1 << 2

def test_widest_scale_result_fits():
    for bits in (4, 8, 12, 18, 24):
        for t in SINE_TERMS + COSINE_TERMS:
            if round(t.exact) >= 1 << bits:
                continue
            s = tc.widest_scale(t.exact, bits)
            assert round(t.exact * (1 << s)) < 1 << bits
            assert round(t.exact * (1 << (s + 1))) >= 1 << bits

def test_with_value_replaces_only_that_power():
    new = with_value(SINE_TERMS, 7, 123)
    assert new[-1].value == 123 and new[-1].adjusted
    assert new[:-1] == SINE_TERMS[:-1]

def test_quarter_max_error_of_shipped_terms():
    assert tc.quarter_max_error(sine_poly, math.sin, SINE_TERMS, step=64) < 5e-4
    assert tc.quarter_max_error(cosine_poly, math.cos, COSINE_TERMS, step=64) < 5e-4

def test_detuned_term_is_worse():
    shipped = tc.quarter_max_error(sine_poly, math.sin, SINE_TERMS, step=64)
    detuned = tc.quarter_max_error(sine_poly, math.sin, with_value(SINE_TERMS, 7, 100000), step=64)
    assert detuned > shipped
