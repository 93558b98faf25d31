import math

import numpy as np
import pytest

from lmmcurve.core.curve import Curve
from lmmcurve.rates.par_coupon import annuity, discount_factors, par_coupon


def test_single_bucket_closed_form():
    c = Curve.from_arrays([1.0], [0.05], [0.0])
    expected = (1 - math.exp(-0.05)) / math.exp(-0.05)
    assert par_coupon(c) == pytest.approx(expected, rel=1e-14)


def test_flat_curve_uneven_buckets():
    r = 0.03
    t = [0.5, 1.0, 2.0, 5.0]
    c = Curve.from_arrays(t, [r] * 4, [0.2] * 4)
    D = np.exp(-r * np.array(t))
    dt = np.diff(t, prepend=0.0)
    expected = (1 - D[-1]) / np.dot(D, dt)
    assert par_coupon(c) == pytest.approx(expected, rel=1e-13)


def test_sigma_is_ignored():
    a = Curve.from_arrays([1.0, 2.0], [0.02, 0.03], [0.0, 0.0])
    b = Curve.from_arrays([1.0, 2.0], [0.02, 0.03], [0.5, 0.9])
    assert par_coupon(a) == par_coupon(b)


def test_discount_factors_and_annuity():
    c = Curve.from_arrays([1.0, 3.0], [0.02, 0.04], [0.1, 0.1])
    D = discount_factors(c)
    np.testing.assert_allclose(D, [math.exp(-0.02), math.exp(-0.02 - 0.08)])
    assert annuity(c) == pytest.approx(D[0] * 1.0 + D[1] * 2.0)
    assert par_coupon(c) == pytest.approx((1 - D[-1]) / annuity(c))


def test_par_coupon_on_window():
    c = Curve.from_arrays([1.0, 2.0], [0.10, 0.05], [0.0, 0.0]).window(1)
    # window t=[2.0]: single bucket of length 2 from the curve origin
    expected = (1 - math.exp(-0.10)) / (2 * math.exp(-0.10))
    assert par_coupon(c) == pytest.approx(expected)


def test_empty_curve_rejected():
    with pytest.raises(ValueError, match="no buckets"):
        par_coupon(Curve.empty())


def test_par_coupon_is_float_leg_over_annuity():
    c = Curve.from_arrays([0.5, 1.5, 4.0], [0.02, 0.025, 0.03], [0.0, 0.0, 0.0])
    D = discount_factors(c)
    assert D.shape == (3,)
    assert par_coupon(c) == pytest.approx((1 - D[-1]) / annuity(c), rel=1e-15)


def test_negative_boundary_rejected_before_pricing():
    with pytest.raises(ValueError):
        par_coupon(Curve.from_arrays([-1.0, 1.0], [0.05, 0.05], [0.1, 0.1]))
