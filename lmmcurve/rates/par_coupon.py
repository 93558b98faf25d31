"""
Par coupon implied by a forward curve.

With D_j = exp(-sum_{k<=j} f[k] dt_k) and dt_j = t[j] - t[j-1] (t[-1] = 0),
the par coupon c solves  c * sum_j D_j dt_j = 1 - D_n.
Volatilities are not used.
"""

from __future__ import annotations
import math

import numpy as np

from ..core.curve import Curve


def discount_factors(curve: Curve) -> np.ndarray:
    """D_j after each bucket, shape (n,)."""
    t = curve.times
    f = curve.values
    D = np.empty(curve.n, dtype=float)
    Dn = 1.0
    t0 = 0.0
    for j in range(curve.n):
        dt = float(t[j]) - t0
        Dn *= math.exp(-float(f[j]) * dt)
        D[j] = Dn
        t0 = float(t[j])
    return D


def annuity(curve: Curve) -> float:
    """sum_j D_j dt_j."""
    D = discount_factors(curve)
    dt = np.diff(np.asarray(curve.times, dtype=float), prepend=0.0)
    return float(np.dot(D, dt))


def par_coupon(curve: Curve) -> float:
    """
    Fixed rate c such that the annuity paying c * dt_j at each t[j] is worth 1 - D_n.

    Raises ValueError on an empty curve or a non-positive annuity.
    """
    if curve.is_empty():
        raise ValueError("par_coupon: curve has no buckets")
    D = annuity(curve)
    if D <= 0.0:
        raise ValueError("par_coupon: annuity must be > 0")
    Dn = float(discount_factors(curve)[-1])
    return (1.0 - Dn) / D
