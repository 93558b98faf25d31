"""
Forward <-> futures quote conversion.

Under the model the futures quote and the forward over (t[j-1], t[j]]
differ by a convexity term:

    phi[j] = f[j] + sigma[j]^2 * t[j]^2 / 2

Both conversions update `curve.value` in place on the visible window and
return the same curve for chaining.
"""

from __future__ import annotations

import numpy as np

from ..core.curve import Curve


def convexity_adjustment(curve: Curve) -> np.ndarray:
    """sigma^2 t^2 / 2 for each visible bucket."""
    t = curve.times
    sigma = curve.vols
    return sigma * sigma * t * t / 2


def to_futures(curve: Curve) -> Curve:
    """Forwards -> futures quotes."""
    curve.values[...] += convexity_adjustment(curve)
    return curve


def to_forwards(curve: Curve) -> Curve:
    """Futures quotes -> forwards. Inverse of to_futures for the same (t, sigma)."""
    curve.values[...] -= convexity_adjustment(curve)
    return curve
