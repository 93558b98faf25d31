"""
Two-factor LIBOR market model with a rotated Brownian motion.

Parameters are the curve (t[j], f[j], sigma[j]) and a rotation angle alpha.
The driving factor seen by tenor t is

    B_t = B0_t cos(alpha t) + B1_t sin(alpha t),

with B0, B1 independent Brownian motions, so larger alpha decorrelates the
curve faster. Futures quotes are martingales:

    Phi_j(u) = phi[j] * exp(sigma[j] B_u - sigma[j]^2 u / 2),   E[Phi_j(u)] = phi[j].

We provide:
- rotated_brownian(t, b0, b1, alpha)
- advance_futures(u, curve, alpha, rng) : one random step of a futures curve
- advance(u, curve, alpha, rng)         : same for a forward-quoted curve
- LMM2F : alpha + random source bundled, as built from the settings file
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass

import numpy as np

from ..core.curve import Curve
from ..core.utils import check_time, stats1d
from .quotes import to_forwards, to_futures

logger = logging.getLogger(__name__)


def rotated_brownian(t, b0: float, b1: float, alpha: float):
    """B0 cos(alpha t) + B1 sin(alpha t), elementwise in t."""
    return b0 * np.cos(alpha * t) + b1 * np.sin(alpha * t)


def advance_futures(u: float, curve: Curve, alpha: float, rng: np.random.Generator) -> Curve:
    """
    Futures curve as seen from time u along one simulated path.

    Buckets with t[j] <= u have expired and are dropped (a boundary equal to
    u counts as expired). Survivors are rebased to t[j] - u and multiplied by
    exp(sigma[j] B_u - sigma[j]^2 u / 2), B_u taken at the rebased t[j].

    The buffers are updated in place; the returned curve is a window over
    the same storage. Two normals are drawn from `rng` on every call.
    """
    u = check_time("advance_futures", u)
    b0, b1 = rng.standard_normal(2)

    # t is strictly increasing, so the expired buckets are a prefix
    expired = int(np.searchsorted(curve.times, u, side="right"))
    out = curve.window(expired)

    t = out.times
    t -= u
    sigma = out.vols
    bu = rotated_brownian(t, b0, b1, alpha)
    out.values[...] *= np.exp(sigma * bu - sigma * sigma * u / 2)

    logger.debug(
        "advance_futures: u=%s dropped=%s remaining=%s B0=%.6g B1=%.6g",
        u, expired, out.n, b0, b1,
    )
    return out


def advance(u: float, curve: Curve, alpha: float, rng: np.random.Generator) -> Curve:
    """
    Random forward curve at time u.

    Forwards -> futures, one step of advance_futures, back to forwards.
    An empty curve is returned as is, without touching `rng`.
    """
    u = check_time("advance", u)
    if curve.is_empty():
        return curve
    to_futures(curve)
    out = advance_futures(u, curve, alpha, rng)
    to_forwards(out)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("advance: u=%s forwards %s", u, stats1d(out.values))
    return out


@dataclass
class LMM2F:
    alpha: float
    rng: np.random.Generator

    def __post_init__(self) -> None:
        self.alpha = float(self.alpha)
        if not math.isfinite(self.alpha):
            raise ValueError("LMM2F: alpha must be finite")
        if not isinstance(self.rng, np.random.Generator):
            raise ValueError("LMM2F: rng must be a numpy Generator")

    def correlation(self, t1: float, t2: float) -> float:
        """Instantaneous correlation of the factors driving tenors t1 and t2."""
        return math.cos(self.alpha * (t1 - t2))

    def advance_futures(self, u: float, curve: Curve) -> Curve:
        return advance_futures(u, curve, self.alpha, self.rng)

    def advance(self, u: float, curve: Curve) -> Curve:
        return advance(u, curve, self.alpha, self.rng)
