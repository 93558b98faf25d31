"""
Utilities: sanity checks, descriptive stats.

Intended to be lightweight and dependency-free (NumPy only).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np


# ===== Sanity checks / assertions ============================================

def assert_finite(name: str, arr: np.ndarray) -> None:
    """Raise if any NaN/Inf in arr."""
    arr = np.asarray(arr)
    if not np.isfinite(arr).all():
        raise ValueError(f"{name}: contains NaN/Inf")


def check_time(name: str, u: float) -> float:
    """Valuation times must be finite and >= 0."""
    u = float(u)
    if not math.isfinite(u):
        raise ValueError(f"{name}: time must be finite, got {u}")
    if u < 0:
        raise ValueError(f"{name}: time must be >= 0, got {u}")
    return u


def is_strictly_increasing(x: Iterable[float]) -> bool:
    """True if every element is > the previous one (no ties)."""
    prev = None
    for v in x:
        if prev is not None and v <= prev:
            return False
        prev = v
    return True


# ===== Small helpers ==========================================================

@dataclass(frozen=True)
class Stats1D:
    mean: float
    std: float
    min: float
    max: float

def stats1d(a: np.ndarray) -> Stats1D:
    """Quick descriptive stats for logging/debug."""
    a = np.asarray(a, dtype=float).ravel()
    if a.size == 0:
        return Stats1D(mean=math.nan, std=math.nan, min=math.nan, max=math.nan)
    return Stats1D(
        mean=float(np.mean(a)),
        std=float(np.std(a, ddof=0)),
        min=float(np.min(a)),
        max=float(np.max(a)),
    )
