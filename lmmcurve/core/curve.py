"""
Curve of tenor buckets for the LIBOR market model.

A curve is three parallel buffers (t, value, sigma) plus a window
(offset, n) into them. Bucket j covers (t[j-1], t[j]] with t[-1] = 0.
`value` holds either forwards f[j] or futures quotes phi[j]; the curve does
not know which, callers keep track of the convention.

Evolution never reallocates: it rebases the visible window in place and
returns a new Curve that shares the buffers with a larger offset.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .utils import assert_finite, is_strictly_increasing


@dataclass(frozen=True, eq=False)
class Curve:
    """
    Window (offset, n) over owned buffers.

    Attributes
    ----------
    t : np.ndarray
        Tenor boundaries in years, strictly increasing inside the window.
    value : np.ndarray
        Forward rates or futures quotes, one per bucket.
    sigma : np.ndarray
        At-the-money implied volatilities, one per bucket.
    offset : int
        First visible position in the buffers.
    n : int | None
        Number of visible buckets; None means "up to the end of the buffers".
    """
    t: np.ndarray
    value: np.ndarray
    sigma: np.ndarray
    offset: int = 0
    n: int | None = None

    def __post_init__(self) -> None:
        for name in ("t", "value", "sigma"):
            arr = getattr(self, name)
            if not isinstance(arr, np.ndarray) or arr.ndim != 1:
                raise ValueError(f"Curve: {name} must be a 1D numpy array")
            if not np.issubdtype(arr.dtype, np.floating):
                raise ValueError(f"Curve: {name} must have a floating dtype, got {arr.dtype}")
        size = self.t.shape[0]
        if self.value.shape[0] != size or self.sigma.shape[0] != size:
            raise ValueError(
                "Curve: t, value and sigma must have the same length "
                f"(got {size}, {self.value.shape[0]}, {self.sigma.shape[0]})"
            )
        if self.offset < 0 or self.offset > size:
            raise ValueError(f"Curve: offset {self.offset} outside buffer of size {size}")
        if self.n is None:
            object.__setattr__(self, "n", size - self.offset)
        if self.n < 0 or self.offset + self.n > size:
            raise ValueError(f"Curve: window ({self.offset}, {self.n}) outside buffer of size {size}")

        assert_finite("Curve.t", self.times)
        assert_finite("Curve.value", self.values)
        assert_finite("Curve.sigma", self.vols)
        if not is_strictly_increasing(self.times):
            raise ValueError("Curve: t must be strictly increasing")
        if self.n > 0 and self.times[0] <= 0:
            raise ValueError("Curve: t must be > 0")

    # -------- Constructors ---------------------------------------------------

    @classmethod
    def from_arrays(
        cls,
        t: Sequence[float],
        value: Sequence[float],
        sigma: Sequence[float],
        dtype=np.float64,
    ) -> "Curve":
        """Copy the three sequences into fresh buffers of a common float dtype."""
        if not np.issubdtype(np.dtype(dtype), np.floating):
            raise ValueError(f"Curve: dtype must be floating, got {dtype}")
        return cls(
            t=np.array(t, dtype=dtype).ravel(),
            value=np.array(value, dtype=dtype).ravel(),
            sigma=np.array(sigma, dtype=dtype).ravel(),
        )

    @classmethod
    def empty(cls, dtype=np.float64) -> "Curve":
        e = np.empty(0, dtype=dtype)
        return cls(t=e, value=e.copy(), sigma=e.copy())

    # -------- Window views ---------------------------------------------------

    @property
    def stop(self) -> int:
        return self.offset + self.n

    @property
    def times(self) -> np.ndarray:
        """View of the visible tenor boundaries (writes go to the buffer)."""
        return self.t[self.offset:self.stop]

    @property
    def values(self) -> np.ndarray:
        """View of the visible forwards / futures quotes."""
        return self.value[self.offset:self.stop]

    @property
    def vols(self) -> np.ndarray:
        """View of the visible volatilities."""
        return self.sigma[self.offset:self.stop]

    @property
    def dtype(self) -> np.dtype:
        return self.value.dtype

    def __len__(self) -> int:
        return self.n

    def is_empty(self) -> bool:
        return self.n == 0

    def window(self, start: int) -> "Curve":
        """
        Same buffers, window starting `start` buckets further on.
        Used by the evolution step to drop expired buckets.
        """
        if start < 0 or start > self.n:
            raise ValueError(f"Curve.window: start {start} outside [0, {self.n}]")
        return Curve(self.t, self.value, self.sigma, offset=self.offset + start, n=self.n - start)

    def copy(self) -> "Curve":
        """Independent curve owning a copy of the visible window."""
        return Curve(self.times.copy(), self.values.copy(), self.vols.copy())
