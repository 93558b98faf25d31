from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass
class RNG:
    seed: int | None = None

    def __post_init__(self) -> None:
        self._seq = np.random.SeedSequence(self.seed)
        self._gen = np.random.default_rng(self._seq)

    @property
    def gen(self) -> np.random.Generator:
        return self._gen

    def standard_normal(self, size) -> np.ndarray:
        return self._gen.standard_normal(size=size)

    def spawn(self, n: int) -> list[np.random.Generator]:
        """Independent child generators, one per simulated path."""
        if n < 0:
            raise ValueError("RNG.spawn: n must be >= 0")
        return [np.random.default_rng(s) for s in self._seq.spawn(n)]
