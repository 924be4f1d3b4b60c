"""
Noise Field - Smoothed 1-D value noise

Processing-style noise(): a lookup table of uniform random values, several
octaves summed with halving amplitude, cosine interpolation between lattice
points. Output lies in [0, 1) and varies smoothly with the input coordinate,
so neighbouring samples give similar (but not equal) weights.

Pure Python + NumPy, no Qt knowledge.
"""

import math
from typing import Optional, Union

import numpy as np

from src.config import NOISE_TABLE_SIZE, NOISE_OCTAVES, NOISE_FALLOFF


ArrayLike = Union[float, np.ndarray]


def _cosine_ease(t: np.ndarray) -> np.ndarray:
    """Map [0, 1] onto an S-curve with zero slope at both ends."""
    return 0.5 * (1.0 - np.cos(t * math.pi))


class NoiseField:
    """
    Deterministic smoothed noise for a given seed.

    The table is filled once at construction; sampling is a pure function
    of the coordinate.
    """

    def __init__(self, seed: Optional[int] = None,
                 octaves: int = NOISE_OCTAVES,
                 falloff: float = NOISE_FALLOFF,
                 table_size: int = NOISE_TABLE_SIZE):
        if table_size & (table_size - 1):
            raise ValueError("table_size must be a power of two")
        if octaves < 1:
            raise ValueError("octaves must be >= 1")

        self._octaves = octaves
        self._falloff = falloff
        self._mask = table_size - 1
        self._table = np.random.default_rng(seed).random(table_size)

    @property
    def max_value(self) -> float:
        """Upper bound of the summed octaves (exclusive)."""
        return sum(0.5 * self._falloff ** o for o in range(self._octaves))

    def sample(self, x: ArrayLike) -> ArrayLike:
        """
        Sample noise at coordinate(s) x.

        Returns a float for scalar input, an array of the same shape for
        array input.
        """
        scalar = np.ndim(x) == 0
        xs = np.abs(np.asarray(x, dtype=np.float64))

        total = np.zeros_like(xs)
        amp = 0.5
        for _ in range(self._octaves):
            base = np.floor(xs)
            frac = xs - base
            i0 = base.astype(np.int64) & self._mask
            i1 = (i0 + 1) & self._mask

            t = _cosine_ease(frac)
            n0 = self._table[i0]
            n1 = self._table[i1]
            total += amp * (n0 + (n1 - n0) * t)

            amp *= self._falloff
            xs = xs * 2.0

        if scalar:
            return float(total)
        return total

    def __call__(self, x: ArrayLike) -> ArrayLike:
        return self.sample(x)
