"""
Fill Mask - which cells of the grid get filled

Each cell is an independent fair coin; there is no spatial correlation and
the mask knows nothing about the partition coordinates.
"""

import random

import numpy as np

from src.config import FILL_PROBABILITY


def create_fill_mask(rows: int, cols: int, rng: random.Random,
                     probability: float = FILL_PROBABILITY) -> np.ndarray:
    """Return a rows x cols bool array, each cell True with `probability`."""
    if rows < 0 or cols < 0:
        raise ValueError(f"mask dimensions must be >= 0 (got {rows}x{cols})")

    mask = np.zeros((rows, cols), dtype=bool)
    for i in range(rows):
        for j in range(cols):
            mask[i, j] = rng.random() < probability
    return mask


def fill_ratio(mask: np.ndarray) -> float:
    """Fraction of filled cells (0.0 for an empty mask)."""
    if mask.size == 0:
        return 0.0
    return float(mask.mean())
