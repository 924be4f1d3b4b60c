"""
Noise Spacing - Irregular 1-D partitions of an axis

A partition is the sorted list of cell boundaries along one axis, starting
at 0 and ending at the axis length. Cell widths follow smoothed noise so
neighbouring cells have similar sizes.
"""

from typing import Callable

import numpy as np

from src.config import DIVISION_MAX, NOISE_SCALE, SPACING_EPS
from src.utils.logger import logger


NoiseSource = Callable[[np.ndarray], np.ndarray]


def clamp_divisions(divisions: int) -> int:
    """Clamp a division count into [1, DIVISION_MAX]."""
    clamped = max(1, min(DIVISION_MAX, int(divisions)))
    if clamped != divisions:
        logger.pattern("Division count clamped", details=f"{divisions} -> {clamped}")
    return clamped


def uniform_spacing(axis_length: float, divisions: int) -> np.ndarray:
    """Evenly spaced partition (fallback for degenerate noise)."""
    if axis_length <= 0:
        raise ValueError(f"axis_length must be > 0 (got {axis_length})")
    divisions = clamp_divisions(divisions)
    positions = np.linspace(0.0, axis_length, divisions + 1)
    positions[-1] = axis_length
    return positions


def create_noise_spacing(axis_length: float, divisions: int, offset: float,
                         noise: NoiseSource,
                         scale: float = NOISE_SCALE) -> np.ndarray:
    """
    Build an irregular partition of [0, axis_length].

    Samples noise at i * scale + offset for each cell, normalizes the
    samples so they sum to axis_length and returns the running total
    starting at 0 (divisions + 1 boundaries).

    Falls back to a uniform partition when the noise weights sum to ~0
    or would produce an empty cell.
    """
    if axis_length <= 0:
        raise ValueError(f"axis_length must be > 0 (got {axis_length})")
    divisions = clamp_divisions(divisions)

    coords = np.arange(divisions, dtype=np.float64) * scale + offset
    weights = np.asarray(noise(coords), dtype=np.float64).reshape(divisions)
    total = float(weights.sum())

    if not np.isfinite(total) or total <= SPACING_EPS or np.any(weights <= 0):
        logger.warning("Degenerate noise spacing, using uniform partition",
                       component="PATTERN", details=f"total={total:.3g}")
        return uniform_spacing(axis_length, divisions)

    spans = weights * axis_length / total
    positions = np.concatenate(([0.0], np.cumsum(spans)))
    # Pin the end so rounding never leaves a gap at the quadrant edge
    positions[-1] = axis_length

    if np.any(np.diff(positions) <= 0):
        logger.warning("Non-increasing noise spacing, using uniform partition",
                       component="PATTERN")
        return uniform_spacing(axis_length, divisions)

    return positions
