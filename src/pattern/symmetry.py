"""
Symmetry - mirrored quadrants from one canonical quadrant

The canonical quadrant sits top-left. The other three are reflections:

    +-----------+-------------+
    | CANONICAL | COLUMN_FLIP |
    +-----------+-------------+
    | ROW_FLIP  | BOTH_FLIP   |
    +-----------+-------------+

Reflecting a partition maps every boundary v to L - v and reverses the
order, so the result is still increasing from 0 to L with the same cell
widths in reverse order. Masks are reversed along the same axes, which
makes the quadrants meet seamlessly at the centre lines.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

import numpy as np


class SymmetryError(ValueError):
    """Mask and partitions disagree on the grid shape."""


class QuadrantKind(Enum):
    CANONICAL = auto()
    COLUMN_FLIP = auto()
    ROW_FLIP = auto()
    BOTH_FLIP = auto()


@dataclass(frozen=True, eq=False)
class Quadrant:
    """One screen quadrant: its offset, partitions and fill mask."""
    kind: QuadrantKind
    offset_x: float
    offset_y: float
    rows: np.ndarray
    cols: np.ndarray
    mask: np.ndarray

    @property
    def width(self) -> float:
        return float(self.cols[-1])

    @property
    def height(self) -> float:
        return float(self.rows[-1])

    @property
    def line_count(self) -> int:
        return len(self.rows) + len(self.cols)


def flip_partition(partition: np.ndarray, length: float) -> np.ndarray:
    """Mirror a partition across the middle of [0, length]."""
    flipped = (length - np.asarray(partition, dtype=np.float64))[::-1].copy()
    if len(flipped):
        flipped[0] = 0.0
        flipped[-1] = length
    return flipped


def flip_mask_columns(mask: np.ndarray) -> np.ndarray:
    """Reverse each row left-right."""
    return np.asarray(mask)[:, ::-1].copy()


def flip_mask_rows(mask: np.ndarray) -> np.ndarray:
    """Reverse the row order top-bottom."""
    return np.asarray(mask)[::-1, :].copy()


def flip_mask_both(mask: np.ndarray) -> np.ndarray:
    return np.asarray(mask)[::-1, ::-1].copy()


def check_shape(rows: np.ndarray, cols: np.ndarray, mask: np.ndarray) -> None:
    """Raise SymmetryError unless mask is (len(rows)-1) x (len(cols)-1)."""
    expected: Tuple[int, int] = (len(rows) - 1, len(cols) - 1)
    if np.ndim(mask) != 2 or tuple(np.shape(mask)) != expected:
        raise SymmetryError(
            f"mask shape {tuple(np.shape(mask))} does not match partitions {expected}"
        )


def build_quadrants(rows: np.ndarray, cols: np.ndarray, mask: np.ndarray,
                    half_width: float, half_height: float) -> Tuple[Quadrant, ...]:
    """
    Derive all four quadrants from the canonical one.

    Returns (canonical, column_flip, row_flip, both_flip) positioned at
    (0, 0), (half_width, 0), (0, half_height), (half_width, half_height).
    """
    check_shape(rows, cols, mask)

    rows = np.asarray(rows, dtype=np.float64)
    cols = np.asarray(cols, dtype=np.float64)
    mask = np.asarray(mask, dtype=bool)

    flipped_rows = flip_partition(rows, half_height)
    flipped_cols = flip_partition(cols, half_width)

    return (
        Quadrant(QuadrantKind.CANONICAL, 0.0, 0.0, rows, cols, mask),
        Quadrant(QuadrantKind.COLUMN_FLIP, half_width, 0.0,
                 rows, flipped_cols, flip_mask_columns(mask)),
        Quadrant(QuadrantKind.ROW_FLIP, 0.0, half_height,
                 flipped_rows, cols, flip_mask_rows(mask)),
        Quadrant(QuadrantKind.BOTH_FLIP, half_width, half_height,
                 flipped_rows, flipped_cols, flip_mask_both(mask)),
    )
