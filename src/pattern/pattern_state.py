"""
Pattern State - one generated pattern instance

Everything needed to draw a pattern: the canonical quadrant's partitions and
fill mask, the fill style, the background gray and the four cached
quadrants. Built once by create_pattern() and never mutated; regenerate
and resize replace the whole instance.
"""

import random
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np

from src.config import (
    DIVISION_MIN, DIVISION_MAX, NOISE_OFFSET_RANGE, COLUMN_NOISE_SHIFT,
)
from src.utils.logger import logger

from .color_policy import (
    Color, FillMode, FillStyle, FlatStyle, PaletteStyle, choose_fill_style,
    style_colors,
)
from .fill_mask import create_fill_mask, fill_ratio
from .noise_field import NoiseField
from .spacing import create_noise_spacing
from .symmetry import Quadrant, build_quadrants


@dataclass(frozen=True, eq=False)
class PatternInstance:
    """Immutable pattern: canonical quadrant plus derived mirrors."""

    width: float
    height: float
    division_count: int
    row_partition: np.ndarray
    col_partition: np.ndarray
    fill_mask: np.ndarray
    fill_style: FillStyle
    background: int
    noise_offset: float
    quadrants: Tuple[Quadrant, ...]

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    @property
    def fill_mode(self) -> FillMode:
        return self.fill_style.mode

    @property
    def flat_color(self) -> Optional[Color]:
        """Flat fill colour, None unless fill_mode is FLAT."""
        if isinstance(self.fill_style, FlatStyle):
            return self.fill_style.color
        return None

    @property
    def palette(self) -> Optional[Tuple[Color, ...]]:
        """Palette colours, None unless fill_mode is PALETTE."""
        if isinstance(self.fill_style, PaletteStyle):
            return self.fill_style.colors
        return None

    @property
    def column_noise_offset(self) -> float:
        return self.noise_offset + COLUMN_NOISE_SHIFT

    def describe(self) -> Dict[str, Any]:
        """Summary for logging and debugging."""
        return {
            "size": f"{int(self.width)}x{int(self.height)}",
            "divisions": self.division_count,
            "fill_mode": self.fill_mode.value,
            "colors": len(style_colors(self.fill_style)),
            "filled": f"{fill_ratio(self.fill_mask):.0%}",
            "background": self.background,
            "noise_offset": round(self.noise_offset, 3),
        }


def create_pattern(width: float, height: float, rng: random.Random,
                   noise_seed: Optional[int] = None,
                   divisions: Optional[int] = None) -> PatternInstance:
    """
    Generate a fresh pattern for a width x height canvas.

    All randomness comes from `rng`; the noise table is seeded from it
    unless `noise_seed` is given. `divisions` overrides the random
    division count (clamped by the spacing generator).
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"canvas size must be positive (got {width}x{height})")

    if noise_seed is None:
        noise_seed = rng.randint(0, 0x7FFFFFFF)
    noise = NoiseField(noise_seed)

    offset = rng.uniform(0.0, NOISE_OFFSET_RANGE)
    background = rng.randrange(256)
    if divisions is None:
        divisions = rng.randint(DIVISION_MIN, DIVISION_MAX)

    half_width = width / 2
    half_height = height / 2
    rows = create_noise_spacing(half_height, divisions, offset, noise)
    cols = create_noise_spacing(half_width, divisions, offset + COLUMN_NOISE_SHIFT, noise)
    mask = create_fill_mask(len(rows) - 1, len(cols) - 1, rng)
    style = choose_fill_style(rng)

    quadrants = build_quadrants(rows, cols, mask, half_width, half_height)

    pattern = PatternInstance(
        width=float(width),
        height=float(height),
        division_count=len(rows) - 1,
        row_partition=rows,
        col_partition=cols,
        fill_mask=mask,
        fill_style=style,
        background=background,
        noise_offset=offset,
        quadrants=quadrants,
    )
    logger.pattern("Pattern created", details=str(pattern.describe()))
    return pattern
