"""
Color Policy - how filled cells get their colour

Three fill modes, chosen once per pattern:
- FLAT: one colour for every filled cell
- GRADIENT: each filled cell gets a vertical blend between two random
  colours, re-drawn every time the cell is rendered
- PALETTE: each filled cell picks a random colour from a preset palette,
  re-drawn every time the cell is rendered

Colours are (r, g, b) int tuples; conversion to QColor happens in the view.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple, Union

from src.config import PALETTES


Color = Tuple[int, int, int]


class FillMode(Enum):
    FLAT = 'flat'
    GRADIENT = 'gradient'
    PALETTE = 'palette'


# =============================================================================
# FILL STYLES (one per pattern)
# =============================================================================

@dataclass(frozen=True)
class FlatStyle:
    color: Color

    @property
    def mode(self) -> FillMode:
        return FillMode.FLAT


@dataclass(frozen=True)
class GradientStyle:

    @property
    def mode(self) -> FillMode:
        return FillMode.GRADIENT


@dataclass(frozen=True)
class PaletteStyle:
    colors: Tuple[Color, ...]

    @property
    def mode(self) -> FillMode:
        return FillMode.PALETTE


FillStyle = Union[FlatStyle, GradientStyle, PaletteStyle]


# =============================================================================
# FILL INSTRUCTIONS (one per filled cell per frame)
# =============================================================================

@dataclass(frozen=True)
class CellRect:
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class SolidFill:
    rect: CellRect
    color: Color


@dataclass(frozen=True)
class GradientFill:
    rect: CellRect
    top: Color
    bottom: Color


FillInstruction = Union[SolidFill, GradientFill]


# =============================================================================
# COLOUR HELPERS
# =============================================================================

def hex_to_rgb(hex_color: str) -> Color:
    """'#FF5733' -> (255, 87, 51)."""
    hex_color = hex_color.lstrip('#')
    if len(hex_color) != 6:
        raise ValueError(f"expected #RRGGBB, got {hex_color!r}")
    return (int(hex_color[0:2], 16), int(hex_color[2:4], 16), int(hex_color[4:6], 16))


def random_color(rng: random.Random) -> Color:
    return (rng.randrange(256), rng.randrange(256), rng.randrange(256))


def lerp_color(c1: Color, c2: Color, amount: float) -> Color:
    """Linear blend from c1 (amount=0) to c2 (amount=1), clamped."""
    amount = max(0.0, min(1.0, amount))
    return tuple(int(round(a + (b - a) * amount)) for a, b in zip(c1, c2))


def palette_colors(index: int) -> Tuple[Color, ...]:
    return tuple(hex_to_rgb(h) for h in PALETTES[index])


def random_palette(rng: random.Random) -> Tuple[Color, ...]:
    """Pick one preset palette."""
    return palette_colors(rng.randrange(len(PALETTES)))


def choose_fill_style(rng: random.Random) -> FillStyle:
    """Pick a fill mode uniformly and resolve its per-pattern data."""
    mode = rng.choice(list(FillMode))
    if mode is FillMode.FLAT:
        return FlatStyle(random_color(rng))
    if mode is FillMode.PALETTE:
        return PaletteStyle(random_palette(rng))
    return GradientStyle()


# =============================================================================
# RESOLUTION
# =============================================================================

def resolve_cell_fill(style: FillStyle, rect: CellRect,
                      rng: random.Random) -> FillInstruction:
    """
    Resolve the fill for one cell under the pattern's style.

    Palette and gradient colours are drawn fresh on every call; nothing is
    cached per cell.
    """
    if isinstance(style, FlatStyle):
        return SolidFill(rect, style.color)
    if isinstance(style, PaletteStyle):
        return SolidFill(rect, rng.choice(style.colors))
    if isinstance(style, GradientStyle):
        return GradientFill(rect, random_color(rng), random_color(rng))
    raise TypeError(f"unknown fill style: {style!r}")


def gradient_rows(fill: GradientFill) -> List[Tuple[float, Color]]:
    """
    Sample a gradient fill once per pixel row.

    Returns (y, colour) for rows 0..int(h) of the cell. Row i blends
    i / h of the way from top to bottom.
    """
    rect = fill.rect
    steps = int(rect.h)
    if steps <= 0:
        return [(rect.y, fill.top)]

    return [(rect.y + i, lerp_color(fill.top, fill.bottom, i / rect.h))
            for i in range(steps + 1)]


def style_colors(style: FillStyle) -> Sequence[Color]:
    """Colours fixed at pattern creation (empty for gradients)."""
    if isinstance(style, FlatStyle):
        return (style.color,)
    if isinstance(style, PaletteStyle):
        return style.colors
    return ()
