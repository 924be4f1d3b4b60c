"""
Weave Pattern System

Irregular noise-spaced grids mirrored into four quadrants, revealed line by
line before the cells fill in.
"""

from .noise_field import NoiseField
from .spacing import create_noise_spacing, uniform_spacing, clamp_divisions
from .fill_mask import create_fill_mask
from .symmetry import (
    Quadrant, QuadrantKind, SymmetryError, build_quadrants, flip_partition,
    flip_mask_columns, flip_mask_rows, flip_mask_both,
)
from .color_policy import (
    FillMode, FlatStyle, GradientStyle, PaletteStyle, SolidFill, GradientFill,
    choose_fill_style, resolve_cell_fill, gradient_rows,
)
from .pattern_state import PatternInstance, create_pattern
from .reveal import RevealAnimator, RevealPhase, RevealState
from .frame_plan import FramePlan, GridLine, plan_frame
from .pattern_controller import PatternController

__all__ = [
    'NoiseField',
    'create_noise_spacing',
    'uniform_spacing',
    'clamp_divisions',
    'create_fill_mask',
    'Quadrant',
    'QuadrantKind',
    'SymmetryError',
    'build_quadrants',
    'flip_partition',
    'flip_mask_columns',
    'flip_mask_rows',
    'flip_mask_both',
    'FillMode',
    'FlatStyle',
    'GradientStyle',
    'PaletteStyle',
    'SolidFill',
    'GradientFill',
    'choose_fill_style',
    'resolve_cell_fill',
    'gradient_rows',
    'PatternInstance',
    'create_pattern',
    'RevealAnimator',
    'RevealPhase',
    'RevealState',
    'FramePlan',
    'GridLine',
    'plan_frame',
    'PatternController',
]
