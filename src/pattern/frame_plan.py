"""
Frame Plan - what to draw for one frame

Turns a pattern and its reveal state into plain draw instructions (lines
and cell fills in canvas coordinates). The view paints the plan; nothing
here touches Qt.
"""

import random
from dataclasses import dataclass, field
from typing import List

from .color_policy import CellRect, FillInstruction, resolve_cell_fill
from .pattern_state import PatternInstance
from .reveal import RevealAnimator, max_lines, visible_line_counts
from .symmetry import Quadrant


@dataclass(frozen=True)
class GridLine:
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def horizontal(self) -> bool:
        return self.y1 == self.y2


@dataclass
class FramePlan:
    background: int
    lines: List[GridLine] = field(default_factory=list)
    fills: List[FillInstruction] = field(default_factory=list)


def quadrant_lines(quadrant: Quadrant, rows_drawn: int, cols_drawn: int) -> List[GridLine]:
    """Row lines (full quadrant width) then column lines (full height)."""
    ox, oy = quadrant.offset_x, quadrant.offset_y
    w, h = quadrant.width, quadrant.height

    lines = []
    for y in quadrant.rows[:rows_drawn]:
        lines.append(GridLine(ox, oy + float(y), ox + w, oy + float(y)))
    for x in quadrant.cols[:cols_drawn]:
        lines.append(GridLine(ox + float(x), oy, ox + float(x), oy + h))
    return lines


def quadrant_cells(quadrant: Quadrant) -> List[CellRect]:
    """Canvas rects of every filled cell, row-major."""
    ox, oy = quadrant.offset_x, quadrant.offset_y
    rows, cols = quadrant.rows, quadrant.cols

    cells = []
    n_rows, n_cols = quadrant.mask.shape
    for i in range(n_rows):
        for j in range(n_cols):
            if quadrant.mask[i, j]:
                cells.append(CellRect(
                    x=ox + float(cols[j]),
                    y=oy + float(rows[i]),
                    w=float(cols[j + 1] - cols[j]),
                    h=float(rows[i + 1] - rows[i]),
                ))
    return cells


def plan_frame(pattern: PatternInstance, animator: RevealAnimator,
               rng: random.Random) -> FramePlan:
    """
    Build the draw list for the current frame.

    While animating, each quadrant gets a quarter of the visible line
    count (rows first, then columns) and no fills. Once settled, every
    line and every filled cell of all four quadrants is drawn.
    """
    plan = FramePlan(background=pattern.background)

    if animator.fills_visible:
        for quadrant in pattern.quadrants:
            plan.lines.extend(quadrant_lines(quadrant, len(quadrant.rows), len(quadrant.cols)))
            for rect in quadrant_cells(quadrant):
                plan.fills.append(resolve_cell_fill(pattern.fill_style, rect, rng))
        return plan

    total = max_lines(len(pattern.row_partition), len(pattern.col_partition))
    budget = animator.quadrant_line_budget(total)
    for quadrant in pattern.quadrants:
        rows_drawn, cols_drawn = visible_line_counts(budget, len(quadrant.rows), len(quadrant.cols))
        plan.lines.extend(quadrant_lines(quadrant, rows_drawn, cols_drawn))
    return plan
