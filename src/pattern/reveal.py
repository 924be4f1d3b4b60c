"""
Reveal Animator - progressive line-then-fill drawing

State machine:
    ANIMATING: Default after a new pattern. Progress grows by a fixed step
               per frame; a growing share of grid lines is drawn, no fills.
    SETTLED:   Progress reached 1. Every line and fill is drawn and the
               host may stop redrawing until the next pattern.

No widgets or timers here. The controller calls advance() once per frame.
"""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from src.config import REVEAL_STEP
from src.utils.logger import logger


EPS = 1e-9


class RevealPhase(Enum):
    """Reveal state machine states."""
    ANIMATING = auto()
    SETTLED = auto()


@dataclass
class RevealState:
    """Mutable reveal progress for one pattern instance."""
    progress: float = 0.0
    frames: int = 0
    phase: RevealPhase = RevealPhase.ANIMATING

    @property
    def is_animating(self) -> bool:
        return self.phase is RevealPhase.ANIMATING


def max_lines(row_count: int, col_count: int) -> int:
    """Line count the reveal maps progress onto (rows + cols, times two)."""
    return 2 * (row_count + col_count)


def visible_line_counts(budget: float, n_rows: int, n_cols: int) -> Tuple[int, int]:
    """
    Split a quadrant's line budget between row and column lines.

    Rows are drawn first in partition order, then columns. A line is drawn
    while the number already drawn is below the budget, so a fractional
    budget rounds up.
    """
    if budget <= 0:
        return 0, 0
    total = min(math.ceil(budget - EPS), n_rows + n_cols)
    rows_drawn = min(total, n_rows)
    cols_drawn = min(total - rows_drawn, n_cols)
    return rows_drawn, cols_drawn


class RevealAnimator:
    """Drives a RevealState one frame at a time."""

    def __init__(self, step: float = REVEAL_STEP):
        if step <= 0:
            raise ValueError(f"step must be > 0 (got {step})")
        self._step = step
        self._state = RevealState()

    @property
    def state(self) -> RevealState:
        return self._state

    @property
    def progress(self) -> float:
        return self._state.progress

    @property
    def phase(self) -> RevealPhase:
        return self._state.phase

    @property
    def fills_visible(self) -> bool:
        return self._state.phase is RevealPhase.SETTLED

    def reset(self) -> None:
        """Start a fresh reveal (new pattern instance)."""
        self._state = RevealState()

    def advance(self) -> RevealPhase:
        """Advance one frame. No-op once settled."""
        state = self._state
        if state.phase is RevealPhase.SETTLED:
            return state.phase

        state.frames += 1
        # Derived from the frame count so repeated float adds cannot drift
        state.progress = min(1.0, state.frames * self._step)

        if state.progress >= 1.0 - EPS:
            state.progress = 1.0
            state.phase = RevealPhase.SETTLED
            logger.reveal("Reveal settled", details=f"{state.frames} frames")
        return state.phase

    def lines_visible(self, line_total: int) -> int:
        """Lines visible across the whole canvas at the current progress."""
        return int(math.floor(self._state.progress * line_total + EPS))

    def quadrant_line_budget(self, line_total: int) -> float:
        """Each quadrant's share of the visible lines."""
        return self.lines_visible(line_total) / 4
