"""
Pattern Controller - owns the current pattern and drives the reveal

Connects:
- create_pattern (generation)
- RevealAnimator (per-frame progress)
- PatternView (via signals)

Runs the reveal at FRAME_INTERVAL_MS via QTimer and stops the timer once
the pattern has settled.
"""

import random
from typing import Optional

from PyQt5.QtCore import QObject, QTimer, pyqtSignal
from src.config import FRAME_INTERVAL_MS, REVEAL_STEP
from src.utils.logger import logger

from .frame_plan import FramePlan, plan_frame
from .pattern_state import PatternInstance, create_pattern
from .reveal import RevealAnimator, RevealPhase


class PatternController(QObject):
    """
    Controller for the weave pattern.

    Holds exactly one PatternInstance at a time; regenerate and resize
    replace it wholesale and restart the reveal.
    """

    # Signals for UI
    pattern_changed = pyqtSignal(object)  # PatternInstance
    frame_advanced = pyqtSignal(float)    # progress 0-1
    settled = pyqtSignal()

    def __init__(self, seed: Optional[int] = None, step: float = REVEAL_STEP,
                 interval_ms: int = FRAME_INTERVAL_MS, parent=None):
        super().__init__(parent)

        self._rng = random.Random(seed)
        self._pattern: Optional[PatternInstance] = None
        self._animator = RevealAnimator(step)
        self._size = (0, 0)

        # Frame timer
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._tick)

        if seed is not None:
            logger.info(f"Pattern seed locked: {seed}", component="PATTERN")

    @property
    def pattern(self) -> Optional[PatternInstance]:
        return self._pattern

    @property
    def animator(self) -> RevealAnimator:
        return self._animator

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    # === Control surface ===

    def regenerate(self, width: Optional[float] = None,
                   height: Optional[float] = None) -> Optional[PatternInstance]:
        """
        Replace the current pattern with a fresh one.

        Uses the last known canvas size when width/height are omitted.
        A non-positive size keeps the current pattern.
        """
        if width is None or height is None:
            width, height = self._size
        if width <= 0 or height <= 0:
            logger.debug(f"Skipping regenerate for empty canvas {width}x{height}",
                         component="PATTERN")
            return self._pattern

        self._size = (width, height)
        self._pattern = create_pattern(width, height, self._rng)
        self._animator.reset()

        logger.info(
            f"New pattern: {self._pattern.division_count} divisions, "
            f"{self._pattern.fill_mode.value} fill",
            component="PATTERN"
        )

        self.pattern_changed.emit(self._pattern)
        self._timer.start()
        return self._pattern

    def resize(self, width: float, height: float) -> Optional[PatternInstance]:
        """Regenerate to fit a new canvas size."""
        if self._pattern is not None and (width, height) == self._size:
            return self._pattern
        logger.debug(f"Canvas resized to {width}x{height}", component="PATTERN")
        return self.regenerate(width, height)

    def stop(self) -> None:
        self._timer.stop()

    def current_frame(self) -> Optional[FramePlan]:
        """Draw list for the current frame, or None before the first pattern."""
        if self._pattern is None:
            return None
        return plan_frame(self._pattern, self._animator, self._rng)

    # === Frame loop ===

    def _tick(self) -> None:
        """Advance the reveal by one frame."""
        if self._pattern is None:
            self._timer.stop()
            return

        phase = self._animator.advance()
        self.frame_advanced.emit(self._animator.progress)

        if phase is RevealPhase.SETTLED:
            self._timer.stop()
            self.settled.emit()
