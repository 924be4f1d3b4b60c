"""
Main Frame - Combines the pattern canvas and console
"""

from PyQt5.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QShortcut
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence

from src.config import WINDOW_TITLE, DEFAULT_WINDOW_SIZE, MIN_WINDOW_SIZE
from src.gui.console_panel import ConsolePanel
from src.gui.pattern_view import PatternView
from src.pattern.pattern_controller import PatternController
from src.utils.logger import logger


class MainFrame(QMainWindow):
    """Main application window."""

    def __init__(self, seed=None):
        super().__init__()

        self.setWindowTitle(WINDOW_TITLE)
        self.setMinimumSize(*MIN_WINDOW_SIZE)
        self.resize(*DEFAULT_WINDOW_SIZE)

        self.controller = PatternController(seed=seed, parent=self)

        self.setup_ui()

    def setup_ui(self):
        """Create the main interface layout."""
        central = QWidget()
        self.setCentralWidget(central)

        layout = QHBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.pattern_view = PatternView(self.controller)
        layout.addWidget(self.pattern_view, stretch=1)

        # Overlay, not in the layout: the canvas keeps its size
        self.console_panel = ConsolePanel(central)

        # Space = new pattern
        regen_shortcut = QShortcut(QKeySequence(Qt.Key_Space), self)
        regen_shortcut.activated.connect(self.regenerate)

        # Keyboard shortcut for console (Cmd+` or Ctrl+`)
        console_shortcut = QShortcut(QKeySequence("Ctrl+`"), self)
        console_shortcut.activated.connect(self.console_panel.toggle_panel)

        logger.info("Press SPACE for a new pattern, Ctrl+` for the console", component="APP")

    def regenerate(self):
        """Replace the pattern at the current canvas size."""
        self.controller.regenerate(self.pattern_view.width(), self.pattern_view.height())

    def closeEvent(self, event):
        self.controller.stop()
        super().closeEvent(event)
