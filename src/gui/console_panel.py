"""
Console Panel - Slide-out logging console

Features:
- Overlay: slides over the pattern from the right edge, outside any layout
- Color-coded log levels
- Level filter dropdown
- Max 300 lines
"""

from PyQt5.QtWidgets import (
    QVBoxLayout, QHBoxLayout, QPlainTextEdit, QPushButton, QComboBox, QLabel, QFrame
)
from PyQt5.QtCore import QEvent, QPropertyAnimation, QEasingCurve, pyqtProperty
from PyQt5.QtGui import QFont, QTextCursor

from src.gui.theme import COLORS, MONO_FONT, FONT_SIZES, button_style
from src.utils.logger import logger

import logging


LOG_COLORS = {
    logging.DEBUG: "#666666",
    logging.INFO: "#88ff88",
    logging.WARNING: "#ffaa44",
    logging.ERROR: "#ff6666",
}

LOG_LEVEL_NAMES = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
}

LEVEL_FILTERS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


class ConsolePanel(QFrame):
    """
    Slide-out console for viewing logs.

    Overlay style: a child of the widget it covers, kept out of its layout
    and pinned to the right edge, so opening it never resizes the canvas.
    Toggle with Ctrl+` from the main frame.
    """

    MAX_LINES = 300
    PANEL_WIDTH = 320
    ANIMATION_DURATION = 200  # ms

    def __init__(self, parent=None):
        super().__init__(parent)

        self._visible_width = 0
        self._is_open = False
        self._filter_level = logging.INFO

        self.setup_ui()
        logger.signal_emitter.log_message.connect(self.on_log_message)

        if parent is not None:
            parent.installEventFilter(self)
        self._place()

    def eventFilter(self, obj, event):
        """Follow the covered widget's size."""
        if obj is self.parentWidget() and event.type() == QEvent.Resize:
            self._place()
        return super().eventFilter(obj, event)

    def _place(self):
        """Pin to the parent's right edge at the current slide width."""
        parent = self.parentWidget()
        width = int(self._visible_width)
        if parent is None:
            self.setFixedWidth(width)
            return
        self.setFixedSize(width, parent.height())
        self.move(parent.width() - width, 0)
        self.raise_()

    def setup_ui(self):
        """Create console UI."""
        self.setStyleSheet(f"""
            QFrame {{
                background-color: {COLORS['background_dark']};
                border-left: 2px solid {COLORS['border_light']};
            }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(5)

        header = QHBoxLayout()
        title = QLabel("CONSOLE")
        title.setFont(QFont(MONO_FONT, FONT_SIZES['label']))
        title.setStyleSheet(f"color: {COLORS['text_bright']}; border: none;")
        header.addWidget(title)
        header.addStretch()

        self.level_filter = QComboBox()
        self.level_filter.addItems(list(LEVEL_FILTERS))
        self.level_filter.setCurrentText("INFO")
        self.level_filter.setFixedWidth(70)
        self.level_filter.currentTextChanged.connect(self.on_filter_changed)
        header.addWidget(self.level_filter)
        layout.addLayout(header)

        self.log_text = QPlainTextEdit()
        self.log_text.setReadOnly(True)
        self.log_text.setFont(QFont(MONO_FONT, FONT_SIZES['tiny']))
        self.log_text.setLineWrapMode(QPlainTextEdit.NoWrap)
        self.log_text.setStyleSheet(f"""
            QPlainTextEdit {{
                background-color: {COLORS['background_dark']};
                color: {COLORS['text']};
                border: 1px solid {COLORS['border']};
            }}
        """)
        layout.addWidget(self.log_text)

        buttons = QHBoxLayout()
        clear_btn = QPushButton("Clear")
        clear_btn.setFixedWidth(45)
        clear_btn.setStyleSheet(button_style())
        clear_btn.clicked.connect(self.log_text.clear)
        buttons.addWidget(clear_btn)
        buttons.addStretch()

        close_btn = QPushButton("✕")
        close_btn.setFixedWidth(25)
        close_btn.setStyleSheet(button_style())
        close_btn.clicked.connect(self.hide_panel)
        buttons.addWidget(close_btn)
        layout.addLayout(buttons)

    def on_log_message(self, message: str, level: int, timestamp: str):
        """Append one log line if it passes the level filter."""
        if level < self._filter_level:
            return

        level_name = LOG_LEVEL_NAMES.get(level, "???")
        color = LOG_COLORS.get(level, COLORS['text'])
        self.log_text.appendHtml(
            f"<span style='color: {COLORS['text_dim']}'>{timestamp}</span> "
            f"<span style='color: {color}'>[{level_name}]</span> "
            f"<span style='color: {COLORS['text']}'>{message}</span>"
        )

        doc = self.log_text.document()
        if doc.blockCount() > self.MAX_LINES:
            cursor = QTextCursor(doc)
            cursor.movePosition(QTextCursor.Start)
            cursor.movePosition(QTextCursor.Down, QTextCursor.KeepAnchor,
                                doc.blockCount() - self.MAX_LINES)
            cursor.removeSelectedText()

    def on_filter_changed(self, text: str):
        self._filter_level = LEVEL_FILTERS.get(text, logging.DEBUG)

    # Animation property for width
    def get_visible_width(self):
        return self._visible_width

    def set_visible_width(self, width):
        self._visible_width = width
        self._place()

    visible_width = pyqtProperty(float, get_visible_width, set_visible_width)

    def _animate(self, start, end, curve):
        self.animation = QPropertyAnimation(self, b"visible_width")
        self.animation.setDuration(self.ANIMATION_DURATION)
        self.animation.setStartValue(start)
        self.animation.setEndValue(end)
        self.animation.setEasingCurve(curve)
        self.animation.start()

    def show_panel(self):
        if self._is_open:
            return
        self._is_open = True
        self.show()
        self._animate(0, self.PANEL_WIDTH, QEasingCurve.OutCubic)

    def hide_panel(self):
        if not self._is_open:
            return
        self._is_open = False
        self._animate(self.PANEL_WIDTH, 0, QEasingCurve.InCubic)

    def toggle_panel(self):
        if self._is_open:
            self.hide_panel()
        else:
            self.show_panel()

    @property
    def is_open(self):
        return self._is_open
