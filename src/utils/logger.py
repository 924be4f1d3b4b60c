"""
Logger - Central logging system for Symmetric Weave

Usage:
    from src.utils.logger import logger

    logger.info("Window ready", component="APP")
    logger.warning("Degenerate spacing", component="PATTERN", details="total=0")
    logger.pattern("Pattern created", details="12 divisions")

Each record carries its component tag and details as record attributes;
the formatters render them as "[COMPONENT] message - details". Records go
to the terminal, an optional file and a Qt signal read by the GUI console.
"""

import logging
import sys
from datetime import datetime
from enum import IntEnum
from typing import Optional
from PyQt5.QtCore import QObject, pyqtSignal


LOGGER_NAME = "symmetric_weave"
RECORD_FORMAT = "%(asctime)s [%(levelname)s] %(tagged)s"


class LogLevel(IntEnum):
    """Log levels matching Python logging."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


def format_message(msg: str, component: Optional[str] = None,
                   details: Optional[str] = None) -> str:
    """Render "[COMPONENT] msg - details", skipping empty parts."""
    parts = [f"[{component}]"] if component else []
    parts.append(msg)
    if details:
        parts.append(f"- {details}")
    return " ".join(parts)


class TaggedFormatter(logging.Formatter):
    """Formatter exposing %(tagged)s built from the record's component and details."""

    def format(self, record: logging.LogRecord) -> str:
        record.tagged = format_message(
            record.getMessage(),
            getattr(record, "component", None),
            getattr(record, "details", None),
        )
        return super().format(record)


class LogSignalEmitter(QObject):
    """Carries log lines to the GUI console."""
    log_message = pyqtSignal(str, int, str)  # message, level, timestamp


class QtSignalHandler(logging.Handler):
    """Handler that re-emits each record on a LogSignalEmitter."""

    def __init__(self, emitter: LogSignalEmitter):
        super().__init__()
        self.emitter = emitter

    def emit(self, record: logging.LogRecord):
        try:
            msg = self.format(record)
            stamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
            self.emitter.log_message.emit(msg, record.levelno, stamp)
        except Exception:
            self.handleError(record)


class WeaveLogger:
    """
    Central logger for Symmetric Weave.

    The underlying logger passes everything; each handler applies its own
    level (terminal INFO by default, GUI console and file DEBUG).
    """

    def __init__(self):
        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self.signal_emitter = LogSignalEmitter()

        self._console_handler = logging.StreamHandler(sys.stdout)
        self._console_handler.setLevel(logging.INFO)
        self._console_handler.setFormatter(TaggedFormatter(RECORD_FORMAT, datefmt="%H:%M:%S"))
        self._logger.addHandler(self._console_handler)

        self._qt_handler = QtSignalHandler(self.signal_emitter)
        self._qt_handler.setLevel(logging.DEBUG)
        self._qt_handler.setFormatter(TaggedFormatter("%(tagged)s"))
        self._logger.addHandler(self._qt_handler)

        self._file_handler: Optional[logging.FileHandler] = None

    def set_level(self, level: LogLevel):
        """Minimum level printed to the terminal."""
        self._console_handler.setLevel(level)

    def enable_file_logging(self, filepath: str):
        """Write every record to `filepath`, replacing any earlier file."""
        self.disable_file_logging()
        handler = logging.FileHandler(filepath)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(TaggedFormatter(RECORD_FORMAT))
        self._logger.addHandler(handler)
        self._file_handler = handler

    def disable_file_logging(self):
        if self._file_handler:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    def _log(self, level: int, msg: str, component: Optional[str],
             details: Optional[str]):
        self._logger.log(level, msg, extra={"component": component, "details": details})

    def debug(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._log(logging.DEBUG, msg, component, details)

    def info(self, msg: str, component: Optional[str] = None,
             details: Optional[str] = None):
        self._log(logging.INFO, msg, component, details)

    def warning(self, msg: str, component: Optional[str] = None,
                details: Optional[str] = None):
        self._log(logging.WARNING, msg, component, details)

    def error(self, msg: str, component: Optional[str] = None,
              details: Optional[str] = None):
        self._log(logging.ERROR, msg, component, details)

    def pattern(self, msg: str, details: Optional[str] = None):
        """Pattern generation (DEBUG, tagged PATTERN)."""
        self.debug(msg, component="PATTERN", details=details)

    def reveal(self, msg: str, details: Optional[str] = None):
        """Reveal animation (DEBUG, tagged REVEAL)."""
        self.debug(msg, component="REVEAL", details=details)


# Global logger instance
logger = WeaveLogger()
