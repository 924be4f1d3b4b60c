"""
Tests for the central logger (component tags + GUI signal).
"""

import logging

from src.utils.logger import LOGGER_NAME, LogLevel, TaggedFormatter, format_message, logger


class TestFormatting:

    def test_plain(self):
        assert format_message("hello") == "hello"

    def test_component_and_details(self):
        msg = format_message("Pattern ready", component="PATTERN", details="12 divisions")
        assert msg == "[PATTERN] Pattern ready - 12 divisions"

    def test_formatter_reads_record_attributes(self):
        record = logging.LogRecord(LOGGER_NAME, logging.INFO, __file__, 1,
                                   "Window ready", None, None)
        record.component = "APP"
        record.details = "1200x800"
        assert TaggedFormatter("%(tagged)s").format(record) == "[APP] Window ready - 1200x800"

    def test_formatter_without_tags(self):
        """Records logged straight through stdlib logging carry no tags."""
        record = logging.LogRecord(LOGGER_NAME, logging.INFO, __file__, 1,
                                   "bare", None, None)
        assert TaggedFormatter("%(tagged)s").format(record) == "bare"


class TestSignal:

    def test_messages_reach_gui_signal(self, qt_app):
        received = []
        logger.signal_emitter.log_message.connect(
            lambda msg, level, ts: received.append((msg, level))
        )
        logger.warning("Degenerate spacing", component="PATTERN")
        assert ("[PATTERN] Degenerate spacing", logging.WARNING) in received

    def test_debug_helpers_tag_component(self, qt_app):
        received = []
        logger.signal_emitter.log_message.connect(
            lambda msg, level, ts: received.append((msg, level))
        )
        logger.reveal("Reveal settled", details="50 frames")
        logger.pattern("Pattern created")
        assert ("[REVEAL] Reveal settled - 50 frames", logging.DEBUG) in received
        assert ("[PATTERN] Pattern created", logging.DEBUG) in received


class TestFileLogging:

    def test_file_output(self, tmp_path):
        path = tmp_path / "weave.log"
        logger.enable_file_logging(str(path))
        try:
            logger.info("written to file", component="APP")
        finally:
            logger.disable_file_logging()
        assert "[INFO] [APP] written to file" in path.read_text()

    def test_reenable_switches_file(self, tmp_path):
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"
        logger.enable_file_logging(str(first))
        try:
            logger.enable_file_logging(str(second))
            logger.info("only in second", component="APP")
        finally:
            logger.disable_file_logging()
        assert "only in second" not in first.read_text()
        assert "only in second" in second.read_text()

    def test_levels_match_logging(self):
        assert LogLevel.DEBUG == logging.DEBUG
        assert LogLevel.ERROR == logging.ERROR
