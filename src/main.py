"""
Main entry point for Symmetric Weave.
Launches the main frame with the pattern canvas.
"""

import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PyQt5.QtWidgets import QApplication


def main():
    # Initialize logger first
    from src.config import get_seed, get_log_level_name, get_log_file
    from src.utils.logger import logger, LogLevel

    logger.set_level(LogLevel[get_log_level_name()])
    log_file = get_log_file()
    if log_file:
        logger.enable_file_logging(log_file)

    logger.info("=" * 40, component="APP")
    logger.info("Symmetric Weave starting", component="APP")
    logger.info("=" * 40, component="APP")

    app = QApplication(sys.argv)

    from src.gui.main_frame import MainFrame

    window = MainFrame(seed=get_seed())

    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
