"""
Main application class for the game launcher.
"""

import sys
from typing import Optional

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QTimer

from .config import Config
from .gui.main_window import MainWindow
from .utils.logging import get_logger


class LauncherApp:
    """Main application class that coordinates all components."""

    def __init__(self, config: Config):
        """Initialize the application with configuration."""
        self.config = config
        self.logger = get_logger(__name__)
        self.qt_app: Optional[QApplication] = None
        self.main_window: Optional[MainWindow] = None

    def run(self) -> int:
        """Run the application and return exit code."""
        try:
            self.logger.info("Initializing Qt application...")

            self.qt_app = QApplication(sys.argv)
            self.qt_app.setStyle('Fusion')

            self.main_window = MainWindow(self.config)
            self.main_window.show()

            if self.config.updates.check_on_startup:
                QTimer.singleShot(500, self.main_window.check_for_updates)

            self.logger.info("Application started successfully")
            return self.qt_app.exec()

        except Exception as e:
            self.logger.error(f"Failed to start application: {e}", exc_info=True)
            return 1

    def get_version(self) -> str:
        """Get application version."""
        from . import __version__
        return __version__
