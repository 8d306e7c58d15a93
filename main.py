#!/usr/bin/env python3
"""
Game Launcher - Application Entry Point
=======================================

Loads the configuration, initializes logging and opens the launcher window.
"""

import sys
import logging

from game_launcher.app import LauncherApp
from game_launcher.config import Config
from game_launcher.utils.logging import setup_logging, get_log_file_path


def main():
    """Main application entry point."""
    try:
        config = Config.load_from_file()

        setup_logging(
            level=config.logging.level,
            log_file=config.logging.file_path,
            max_bytes=config.logging.max_file_size,
            backup_count=config.logging.backup_count,
        )
        logger = logging.getLogger(__name__)
        logger.info(f"Starting Game Launcher (log file: {get_log_file_path()})...")

        if not config.validate():
            logger.error("Configuration validation failed")
            return 1

        app = LauncherApp(config)
        exit_code = app.run()

        logger.info("Application shutting down")
        return exit_code

    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
        return 0
    except Exception as e:
        print(f"Fatal error: {e}")
        logging.exception("Fatal error occurred")
        return 1


if __name__ == "__main__":
    sys.exit(main())
