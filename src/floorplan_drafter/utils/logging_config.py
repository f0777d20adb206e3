"""
Logging configuration for the floor plan drafter.

Provides a root logger setup with file and console output, and a small
helper for module loggers.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional


class FloorPlanLogger:
    """
    Configures logging for the floor plan drafter.

    Supports:
    - Standard levels (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    - File and console output with different formats and levels
    - Module-specific logger levels
    """

    @staticmethod
    def configure(
        debug_mode: bool = False,
        log_dir: str = "logs",
        log_to_file: bool = True,
    ) -> Optional[str]:
        """
        Configure the logging system for the entire application.

        Args:
            debug_mode: If True, sets DEBUG level for all loggers
            log_dir: Directory to store log files
            log_to_file: If False, only the console handler is installed

        Returns:
            Path to the created log file, or None when file logging is off
        """
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG if debug_mode else logging.INFO)

        # Clear any existing handlers
        if root_logger.handlers:
            root_logger.handlers.clear()

        log_file = None
        if log_to_file:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"floorplan_drafter_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(
                logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            )
            file_handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
            root_logger.addHandler(file_handler)

        # Console shows less info by default
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s: %(message)s'))
        console_handler.setLevel(logging.DEBUG if debug_mode else logging.INFO)
        root_logger.addHandler(console_handler)

        return log_file

    @staticmethod
    def get_logger(name: str, level: Optional[int] = None):
        """
        Get a logger for a specific module.

        Args:
            name: Logger name, typically __name__
            level: Optional specific level for this logger

        Returns:
            A configured logger
        """
        logger = logging.getLogger(name)
        if level:
            logger.setLevel(level)
        return logger


# For direct import convenience
def get_logger(name: str, level: Optional[int] = None):
    """
    Get a logger for a specific module.

    Convenience function that delegates to FloorPlanLogger.get_logger.
    """
    return FloorPlanLogger.get_logger(name, level)
