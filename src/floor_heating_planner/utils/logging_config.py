"""
Logging configuration for the floor heating planner.

Library modules only create module loggers (``logging.getLogger(__name__)``);
applications call ``PlannerLogger.configure`` once to attach handlers.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional


class PlannerLogger:
    """
    Configures logging for the floor heating planner.

    Supports:
    - Standard levels (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    - Optional file output alongside the console handler
    """

    @staticmethod
    def configure(
        debug_mode: bool = False,
        log_dir: Optional[str] = None,
        logger_name: str = "floor_heating_planner",
    ) -> Optional[str]:
        """
        Configure logging for the planner package.

        Args:
            debug_mode: If True, sets DEBUG level for the package logger
            log_dir: Directory for a timestamped log file, None for console only
            logger_name: Logger to configure, the package logger by default

        Returns:
            Path to the created log file, or None when logging to console only
        """
        level = logging.DEBUG if debug_mode else logging.INFO
        package_logger = logging.getLogger(logger_name)
        package_logger.setLevel(level)

        # Clear any existing handlers
        if package_logger.handlers:
            package_logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            logging.Formatter('%(name)s - %(levelname)s: %(message)s')
        )
        console_handler.setLevel(level)
        package_logger.addHandler(console_handler)

        if log_dir is None:
            return None

        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"floor_heating_{timestamp}.log")

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        file_handler.setLevel(logging.DEBUG)
        package_logger.addHandler(file_handler)

        return log_file
