"""Logging configuration and utilities."""

import os
import sys
import logging
from datetime import datetime
from typing import Optional

FILE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(message)s'


def setup_logging(mode: str = "interactive", log_dir: Optional[str] = None) -> logging.Logger:
    """Configure logging to the console and, optionally, a file.

    Args:
        mode: Run mode, used in the log filename
        log_dir: Directory for log files; no file is written when None

    Returns:
        Configured logger instance
    """
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers = [console]

    log_file = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = os.path.join(log_dir, f'reposync_{mode}_{timestamp}.log')
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.INFO,
        handlers=handlers,
        force=True  # Reset any existing configuration
    )

    logger = logging.getLogger('reposync')
    if log_file:
        logger.info(f"Log file: {log_file}")

    return logger
