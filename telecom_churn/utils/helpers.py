"""
Utility Helper Functions
========================

Common utility functions used across the project.
"""

import sys
from datetime import datetime
from typing import Optional

import pandas as pd
from loguru import logger

from config import LOGS_DIR


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days"
):
    """
    Setup logging configuration.

    Args:
        level: Logging level
        log_file: Optional log file name under logs/
        rotation: Log rotation setting
        retention: Log retention setting
    """
    # Remove default handler
    logger.remove()

    # Add console handler
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )

    # Add file handler if specified
    if log_file:
        log_path = LOGS_DIR / log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression="zip"
        )

    logger.info(f"Logging configured at {level} level")


def get_timestamp(format_str: str = "%Y%m%d_%H%M%S") -> str:
    """
    Get current timestamp string.

    Args:
        format_str: Datetime format string

    Returns:
        Formatted timestamp
    """
    return datetime.now().strftime(format_str)


def format_percentage(value: float, precision: int = 1) -> str:
    """Format a 0-1 fraction as a percentage string."""
    return f"{value * 100:.{precision}f}%"


def sample_to_csv(df: pd.DataFrame) -> bytes:
    """
    Serialize a sample for download.

    Args:
        df: Customer sample

    Returns:
        UTF-8 encoded CSV without the index
    """
    return df.to_csv(index=False).encode("utf-8")
