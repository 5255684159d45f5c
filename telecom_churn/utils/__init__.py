"""Utility functions."""

from .helpers import setup_logging, get_timestamp, format_percentage, sample_to_csv

__all__ = ["setup_logging", "get_timestamp", "format_percentage", "sample_to_csv"]
