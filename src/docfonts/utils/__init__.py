"""Utility functions for docfonts.

This module provides:

- Logging setup and configuration
- Font scan statistics
"""

from docfonts.utils.logging import FontScanStats, configure_logging

__all__ = [
    "FontScanStats",
    "configure_logging",
]
