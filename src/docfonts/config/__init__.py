"""Configuration management for docfonts.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontDiscoveryConfig: Where and how installed fonts are enumerated
- LoggingConfig: Logging settings
- DocFontsSettings: Main application settings
"""

from docfonts.config.settings import (
    DEFAULT_FONT_EXTENSIONS,
    DocFontsSettings,
    FontDiscoveryConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_FONT_EXTENSIONS",
    "DocFontsSettings",
    "FontDiscoveryConfig",
    "LoggingConfig",
    "get_default_settings",
]
