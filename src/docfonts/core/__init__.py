"""Core services for docfonts.

This module contains:

- Style resolution (run formatting flags to a font style variant)
- The known/unknown font family registry
- Image format name resolution

Style resolution and format parsing are pure; the registry holds the only
shared mutable state and guards it with locks.

Key functions:
- resolve_font_style: FormattingFlags to FontStyleVariant
- resolve_run_style: ``<w:rPr>`` element to FontStyleVariant
- parse_image_format: Format name to Pillow format identifier
- get_font_registry: Process-wide KnownFamilyRegistry

Key classes:
- KnownFamilyRegistry: Lazily enumerated known families + unknown-font sink
- UnknownFontSet: Thread-safe set of missing families
- ImageFormatParser: Case-insensitive format lookup table
"""

from docfonts.core.image_format import (
    ImageFormat,
    ImageFormatParser,
    parse_image_format,
    pillow_formats,
    supported_image_formats,
)
from docfonts.core.registry import (
    KnownFamilyRegistry,
    UnknownFontSet,
    get_font_registry,
    reset_font_registry,
)
from docfonts.core.style_resolver import resolve_font_style, resolve_run_style

__all__ = [
    "ImageFormat",
    "ImageFormatParser",
    "KnownFamilyRegistry",
    "UnknownFontSet",
    "get_font_registry",
    "parse_image_format",
    "pillow_formats",
    "reset_font_registry",
    "resolve_font_style",
    "resolve_run_style",
    "supported_image_formats",
]
