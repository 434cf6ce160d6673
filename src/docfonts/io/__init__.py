"""I/O layer for docfonts.

This module talks to the outside world: font files on disk (via fonttools)
and OOXML run properties (via lxml).

Key responsibilities:
- Discover installed font files per platform
- Read family names from TTF/OTF fonts and TTC/OTC collections
- Read on/off emphasis properties from ``<w:rPr>`` elements

Key classes and functions:
- SystemFontSource: Enumerate installed family names
- read_family_names: Family names of one font file
- formatting_flags: FormattingFlags from a run-properties element
"""

from docfonts.io.font_source import (
    SystemFontSource,
    default_font_dirs,
    iter_font_files,
    read_family_names,
)
from docfonts.io.run_properties import (
    W_NS,
    formatting_flags,
    get_bool_prop,
    parse_run_properties,
    w_tag,
)

__all__ = [
    "W_NS",
    "SystemFontSource",
    "default_font_dirs",
    "formatting_flags",
    "get_bool_prop",
    "iter_font_files",
    "parse_run_properties",
    "read_family_names",
    "w_tag",
]
