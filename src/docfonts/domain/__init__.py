"""Domain models for docfonts.

Key classes:
- FormattingFlags: Bold/italic properties of a document run
- FontStyleVariant: Normal, Bold, Italic or BoldItalic
- FontStyle: Weight/width/slant descriptor for a variant
"""

from docfonts.domain.style import FontSlant, FontStyle, FontStyleVariant, FormattingFlags

__all__: list[str] = [
    # Enums
    "FontSlant",
    "FontStyleVariant",
    # Core types
    "FontStyle",
    "FormattingFlags",
]
