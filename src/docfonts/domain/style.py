"""Font style domain models.

This module defines the formatting flags read from a document run and the
closed set of font style variants they resolve to.
"""

from dataclasses import dataclass
from enum import Enum


class FontSlant(str, Enum):
    """Slant of a font face."""

    UPRIGHT = "upright"
    ITALIC = "italic"


@dataclass(frozen=True)
class FontStyle:
    """Style descriptor handed to the rasterizer.

    Attributes:
        weight: OpenType weight class (100-900)
        width: OpenType width class (1-9, 5 is normal)
        slant: Upright or italic
    """

    weight: int
    width: int
    slant: FontSlant

    @property
    def is_bold(self) -> bool:
        return self.weight >= 600

    @property
    def is_italic(self) -> bool:
        return self.slant is FontSlant.ITALIC


NORMAL_WEIGHT = 400
BOLD_WEIGHT = 700
NORMAL_WIDTH = 5


class FontStyleVariant(str, Enum):
    """The four style variants a run can resolve to."""

    NORMAL = "normal"
    BOLD = "bold"
    ITALIC = "italic"
    BOLD_ITALIC = "bold_italic"

    @property
    def font_style(self) -> FontStyle:
        """Return the style descriptor for this variant."""
        bold = self in (FontStyleVariant.BOLD, FontStyleVariant.BOLD_ITALIC)
        italic = self in (FontStyleVariant.ITALIC, FontStyleVariant.BOLD_ITALIC)
        return FontStyle(
            weight=BOLD_WEIGHT if bold else NORMAL_WEIGHT,
            width=NORMAL_WIDTH,
            slant=FontSlant.ITALIC if italic else FontSlant.UPRIGHT,
        )


@dataclass(frozen=True)
class FormattingFlags:
    """Read-only view of the emphasis properties of a run.

    Each field is tri-state: True, False, or None when the property is
    absent from the run properties.

    Attributes:
        bold: Bold flag (w:b)
        bold_cs: Complex-script bold flag (w:bCs)
        italic: Italic flag (w:i)
        italic_cs: Complex-script italic flag (w:iCs)
    """

    bold: bool | None = None
    bold_cs: bool | None = None
    italic: bool | None = None
    italic_cs: bool | None = None

    @property
    def is_bold(self) -> bool:
        """True if either bold flag is set."""
        return self.bold is True or self.bold_cs is True

    @property
    def is_italic(self) -> bool:
        """True if either italic flag is set."""
        return self.italic is True or self.italic_cs is True
