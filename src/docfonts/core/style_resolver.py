"""Resolution of run formatting into a font style variant."""

from lxml import etree

from docfonts.domain.style import FontStyleVariant, FormattingFlags
from docfonts.io.run_properties import formatting_flags


def resolve_font_style(flags: FormattingFlags) -> FontStyleVariant:
    """Map formatting flags to one of the four style variants.

    A run is bold if either its primary or complex-script bold flag is set,
    and italic likewise. Absent flags count as unset.

    Args:
        flags: Formatting flags of the run

    Returns:
        The style variant for the run
    """
    if flags.is_bold:
        return FontStyleVariant.BOLD_ITALIC if flags.is_italic else FontStyleVariant.BOLD
    if flags.is_italic:
        return FontStyleVariant.ITALIC
    return FontStyleVariant.NORMAL


def resolve_run_style(rpr: etree._Element | None) -> FontStyleVariant:
    """Resolve the style variant of a ``<w:rPr>`` element (None means no properties)."""
    return resolve_font_style(formatting_flags(rpr))
