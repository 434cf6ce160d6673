"""Accessors for OOXML run properties.

WordprocessingML stores emphasis on a run as on/off child elements of
``<w:rPr>``. A bare element means "on"; ``w:val`` may switch it off.
"""

from lxml import etree

from docfonts.domain.style import FormattingFlags

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

_TRUE_VALUES = frozenset({"1", "true", "on"})


def w_tag(local_name: str) -> str:
    """Return the Clark-notation name of a WordprocessingML element."""
    return f"{{{W_NS}}}{local_name}"


W_VAL = w_tag("val")
W_B = w_tag("b")
W_B_CS = w_tag("bCs")
W_I = w_tag("i")
W_I_CS = w_tag("iCs")


def get_bool_prop(rpr: etree._Element | None, tag: str) -> bool | None:
    """Read an on/off property from run properties.

    Args:
        rpr: The ``<w:rPr>`` element, or None for a run without properties
        tag: Clark-notation tag of the property element

    Returns:
        None if the property is absent, True if present without ``w:val``,
        otherwise whether ``w:val`` spells an "on" value
    """
    if rpr is None:
        return None

    prop = rpr.find(tag)
    if prop is None:
        return None

    val = prop.get(W_VAL)
    if val is None:
        return True

    return val.strip().lower() in _TRUE_VALUES


def formatting_flags(rpr: etree._Element | None) -> FormattingFlags:
    """Build formatting flags from a ``<w:rPr>`` element."""
    return FormattingFlags(
        bold=get_bool_prop(rpr, W_B),
        bold_cs=get_bool_prop(rpr, W_B_CS),
        italic=get_bool_prop(rpr, W_I),
        italic_cs=get_bool_prop(rpr, W_I_CS),
    )


def parse_run_properties(xml: str | bytes) -> etree._Element:
    """Parse a ``<w:rPr>`` fragment.

    The fragment must declare the ``w`` namespace.
    """
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    return etree.fromstring(xml)
