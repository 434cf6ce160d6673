"""Tests for run style resolution."""

import pytest

from docfonts.core.style_resolver import resolve_font_style, resolve_run_style
from docfonts.domain import FontStyleVariant, FormattingFlags
from docfonts.io.run_properties import W_NS, parse_run_properties


def rpr(children: str) -> str:
    return f'<w:rPr xmlns:w="{W_NS}">{children}</w:rPr>'


class TestResolveFontStyle:
    """Tests for resolve_font_style."""

    @pytest.mark.parametrize(
        ("bold", "italic", "expected"),
        [
            (True, True, FontStyleVariant.BOLD_ITALIC),
            (True, False, FontStyleVariant.BOLD),
            (False, True, FontStyleVariant.ITALIC),
            (False, False, FontStyleVariant.NORMAL),
        ],
    )
    def test_mapping(self, bold: bool, italic: bool, expected: FontStyleVariant) -> None:
        """Test the four bold/italic combinations."""
        assert resolve_font_style(FormattingFlags(bold=bold, italic=italic)) is expected

    def test_all_absent_is_normal(self) -> None:
        """Test a run without any flags is normal."""
        assert resolve_font_style(FormattingFlags()) is FontStyleVariant.NORMAL

    def test_bold_source_invariance(self) -> None:
        """Test w:b and w:bCs give the same result."""
        assert resolve_font_style(FormattingFlags(bold=True)) is resolve_font_style(
            FormattingFlags(bold_cs=True)
        )

    def test_italic_source_invariance(self) -> None:
        """Test w:i and w:iCs give the same result."""
        assert resolve_font_style(FormattingFlags(italic=True)) is resolve_font_style(
            FormattingFlags(italic_cs=True)
        )

    def test_complex_script_flags_combine(self) -> None:
        """Test complex-script bold with primary italic."""
        flags = FormattingFlags(bold=False, bold_cs=True, italic=True)
        assert resolve_font_style(flags) is FontStyleVariant.BOLD_ITALIC


class TestResolveRunStyle:
    """Tests for resolving directly from <w:rPr>."""

    def test_none_is_normal(self) -> None:
        """Test a run without properties is normal."""
        assert resolve_run_style(None) is FontStyleVariant.NORMAL

    def test_bold_italic_elements(self) -> None:
        """Test bare w:b and w:i elements."""
        element = parse_run_properties(rpr("<w:b/><w:i/>"))
        assert resolve_run_style(element) is FontStyleVariant.BOLD_ITALIC

    def test_bold_switched_off(self) -> None:
        """Test w:val="0" turns bold off."""
        element = parse_run_properties(rpr('<w:b w:val="0"/><w:iCs/>'))
        assert resolve_run_style(element) is FontStyleVariant.ITALIC

    def test_unrelated_properties(self) -> None:
        """Test properties other than emphasis do not matter."""
        element = parse_run_properties(rpr('<w:sz w:val="24"/><w:u w:val="single"/>'))
        assert resolve_run_style(element) is FontStyleVariant.NORMAL
