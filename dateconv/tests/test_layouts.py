"""
Unit tests for the layout table.

Tests cover:
- Every layout has a table entry
- Input and output-only families are disjoint and ordered
- Extraction patterns accept 1-2 digit day/month and 4 digit years only
- resolve_layout accepts enum members and display names
- Unknown layout names are rejected with the full supported list
"""

import pytest

from dateconv.core.errors import ErrorKind, UnsupportedTargetLayout
from dateconv.core.layouts import (
    LAYOUT_SPECS,
    FieldOrder,
    Layout,
    get_spec,
    input_layouts,
    output_only_layouts,
    resolve_layout,
    supported_layouts,
)


# =============================================================
# Test: Layout families
# =============================================================


class TestLayoutFamilies:
    """Tests for the split between input and output-only layouts."""

    def test_every_layout_has_a_spec(self):
        assert set(LAYOUT_SPECS) == set(Layout)

    def test_input_layouts_in_recognition_order(self):
        assert [layout.value for layout in input_layouts()] == [
            "DD.MM.YYYY",
            "DD/MM/YYYY",
            "DD-MM-YYYY",
            "YYYY.MM.DD",
            "YYYY/MM/DD",
            "YYYY-MM-DD",
        ]

    def test_output_only_layouts(self):
        assert output_only_layouts() == [Layout.DD_MM_YYYY_TIME, Layout.TIME_HH_MM]

    def test_families_are_disjoint_and_complete(self):
        inputs = set(input_layouts())
        outputs = set(output_only_layouts())
        assert inputs.isdisjoint(outputs)
        assert inputs | outputs == set(supported_layouts())
        assert len(supported_layouts()) == 8

    def test_output_only_layouts_carry_time(self):
        for layout in output_only_layouts():
            assert get_spec(layout).has_time
            assert get_spec(layout).pattern is None

    def test_input_layouts_carry_no_time(self):
        for layout in input_layouts():
            assert not get_spec(layout).has_time

    @pytest.mark.parametrize(
        "layout, separator, order",
        [
            (Layout.DD_MM_YYYY_DOT, ".", FieldOrder.DAY_FIRST),
            (Layout.DD_MM_YYYY_SLASH, "/", FieldOrder.DAY_FIRST),
            (Layout.DD_MM_YYYY_DASH, "-", FieldOrder.DAY_FIRST),
            (Layout.YYYY_MM_DD_DOT, ".", FieldOrder.YEAR_FIRST),
            (Layout.YYYY_MM_DD_SLASH, "/", FieldOrder.YEAR_FIRST),
            (Layout.YYYY_MM_DD_DASH, "-", FieldOrder.YEAR_FIRST),
        ],
    )
    def test_separator_and_order(self, layout, separator, order):
        spec = get_spec(layout)
        assert spec.separator == separator
        assert spec.order == order


# =============================================================
# Test: Extraction patterns
# =============================================================


class TestPatterns:
    """Tests for the anchored numeric patterns of input layouts."""

    @pytest.mark.parametrize("text", ["25.01.2024", "5.1.2024", "05.1.2024"])
    def test_day_first_accepts(self, text):
        assert get_spec(Layout.DD_MM_YYYY_DOT).pattern.fullmatch(text)

    @pytest.mark.parametrize(
        "text",
        ["125.01.2024", "25.01.24", "25.01.20245", "25/01/2024", " 25.01.2024", "25.01.2024x"],
    )
    def test_day_first_rejects(self, text):
        assert get_spec(Layout.DD_MM_YYYY_DOT).pattern.fullmatch(text) is None

    @pytest.mark.parametrize("text", ["2024-01-25", "2024-1-5"])
    def test_year_first_accepts(self, text):
        assert get_spec(Layout.YYYY_MM_DD_DASH).pattern.fullmatch(text)

    @pytest.mark.parametrize("text", ["24-01-25", "2024-001-25", "2024/01/25", "25-01-2024"])
    def test_year_first_rejects(self, text):
        assert get_spec(Layout.YYYY_MM_DD_DASH).pattern.fullmatch(text) is None

    def test_non_ascii_digits_rejected(self):
        arabic_indic = "٢٥.٠١.٢٠٢٤"
        assert get_spec(Layout.DD_MM_YYYY_DOT).pattern.fullmatch(arabic_indic) is None


# =============================================================
# Test: resolve_layout
# =============================================================


class TestResolveLayout:
    """Tests for turning names into Layout members."""

    def test_enum_member_passes_through(self):
        assert resolve_layout(Layout.YYYY_MM_DD_SLASH) is Layout.YYYY_MM_DD_SLASH

    def test_display_name(self):
        assert resolve_layout("DD/MM/YYYY hh:mm:ss") is Layout.DD_MM_YYYY_TIME

    def test_unknown_name(self):
        with pytest.raises(UnsupportedTargetLayout) as exc_info:
            resolve_layout("XX-YY-ZZ")

        error = exc_info.value
        assert error.kind == ErrorKind.UNSUPPORTED_TARGET_LAYOUT
        assert "XX-YY-ZZ" in error.message
        for layout in supported_layouts():
            assert layout.value in error.message

    def test_name_is_case_sensitive(self):
        with pytest.raises(UnsupportedTargetLayout):
            resolve_layout("dd.mm.yyyy")
