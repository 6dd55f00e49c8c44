"""
Date layout definitions.

Every textual layout the converter knows about is a member of the
`Layout` enum. `LAYOUT_SPECS` is the single lookup table describing
each layout: its separator, the order of its fields, whether it can
be parsed, and the pattern used to pull the numeric groups out of it.
The recognizer, parser and renderer all read this table.
"""

import re
from dataclasses import dataclass
from enum import Enum

from dateconv.core.errors import UnsupportedTargetLayout


# --- Enums ---


class Layout(str, Enum):
    """Supported date layouts, valued by their display name."""

    DD_MM_YYYY_DOT = "DD.MM.YYYY"
    DD_MM_YYYY_SLASH = "DD/MM/YYYY"
    DD_MM_YYYY_DASH = "DD-MM-YYYY"
    YYYY_MM_DD_DOT = "YYYY.MM.DD"
    YYYY_MM_DD_SLASH = "YYYY/MM/DD"
    YYYY_MM_DD_DASH = "YYYY-MM-DD"
    DD_MM_YYYY_TIME = "DD/MM/YYYY hh:mm:ss"
    TIME_HH_MM = "hh:mm"


class FieldOrder(str, Enum):
    """Order in which the date fields appear in a layout."""

    DAY_FIRST = "day_first"
    YEAR_FIRST = "year_first"
    TIME_ONLY = "time_only"


# --- Layout table ---


@dataclass(frozen=True)
class LayoutSpec:
    """Metadata for a single layout.

    `separator` joins the date fields and is None for time-only layouts.
    `time_fields` lists the CalendarDate attributes rendered after the
    date part, joined by ":".
    """

    separator: str | None
    order: FieldOrder
    parseable: bool
    time_fields: tuple[str, ...] = ()
    pattern: re.Pattern | None = None

    @property
    def has_time(self) -> bool:
        return bool(self.time_fields)


def _numeric_pattern(separator: str, order: FieldOrder) -> re.Pattern:
    """Build the anchored three-group pattern for an input layout."""
    sep = re.escape(separator)
    if order is FieldOrder.DAY_FIRST:
        body = rf"(\d{{1,2}}){sep}(\d{{1,2}}){sep}(\d{{4}})"
    else:
        body = rf"(\d{{4}}){sep}(\d{{1,2}}){sep}(\d{{1,2}})"
    # ASCII so that non-Latin digits are never treated as date digits
    return re.compile(body, re.ASCII)


def _input_spec(separator: str, order: FieldOrder) -> LayoutSpec:
    return LayoutSpec(
        separator=separator,
        order=order,
        parseable=True,
        pattern=_numeric_pattern(separator, order),
    )


# Insertion order is the recognition order for the parseable layouts.
LAYOUT_SPECS: dict[Layout, LayoutSpec] = {
    Layout.DD_MM_YYYY_DOT: _input_spec(".", FieldOrder.DAY_FIRST),
    Layout.DD_MM_YYYY_SLASH: _input_spec("/", FieldOrder.DAY_FIRST),
    Layout.DD_MM_YYYY_DASH: _input_spec("-", FieldOrder.DAY_FIRST),
    Layout.YYYY_MM_DD_DOT: _input_spec(".", FieldOrder.YEAR_FIRST),
    Layout.YYYY_MM_DD_SLASH: _input_spec("/", FieldOrder.YEAR_FIRST),
    Layout.YYYY_MM_DD_DASH: _input_spec("-", FieldOrder.YEAR_FIRST),
    Layout.DD_MM_YYYY_TIME: LayoutSpec(
        separator="/",
        order=FieldOrder.DAY_FIRST,
        parseable=False,
        time_fields=("hour", "minute", "second"),
    ),
    Layout.TIME_HH_MM: LayoutSpec(
        separator=None,
        order=FieldOrder.TIME_ONLY,
        parseable=False,
        time_fields=("hour", "minute"),
    ),
}


# --- Lookups ---


def input_layouts() -> list[Layout]:
    """Return the parseable layouts in recognition order."""
    return [layout for layout, spec in LAYOUT_SPECS.items() if spec.parseable]


def output_only_layouts() -> list[Layout]:
    """Return the layouts that can be rendered but never parsed."""
    return [layout for layout, spec in LAYOUT_SPECS.items() if not spec.parseable]


def supported_layouts() -> list[Layout]:
    """Return every layout the renderer accepts."""
    return list(LAYOUT_SPECS)


def describe_layouts(layouts: list[Layout]) -> str:
    """Join layout names for use in error messages."""
    return ", ".join(layout.value for layout in layouts)


def resolve_layout(value: Layout | str) -> Layout:
    """Turn a layout name into a `Layout`.

    Args:
        value: A `Layout` member or its display name (e.g. "DD.MM.YYYY").

    Returns:
        The matching `Layout`.

    Raises:
        UnsupportedTargetLayout: If the value names no known layout.
    """
    if isinstance(value, Layout):
        return value

    try:
        return Layout(value)
    except ValueError:
        raise UnsupportedTargetLayout(
            f"Invalid date format '{value}'. "
            f"Supported formats are: {describe_layouts(supported_layouts())}"
        ) from None


def get_spec(layout: Layout) -> LayoutSpec:
    """Return the table entry for a resolved layout."""
    return LAYOUT_SPECS[layout]
