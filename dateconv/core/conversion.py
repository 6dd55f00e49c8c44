"""
Date string recognition, parsing and rendering.

The conversion pipeline is:

    text -> recognize() -> parse() -> render() -> text

`convert()` runs the whole pipeline. Each public function is a
component boundary: a `DateConversionError` raised inside it is
annotated with the component name before it propagates, so callers
get a breadcrumb of every stage that saw the failure.

Everything here is pure: no I/O and no shared state. The only
function that looks at the clock is `render_now()`.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime

from dateconv.core.calendar_date import CalendarDate, is_calendar_date
from dateconv.core.errors import (
    DateConversionError,
    InvalidCalendarDate,
    InvalidLayoutForParsing,
    UnrecognizedFormat,
)
from dateconv.core.layouts import (
    FieldOrder,
    Layout,
    describe_layouts,
    get_spec,
    input_layouts,
    resolve_layout,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a successful `convert_date` call."""

    result: str
    source_layout: Layout
    target_layout: Layout


# -----------------------------------------------------------------
# Recognizer
# -----------------------------------------------------------------


def recognize(text: str) -> Layout | None:
    """Find the input layout a date string is written in.

    Layouts are tried in recognition order. A layout matches only if
    the text has its shape AND the extracted fields form a real date,
    so "31.02.2023" matches nothing.

    Args:
        text: The raw date string.

    Returns:
        The first matching layout, or None if no layout matches.
    """
    if not isinstance(text, str):
        return None

    for layout in input_layouts():
        if is_valid_date_string(text, layout):
            return layout

    logger.debug("'%s' matches no input layout", text)
    return None


def is_valid_date_string(text: str, layout: Layout | str) -> bool:
    """Check whether `text` is a real date written in `layout`.

    Raises:
        InvalidLayoutForParsing: If `layout` is output-only.
        UnsupportedTargetLayout: If `layout` is unknown.
    """
    try:
        resolved = _require_input_layout(layout)
    except DateConversionError as exc:
        raise exc.annotate("validate")

    fields = _extract_fields(text, resolved) if isinstance(text, str) else None
    if fields is None:
        return False

    year, month, day = fields
    return is_calendar_date(year, month - 1, day)


# -----------------------------------------------------------------
# Parser
# -----------------------------------------------------------------


def parse(text: str, layout: Layout | str) -> CalendarDate:
    """Parse a date string written in a known input layout.

    Invalid combinations such as 30 February are rejected outright;
    they are never rolled over into the following month. The returned
    date has zero time fields.

    Args:
        text: The date string.
        layout: One of the six input layouts.

    Returns:
        The parsed CalendarDate.

    Raises:
        InvalidLayoutForParsing: If `layout` is output-only.
        UnsupportedTargetLayout: If `layout` is unknown.
        InvalidCalendarDate: If the text does not have the layout's shape
            or its fields are not a real date.
    """
    try:
        resolved = _require_input_layout(layout)

        fields = _extract_fields(text, resolved) if isinstance(text, str) else None
        if fields is None:
            raise InvalidCalendarDate(f"'{text}' is not in {resolved.value} format")

        year, month, day = fields
        month_index = month - 1
        if not is_calendar_date(year, month_index, day):
            raise InvalidCalendarDate("Invalid date")

        return CalendarDate(year=year, month=month_index + 1, day=day)
    except DateConversionError as exc:
        raise exc.annotate("parse")


# -----------------------------------------------------------------
# Renderer
# -----------------------------------------------------------------


def render(value: CalendarDate | date | datetime, layout: Layout | str) -> str:
    """Format a date in the given layout.

    Day, month, hour, minute and second are zero-padded to two digits;
    the year is written as-is.

    Args:
        value: A CalendarDate, or a `date`/`datetime` to convert first.
        layout: Any of the eight supported layouts.

    Raises:
        UnsupportedTargetLayout: If `layout` is not supported. The message
            lists every supported layout.
    """
    try:
        resolved = resolve_layout(layout)
    except DateConversionError as exc:
        raise exc.annotate("render")

    if not isinstance(value, CalendarDate):
        value = CalendarDate.from_datetime(value)

    spec = get_spec(resolved)
    dd = f"{value.day:02d}"
    mm = f"{value.month:02d}"
    yyyy = str(value.year)

    parts: list[str] = []
    if spec.order is FieldOrder.DAY_FIRST:
        parts.append(spec.separator.join((dd, mm, yyyy)))
    elif spec.order is FieldOrder.YEAR_FIRST:
        parts.append(spec.separator.join((yyyy, mm, dd)))

    if spec.has_time:
        parts.append(":".join(f"{getattr(value, name):02d}" for name in spec.time_fields))

    return " ".join(parts)


def render_now(layout: Layout | str, now: datetime | None = None) -> str:
    """Render the current moment in the given layout.

    Args:
        layout: Any of the eight supported layouts.
        now: Moment to render instead of the local wall clock.
    """
    moment = now if now is not None else datetime.now()
    try:
        return render(moment, layout)
    except DateConversionError as exc:
        raise exc.annotate("render_now")


# -----------------------------------------------------------------
# Pipeline
# -----------------------------------------------------------------


def convert_date(raw_date_text: str, target_layout: Layout | str) -> ConversionResult:
    """Recognize, parse and re-render a date string.

    The text is recognized and parsed before the target layout is
    looked at, so an unknown target is reported by the renderer.

    Raises:
        UnrecognizedFormat: If the text matches no input layout.
        InvalidCalendarDate: If the recognized text is not a real date.
        UnsupportedTargetLayout: If `target_layout` is unknown.
    """
    try:
        source = recognize(raw_date_text)
        if source is None:
            raise UnrecognizedFormat(
                "Invalid date format. "
                f"Supported formats are: {describe_layouts(input_layouts())}"
            )

        parsed = parse(raw_date_text, source)
        result = render(parsed, target_layout)
    except DateConversionError as exc:
        raise exc.annotate("convert")

    target = resolve_layout(target_layout)
    logger.debug("Converted '%s' (%s) to '%s' (%s)", raw_date_text, source.value, result, target.value)
    return ConversionResult(result=result, source_layout=source, target_layout=target)


def convert(raw_date_text: str, target_layout: Layout | str) -> str:
    """Convert a date string to `target_layout` and return the formatted text."""
    return convert_date(raw_date_text, target_layout).result


# --- Private helpers ---


def _require_input_layout(layout: Layout | str) -> Layout:
    """Resolve a layout and make sure it can be parsed."""
    resolved = resolve_layout(layout)
    if not get_spec(resolved).parseable:
        raise InvalidLayoutForParsing(
            f"{resolved.value} cannot be parsed. "
            f"Supported formats are: {describe_layouts(input_layouts())}"
        )
    return resolved


def _extract_fields(text: str, layout: Layout) -> tuple[int, int, int] | None:
    """Pull (year, month, day) out of `text` using the layout's pattern.

    Returns None if the text does not have the layout's shape.
    """
    spec = get_spec(layout)
    match = spec.pattern.fullmatch(text)
    if match is None:
        return None

    first, second, third = (int(group) for group in match.groups())
    if spec.order is FieldOrder.DAY_FIRST:
        return third, second, first
    return first, second, third
