"""
Conversion error types.

Every failure raised by the converter is a `DateConversionError` with a
kind from `ErrorKind` and a provenance chain. Each component that sees
the error on its way up appends its own name with `annotate()` and
re-raises it unchanged in kind. The flat, user-facing message is only
built at the presentation boundary via `display_message()`.
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Categories of conversion failure."""

    UNRECOGNIZED_FORMAT = "UNRECOGNIZED_FORMAT"
    INVALID_CALENDAR_DATE = "INVALID_CALENDAR_DATE"
    UNSUPPORTED_TARGET_LAYOUT = "UNSUPPORTED_TARGET_LAYOUT"
    INVALID_LAYOUT_FOR_PARSING = "INVALID_LAYOUT_FOR_PARSING"


class DateConversionError(Exception):
    """Base error for every conversion failure.

    Subclasses fix `kind` as a class attribute; the base class has none
    and must be given one explicitly.

    Args:
        message: Short human-readable description.
        component: Name of the component that detected the failure.
        kind: The failure category.

    Raises:
        TypeError: If no kind is given and the class defines none.
    """

    kind: ErrorKind

    def __init__(self, message: str, component: str | None = None, kind: ErrorKind | None = None):
        if kind is not None:
            self.kind = kind
        elif not hasattr(self, "kind"):
            raise TypeError(f"{type(self).__name__} requires an error kind")
        self.message = message
        self.provenance: list[str] = [component] if component else []
        super().__init__(message)

    def annotate(self, component: str) -> "DateConversionError":
        """Record that `component` observed this error and return it for re-raising."""
        if not self.provenance or self.provenance[-1] != component:
            self.provenance.append(component)
        return self

    def display_message(self) -> str:
        """Render the breadcrumb message, outermost component first."""
        prefix = "".join(f"Error {name}: " for name in reversed(self.provenance))
        return f"{prefix}{self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.display_message(),
            "provenance": list(self.provenance),
        }

    def __str__(self) -> str:
        return self.display_message()


class UnrecognizedFormat(DateConversionError):
    """No input layout matched the supplied text."""

    kind = ErrorKind.UNRECOGNIZED_FORMAT


class InvalidCalendarDate(DateConversionError):
    """The day/month/year fields do not form a real date."""

    kind = ErrorKind.INVALID_CALENDAR_DATE


class UnsupportedTargetLayout(DateConversionError):
    """The requested layout is not one the renderer knows."""

    kind = ErrorKind.UNSUPPORTED_TARGET_LAYOUT


class InvalidLayoutForParsing(DateConversionError):
    """An output-only layout was used to parse text."""

    kind = ErrorKind.INVALID_LAYOUT_FOR_PARSING
