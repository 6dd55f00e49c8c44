"""
FastAPI routes for the date converter.

Endpoints:
- POST /convert  — convert a date string into a target layout
- GET  /layouts  — list input and output-only layouts
- GET  /now      — render the current moment in a layout
- GET  /health   — health check
"""

import logging
from datetime import datetime
from typing import Callable

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, field_validator

from dateconv.core.conversion import convert_date, render_now
from dateconv.core.errors import DateConversionError
from dateconv.core.layouts import Layout, input_layouts, output_only_layouts

logger = logging.getLogger(__name__)

router = APIRouter()

# These will be injected by the app factory
_default_target_layout: Layout = Layout.DD_MM_YYYY_DOT
_clock: Callable[[], datetime] = datetime.now


def configure_routes(
    default_target_layout: Layout = Layout.DD_MM_YYYY_DOT,
    clock: Callable[[], datetime] = datetime.now,
):
    """Inject the default target layout and the clock into the routes module.

    Called by the app factory during startup.
    """
    global _default_target_layout, _clock
    _default_target_layout = default_target_layout
    _clock = clock


# --- Request / Response Models ---


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    date_text: str
    target_layout: Layout | None = None

    @field_validator("target_layout")
    @classmethod
    def validate_target_is_input_layout(cls, value: Layout | None) -> Layout | None:
        """The form only offers layouts that can also be parsed."""
        if value is not None and value not in input_layouts():
            allowed = ", ".join(layout.value for layout in input_layouts())
            raise ValueError(f"target_layout must be one of: {allowed}")
        return value


class ConvertResponse(BaseModel):
    """Response body for the /convert endpoint."""

    result: str
    source_layout: Layout
    target_layout: Layout


class LayoutsResponse(BaseModel):
    """Response body for the /layouts endpoint."""

    input_layouts: list[Layout]
    output_only_layouts: list[Layout]


# --- Endpoints ---


@router.post("/convert", response_model=ConvertResponse)
async def convert(request: ConvertRequest):
    """Convert a free-text date into the selected layout.

    The source layout is detected automatically. Conversion failures
    return 422 with the error kind, the display message and the chain
    of components that reported it.
    """
    date_text = request.date_text.strip()
    if not date_text:
        raise HTTPException(status_code=400, detail="date_text cannot be empty")

    target = request.target_layout or _default_target_layout

    try:
        conversion = convert_date(date_text, target)
    except DateConversionError as e:
        logger.info("Conversion of '%s' failed: %s", date_text, e.display_message())
        raise HTTPException(status_code=422, detail=e.to_dict())
    except Exception as e:
        logger.error("Error converting '%s': %s", date_text, e, exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error converting date: {str(e)}",
        )

    return ConvertResponse(
        result=conversion.result,
        source_layout=conversion.source_layout,
        target_layout=conversion.target_layout,
    )


@router.get("/layouts", response_model=LayoutsResponse)
async def list_layouts():
    """List the layouts the form can offer, in recognition order."""
    return LayoutsResponse(
        input_layouts=input_layouts(),
        output_only_layouts=output_only_layouts(),
    )


@router.get("/now")
async def now(layout: str = Layout.TIME_HH_MM.value):
    """Render the current local moment in any supported layout."""
    try:
        rendered = render_now(layout, now=_clock())
    except DateConversionError as e:
        logger.info("Rendering current moment failed: %s", e.display_message())
        raise HTTPException(status_code=422, detail=e.to_dict())
    except Exception as e:
        logger.error("Error rendering current moment: %s", e, exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Error rendering current moment: {str(e)}",
        )

    return {"layout": layout, "result": rendered}


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
