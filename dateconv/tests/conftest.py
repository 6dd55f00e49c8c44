"""
Shared test fixtures for the date converter test suite.
"""

from datetime import datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from dateconv.api.routes import configure_routes, router
from dateconv.core.calendar_date import CalendarDate
from dateconv.core.layouts import Layout

# Fixed moment used wherever a test needs "now"
FIXED_NOW = datetime(2024, 1, 5, 9, 5, 3)


@pytest.fixture
def sample_date() -> CalendarDate:
    """A date with single-digit day, month, hour, minute and second."""
    return CalendarDate(year=2024, month=1, day=5, hour=9, minute=5, second=3)


@pytest.fixture
def make_client():
    """Build a TestClient around a fresh app with the conversion routes.

    Usage:
        client = make_client()
        client = make_client(default_target_layout=Layout.YYYY_MM_DD_DASH)
    """

    def _make(
        default_target_layout: Layout = Layout.DD_MM_YYYY_DOT,
        clock=lambda: FIXED_NOW,
    ) -> TestClient:
        app = FastAPI()
        configure_routes(default_target_layout=default_target_layout, clock=clock)
        app.include_router(router, prefix="/api")
        return TestClient(app)

    yield _make

    # Restore module defaults so route state does not leak between tests
    configure_routes()
