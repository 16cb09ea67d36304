"""Fixtures for API tests against the app with use cases mocked out."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from kitchenops.api.main import app

STAFF_HEADERS = {"X-User-Id": "staff-1", "X-User-Role": "Staff"}
ADMIN_HEADERS = {"X-User-Id": "admin-1", "X-User-Role": "Admin"}
VIEWER_HEADERS = {"X-User-Id": "viewer-1", "X-User-Role": "Viewer"}


@pytest.fixture
def overrides():
    """Register dependency overrides for one test."""
    yield app.dependency_overrides
    app.dependency_overrides.clear()


@pytest.fixture
async def client(overrides) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def staff_headers() -> dict[str, str]:
    return dict(STAFF_HEADERS)


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return dict(ADMIN_HEADERS)


@pytest.fixture
def viewer_headers() -> dict[str, str]:
    return dict(VIEWER_HEADERS)
