"""Tests for the health endpoint."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, patch

from kitchenops import __version__


@asynccontextmanager
async def _working_connection():
    yield AsyncMock()


@asynccontextmanager
async def _broken_connection():
    raise OSError("unable to open database file")
    yield


async def test_healthy(client):
    with patch(
        "kitchenops.infrastructure.storage.sqlite.get_connection", _working_connection
    ):
        response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database"] == "ok"
    assert data["version"] == __version__
    assert data["uptime_seconds"] >= 0


async def test_database_down_reports_unhealthy(client):
    with patch(
        "kitchenops.infrastructure.storage.sqlite.get_connection", _broken_connection
    ):
        response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "unhealthy"
    assert response.json()["database"] == "unavailable"


async def test_request_id_header_round_trips(client):
    with patch(
        "kitchenops.infrastructure.storage.sqlite.get_connection", _working_connection
    ):
        response = await client.get("/api/health", headers={"X-Request-ID": "req-42"})

    assert response.headers["X-Request-ID"] == "req-42"
    assert "X-Response-Time" in response.headers
