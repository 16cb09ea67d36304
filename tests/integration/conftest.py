"""Fixtures for end-to-end tests on a real SQLite database."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from kitchenops.api.main import app
from kitchenops.config import reset_settings
from kitchenops.infrastructure.storage.sqlite import close_pool
from kitchenops.infrastructure.storage.sqlite import connection as conn_module
from kitchenops.infrastructure.storage.sqlite.migrations import run_migrations

ADMIN = {"X-User-Id": "admin-1", "X-User-Role": "Admin"}
STAFF = {"X-User-Id": "staff-1", "X-User-Role": "Staff"}


@pytest.fixture
async def live_client(tmp_path: Path, monkeypatch) -> AsyncGenerator[AsyncClient, None]:
    """App client backed by a freshly migrated database under tmp_path."""
    monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path))
    reset_settings()
    conn_module._pool = None
    await run_migrations(backup=False)

    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        await close_pool()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return dict(ADMIN)


@pytest.fixture
def staff_headers() -> dict[str, str]:
    return dict(STAFF)
