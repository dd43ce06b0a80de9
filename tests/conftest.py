"""Pytest configuration and shared fixtures.

Every test gets its own SQLite file under ``tmp_path`` with the schema
already created, plus an ``httpx`` client bound to the ASGI app.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from flight_registration_api.app.core.config import settings
from flight_registration_api.app.core.db import init_db
from flight_registration_api.app.main import app


APOLLO_X = {
    "flightName": "Apollo-X",
    "startingLatitude": 28.5,
    "startingLongitude": -80.6,
    "endingLatitude": 28.5,
    "endingLongitude": -80.6,
    "launchDateAndTime": "2025-01-01T00:00:00",
    "landingDateAndTime": "2025-01-01T00:10:00",
    "maxAltitude": 400000.0,
    "modelOfSpaceCraft": "Falcon",
}


@pytest.fixture
def database(tmp_path, monkeypatch) -> str:
    """Point the application at a fresh database file and create the schema."""
    db_path = str(tmp_path / "flight_registration_test.db")
    monkeypatch.setattr(settings, "database_url", db_path)
    init_db()
    return db_path


@pytest.fixture
def apollo_payload() -> dict:
    return dict(APOLLO_X)


@pytest_asyncio.fixture
async def client(database) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client for the app, backed by the per-test database."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
