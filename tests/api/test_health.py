"""Health, readiness and root endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from codelists.core.config import get_settings
from codelists.infrastructure.persistence.database import dispose_engine
from codelists.main import app


async def test_health_returns_ok_with_version(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["version"] == get_settings().app_version


async def test_root_describes_the_service(client: AsyncClient) -> None:
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["api"] == "/api/v1"


async def test_ready_when_database_answers(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health/ready")

    assert response.status_code == 200


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


async def test_not_ready_without_database(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "")
    get_settings.cache_clear()
    await dispose_engine()
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            ready = await ac.get("/api/v1/health/ready")
            listing = await ac.get("/api/v1/voltage-levels")
    finally:
        get_settings.cache_clear()

    assert ready.status_code == 503
    assert listing.status_code == 503
    assert listing.json()["error"] == "SERVICE_UNAVAILABLE"
