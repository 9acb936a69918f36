import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from main import app
from app.database import get_db


@pytest.fixture
async def schemaless_client(tmp_path):
    """Client whose database has no tables, so every stats query fails."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
    await engine.dispose()


async def test_root(client) -> None:
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Worldometer Stats API is running"}


async def test_health_reports_database_up(client) -> None:
    response = await client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["components"] == {"api": "up", "database": "up"}
    assert body["database_latency_ms"] >= 0
    assert "X-Cache" not in response.headers
    assert body["latest_snapshot"] is None


async def test_health_reports_latest_snapshot(client, seeded) -> None:
    response = await client.get("/api/health")

    assert response.json()["latest_snapshot"] == "2020-03-21T04:00:12"


async def test_health_unavailable_without_schema(schemaless_client) -> None:
    response = await schemaless_client.get("/api/health")

    assert response.status_code == 503
    detail = response.json()["detail"]
    assert detail["status"] == "unhealthy"
    assert detail["components"]["database"] == "down"


@pytest.mark.parametrize("path", ["/country", "/top", "/global"])
async def test_database_errors_become_500(schemaless_client, path, caplog) -> None:
    response = await schemaless_client.get(f"/v3/stats/worldometer{path}")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    assert "database error" in caplog.text


async def test_database_errors_are_not_cached(schemaless_client) -> None:
    await schemaless_client.get("/v3/stats/worldometer/global")
    response = await schemaless_client.get("/v3/stats/worldometer/global")

    assert response.status_code == 500
    assert response.headers["X-Cache"] == "MISS"
