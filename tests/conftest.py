"""
Pytest configuration for the Worldometer Stats API.

Provides fixtures for:
- A throwaway SQLite database per test (aiosqlite)
- Seeded snapshot, aggregate and country metadata rows
- An in-process HTTP client with get_db pointed at the test database
"""

import os
import tempfile
from datetime import datetime

# The module-level engine in app.database is built at import time; point it
# at a local file so importing the app never needs a running Postgres.
os.environ.setdefault(
    "DATABASE_URL",
    f"sqlite+aiosqlite:///{os.path.join(tempfile.gettempdir(), 'worldometer-tests.db')}",
)

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from main import app
from app.database import Base, get_db
from app.models.db.Worldometer import Worldometer
from app.models.db.WorldometerTotalSum import WorldometerTotalSum
from app.models.db.AppsCountry import AppsCountry
from app.api.worldometer_utils import clear_cache

OLD = datetime(2020, 3, 20, 4, 0, 12)
LATEST = datetime(2020, 3, 21, 4, 0, 12)
GLOBAL_LATEST = datetime(2020, 3, 21, 13, 0, 13)


def snapshot(country, total_cases, total_deaths, total_recovered, last_updated, **extra):
    return Worldometer(
        country=country,
        total_cases=total_cases,
        total_deaths=total_deaths,
        total_recovered=total_recovered,
        last_updated=last_updated,
        **extra,
    )


@pytest.fixture(autouse=True)
def empty_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'worldometer.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def seeded(session_factory):
    """
    Snapshot rows for a handful of countries.

    China has an older snapshot with a higher (bogus) count so the tests can
    tell whether the latest row really wins. Congo and Sint Maarten carry the
    biggest numbers but sit on the exclusion list.
    """
    async with session_factory() as session:
        session.add_all(
            [
                AppsCountry(country_code="CN", country_name="China", country_alias="China"),
                AppsCountry(country_code="IT", country_name="Italy", country_alias="Italy"),
                AppsCountry(country_code="US", country_name="United States", country_alias="USA"),
                AppsCountry(country_code="CG", country_name="Congo", country_alias="Congo"),
                AppsCountry(
                    country_code="SX", country_name="Sint Maarten", country_alias="Sint Maarten"
                ),
            ]
        )
        session.add_all(
            [
                snapshot("China", 90000, 9000, 1000, OLD),
                snapshot(
                    "China",
                    81008,
                    3255,
                    71740,
                    LATEST,
                    new_cases=41,
                    new_deaths=7,
                    active_cases=6013,
                    serious_critical_cases=1927,
                    total_cases_per_million_pop=56.9,
                ),
                snapshot("Italy", 41035, 3405, 4440, OLD),
                snapshot("Italy", 47021, 4032, 5129, LATEST, total_cases_per_million_pop=777.7),
                snapshot("USA", 19624, 260, 147, LATEST),
                snapshot("Congo", 100000, 10, 10, LATEST),
                snapshot("Sint Maarten", 200000, 20, 20, LATEST),
                snapshot("Atlantis", 0, 0, 0, LATEST),
            ]
        )
        session.add_all(
            [
                WorldometerTotalSum(
                    total_cases=245000,
                    total_deaths=10000,
                    total_recovered=88000,
                    last_updated=OLD,
                ),
                WorldometerTotalSum(
                    total_cases=276113,
                    total_deaths=11402,
                    total_recovered=91952,
                    new_cases=562,
                    new_deaths=23,
                    active_cases=172759,
                    total_cases_per_million_pop=35.4,
                    last_updated=GLOBAL_LATEST,
                ),
            ]
        )
        await session.commit()


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
