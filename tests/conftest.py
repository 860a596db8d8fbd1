"""
Pytest configuration and fixtures.
Provides pooled test engines, a wired container, and an HTTP test client.
"""

from contextlib import asynccontextmanager
from datetime import timedelta

import pytest
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient

from dbhealth.db.session import create_pool, dispose_pool
from dbhealth.deps.di_container import Container
from dbhealth.main import create_app
from dbhealth.schemas.pool import PoolConfig


def sqlite_config(tmp_path, **overrides) -> PoolConfig:
    """Pool configuration backed by a file SQLite database."""
    values = {
        "url": f"sqlite+aiosqlite:///{tmp_path / 'health.db'}",
        "initial_size": 1,
        "max_size": 2,
        "max_acquire_time": timedelta(seconds=5),
    }
    values.update(overrides)
    return PoolConfig(**values)


@pytest.fixture(scope="function")
async def engine(tmp_path):
    """Reachable database: real pool over file SQLite."""
    test_engine = create_pool(sqlite_config(tmp_path))
    yield test_engine
    await dispose_pool(test_engine)


@pytest.fixture(scope="function")
async def unreachable_engine():
    """PostgreSQL pool pointed at a closed port."""
    config = PoolConfig(
        host="127.0.0.1",
        port=1,
        initial_size=1,
        max_size=2,
        max_acquire_time=timedelta(seconds=2),
        max_create_connection_time=timedelta(seconds=2),
    )
    test_engine = create_pool(config)
    yield test_engine
    await dispose_pool(test_engine)


@pytest.fixture(scope="function")
def container(engine):
    """Container wired to the reachable test engine."""
    test_container = Container()
    test_container.engine.override(providers.Object(engine))
    yield test_container
    test_container.reset_override()


@pytest.fixture(scope="function")
async def test_client(container):
    """
    Create a test HTTP client.
    """
    app = create_app(container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


class FakeResult:
    def __init__(self, rows):
        self.rows = rows

    def first(self):
        return self.rows[0] if self.rows else None


class FakeConnection:
    def __init__(self, error=None, rows=((1,),)):
        self.error = error
        self.rows = list(rows)
        self.statements = []

    async def execute(self, statement):
        self.statements.append(str(statement))
        if self.error is not None:
            raise self.error
        return FakeResult(self.rows)


class CountingEngine:
    """Engine stand-in that counts connection acquire and release."""

    def __init__(self, error=None, rows=((1,),), acquire_error=None):
        self.error = error
        self.rows = rows
        self.acquire_error = acquire_error
        self.acquired = 0
        self.released = 0
        self.connections = []

    @asynccontextmanager
    async def connect(self):
        if self.acquire_error is not None:
            raise self.acquire_error
        self.acquired += 1
        connection = FakeConnection(error=self.error, rows=self.rows)
        self.connections.append(connection)
        try:
            yield connection
        finally:
            self.released += 1
