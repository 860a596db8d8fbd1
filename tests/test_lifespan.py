"""
Application startup and shutdown tests.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from dependency_injector import providers

from dbhealth.core.config import Settings
from dbhealth.core.exceptions import ConfigurationError
from dbhealth.deps.di_container import Container
from dbhealth.main import create_app, lifespan
from dbhealth.schemas.pool import PoolConfig

from tests.conftest import sqlite_config


async def test_lifespan_builds_warms_and_disposes_pool(tmp_path):
    container = Container()
    container.settings.override(providers.Object(Settings(DB_POOL_PREWARM=True)))
    container.pool_config.override(providers.Object(sqlite_config(tmp_path, initial_size=2, max_size=3)))
    app = create_app(container)

    async with lifespan(app):
        engine = container.engine()
        assert engine.pool.checkedout() == 0
        assert engine.pool.checkedin() == 2

    assert engine.pool.checkedin() == 0
    assert container.engine() is not engine
    await container.engine().dispose()


async def test_invalid_pool_configuration_aborts_startup():
    container = Container()
    container.pool_config.override(
        providers.Singleton(PoolConfig, initial_size=5, max_size=1)
    )
    app = create_app(container)

    with pytest.raises(ConfigurationError):
        async with lifespan(app):
            pass


async def test_restart_probes_run_on_the_live_pool(tmp_path):
    container = Container()
    container.pool_config.override(providers.Object(sqlite_config(tmp_path)))
    app = create_app(container)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        async with lifespan(app):
            first_engine = container.engine()
            response = await client.get("/health")
            assert response.json()["status"] == "UP"

        async with lifespan(app):
            live_engine = container.engine()
            response = await client.get("/health")
            assert response.json()["status"] == "UP"
            assert live_engine is not first_engine
            assert container.health_repository().engine is live_engine
            assert container.health_service().repository.engine is live_engine

    # The first pool was disposed and never reused
    assert first_engine.pool.checkedin() == 0
    assert first_engine.pool.checkedout() == 0
