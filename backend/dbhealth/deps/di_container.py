"""
Dependency injection container using dependency-injector.
Wires the connection pool, repository, service, and controller.
"""

from dependency_injector import containers, providers
from fastapi import Request

from dbhealth.controllers.health_controller import HealthController
from dbhealth.core.config import settings as app_settings
from dbhealth.db.repositories.health_repository import HealthCheckRepository
from dbhealth.db.session import create_pool
from dbhealth.schemas.pool import PoolConfig
from dbhealth.services.health_service import HealthCheckService


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    settings = providers.Object(app_settings)

    pool_config = providers.Singleton(
        PoolConfig.from_settings,
        settings,
    )

    # Shared connection pool, disposed by the application lifespan
    engine = providers.Singleton(
        create_pool,
        config=pool_config,
    )

    # Repositories
    health_repository = providers.Singleton(
        HealthCheckRepository,
        engine=engine,
    )

    # Services
    health_service = providers.Singleton(
        HealthCheckService,
        repository=health_repository,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


def get_container(request: Request) -> Container:
    """Dependency returning the container attached to the running app."""
    return request.app.state.container
