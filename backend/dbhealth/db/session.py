"""
Connection pool provisioning with async SQLAlchemy 2.0.
Builds the shared engine, optionally warms it, and disposes it at shutdown.
"""

from typing import List

from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool

from dbhealth.core.logging import get_logger
from dbhealth.schemas.pool import PoolConfig

logger = get_logger(__name__)


def create_pool(config: PoolConfig) -> AsyncEngine:
    """
    Create the async SQLAlchemy engine backing the connection pool.

    The engine connects lazily, so an unreachable database does not fail
    construction. Invalid configuration does, and is fatal at startup.

    Args:
        config: Pool configuration

    Returns:
        AsyncEngine owning the pool
    """
    url = config.sqlalchemy_url()

    connect_args = {}
    if url.get_backend_name() == "postgresql":
        # asyncpg bound on establishing a new physical connection
        connect_args["timeout"] = config.max_create_connection_time.total_seconds()

    engine = create_async_engine(
        url,
        echo=False,
        poolclass=AsyncAdaptedQueuePool,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.max_acquire_time.total_seconds(),
        pool_recycle=int(config.max_idle_time.total_seconds()) or -1,
        connect_args=connect_args,
    )

    logger.info(
        "Connection pool created",
        extra={
            "host": url.host,
            "database": url.database,
            "pool_size": config.pool_size,
            "max_overflow": config.max_overflow,
            "pool_timeout": config.max_acquire_time.total_seconds(),
        },
    )

    return engine


async def warm_pool(engine: AsyncEngine, count: int) -> int:
    """
    Open up to ``count`` connections and return them to the pool.

    Failures are logged and stop the warm-up; they never propagate.

    Returns:
        Number of connections that were opened
    """
    connections: List[AsyncConnection] = []
    try:
        for _ in range(count):
            connections.append(await engine.connect())
    except Exception as e:
        logger.warning(
            f"Pool warm-up stopped: {e}",
            extra={"opened": len(connections), "requested": count},
        )
    finally:
        for connection in connections:
            await connection.close()

    logger.info("Pool warm-up finished", extra={"opened": len(connections)})
    return len(connections)


async def dispose_pool(engine: AsyncEngine) -> None:
    """Close all pooled connections."""
    await engine.dispose()
    logger.info("Database connections closed")
