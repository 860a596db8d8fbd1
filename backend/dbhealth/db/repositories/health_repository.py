"""
Health repository.
Probes database liveness through the shared connection pool.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from dbhealth.core.logging import get_logger
from dbhealth.schemas.health import ProbeResult

logger = get_logger(__name__)

LIVENESS_QUERY = text("SELECT 1")


class HealthCheckRepository:
    """Repository for database liveness checks."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def probe(self) -> ProbeResult:
        """
        Borrow a connection, run the liveness query and release it.

        The connection is returned to the pool before this coroutine
        completes, on success and on failure alike. Zero rows still counts
        as healthy; only the absence of an error matters.

        Returns:
            ProbeResult.up() or ProbeResult.down(reason)
        """
        try:
            async with self.engine.connect() as connection:
                result = await connection.execute(LIVENESS_QUERY)
                result.first()
        except Exception as e:
            reason = str(e) or type(e).__name__
            logger.warning(
                f"Database liveness probe failed: {reason}",
                extra={"exception_type": type(e).__name__},
            )
            return ProbeResult.down(reason)
        return ProbeResult.up()

    async def check_connection(self) -> bool:
        """
        Check database connectivity.

        Returns:
            True if the liveness query executed without error, False otherwise
        """
        result = await self.probe()
        return result.healthy
