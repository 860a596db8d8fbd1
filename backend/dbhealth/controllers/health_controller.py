"""
Health controller.
Maps the database health check to a status document.
"""

import time

from dbhealth.controllers.base_controller import BaseController
from dbhealth.core.logging import get_logger
from dbhealth.schemas.health import DatabaseState, HealthResponse, HealthStatus
from dbhealth.services.health_service import HealthCheckService

logger = get_logger(__name__)


def current_millis() -> int:
    """Wall-clock time in epoch milliseconds."""
    # Non-decreasing only while the system clock is not stepped back
    return int(time.time() * 1000)


class HealthController(BaseController):
    """Controller for health check operations."""

    def __init__(self, health_service: HealthCheckService):
        self.health_service = health_service

    async def get_health(self) -> HealthResponse:
        """
        Get database health status.

        Never raises: an error escaping the service is reported as
        ``database="error"`` with its message.

        Returns:
            HealthResponse with status, database state and timestamp
        """
        try:
            healthy = await self.health_service.check_database_health()
        except Exception as e:
            logger.exception(f"Health check failed: {e}")
            return HealthResponse(
                status=HealthStatus.DOWN,
                database=DatabaseState.ERROR,
                error=str(e) or type(e).__name__,
                timestamp=current_millis(),
            )

        if healthy:
            return HealthResponse(
                status=HealthStatus.UP,
                database=DatabaseState.CONNECTED,
                timestamp=current_millis(),
            )
        return HealthResponse(
            status=HealthStatus.DOWN,
            database=DatabaseState.DISCONNECTED,
            timestamp=current_millis(),
        )
