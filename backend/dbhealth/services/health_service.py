"""
Health service.
Provides health check functionality.
"""

from dbhealth.db.repositories.health_repository import HealthCheckRepository
from dbhealth.services.base_service import BaseService


class HealthCheckService(BaseService):
    """Service for health check operations."""

    def __init__(self, repository: HealthCheckRepository):
        self.repository = repository

    async def check_database_health(self) -> bool:
        """Return True if the database answered the liveness probe."""
        return await self.repository.check_connection()
