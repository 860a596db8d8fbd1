"""
Health check schemas.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class HealthStatus(str, Enum):
    """Overall service status."""
    UP = "UP"
    DOWN = "DOWN"


class DatabaseState(str, Enum):
    """Database connectivity as reported to clients."""
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    ERROR = "error"


class ProbeResult(BaseModel):
    """Outcome of a single liveness probe."""
    healthy: bool
    reason: Optional[str] = None

    class Config:
        frozen = True

    @classmethod
    def up(cls) -> "ProbeResult":
        return cls(healthy=True)

    @classmethod
    def down(cls, reason: str) -> "ProbeResult":
        return cls(healthy=False, reason=reason)


class HealthResponse(BaseModel):
    """Health check response schema."""
    status: HealthStatus
    database: DatabaseState
    error: Optional[str] = None
    timestamp: int
