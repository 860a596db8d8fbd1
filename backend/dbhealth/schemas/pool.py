"""
Connection pool configuration schema.
"""

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, Field, SecretStr, field_validator, model_validator
from sqlalchemy.engine import URL, make_url

from dbhealth.core.config import Settings
from dbhealth.core.exceptions import ConfigurationError

POSTGRES_DRIVER = "postgresql+asyncpg"

MAX_ACQUIRE_TIME = timedelta(seconds=30)
MAX_CREATE_CONNECTION_TIME = timedelta(seconds=30)


class PoolConfig(BaseModel):
    """
    Immutable settings for the shared database connection pool.

    ``initial_size`` connections are kept in the pool (at least one); the
    rest up to ``max_size`` are opened as overflow under load.
    """
    host: str = "localhost"
    port: int = Field(default=5432, ge=1, le=65535)
    database: str = "testdb"
    username: str = "postgres"
    password: SecretStr = SecretStr("postgres")
    initial_size: int = Field(default=10, ge=0)
    max_size: int = Field(default=20, ge=1)
    max_idle_time: timedelta = timedelta(minutes=30)
    max_acquire_time: timedelta = MAX_ACQUIRE_TIME
    max_create_connection_time: timedelta = MAX_CREATE_CONNECTION_TIME
    url: Optional[str] = None

    class Config:
        frozen = True

    @field_validator("max_idle_time", "max_acquire_time", "max_create_connection_time")
    @classmethod
    def check_non_negative(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("duration must not be negative")
        return value

    @model_validator(mode="after")
    def check_pool_bounds(self) -> "PoolConfig":
        if self.max_size < self.initial_size:
            raise ConfigurationError(
                "Pool max size must be greater than or equal to initial size",
                details={"initial_size": self.initial_size, "max_size": self.max_size},
            )
        return self

    @classmethod
    def from_settings(cls, settings: Settings) -> "PoolConfig":
        """Build pool configuration from application settings."""
        return cls(
            host=settings.DB_HOST,
            port=settings.DB_PORT,
            database=settings.DB_DATABASE,
            username=settings.DB_USERNAME,
            password=SecretStr(settings.DB_PASSWORD),
            initial_size=settings.DB_POOL_INITIAL_SIZE,
            max_size=settings.DB_POOL_MAX_SIZE,
            max_idle_time=timedelta(minutes=settings.DB_POOL_MAX_IDLE_TIME),
            url=settings.DATABASE_URL,
        )

    @property
    def pool_size(self) -> int:
        """Steady-state pool size; QueuePool treats 0 as unbounded."""
        return max(self.initial_size, 1)

    @property
    def max_overflow(self) -> int:
        """Connections allowed beyond the steady-state pool size."""
        return self.max_size - self.pool_size

    def sqlalchemy_url(self) -> URL:
        """Return the SQLAlchemy URL for this pool."""
        if self.url:
            return make_url(self.url)
        return URL.create(
            POSTGRES_DRIVER,
            username=self.username,
            password=self.password.get_secret_value(),
            host=self.host,
            port=self.port,
            database=self.database,
        )
