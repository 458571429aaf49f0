"""
Database configuration settings.

Manages PostgreSQL connection parameters for SQLAlchemy. A full
connection string supplied through DATABASE_URL takes precedence over
the individual POSTGRES_* fields.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from quest_api.configs.base import BaseSettings

_ASYNC_DRIVER = "postgresql+asyncpg://"


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "POSTGRES_URL"),
        description="Full connection string, overrides host/port/user/password/db",
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    password: str = Field(default="postgres", description="PostgreSQL password")
    db: str = Field(default="quests", description="PostgreSQL database name")

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    sslmode: str = Field(default="disable", description="SSL mode for RDS connections")

    @property
    def database_url(self) -> str:
        """
        Construct PostgreSQL connection URL.

        Returns:
            str: SQLAlchemy-compatible database URL
        """
        if self.url:
            return self.url
        return (
            f"postgresql://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}?sslmode={self.sslmode}"
        )

    @property
    def async_database_url(self) -> str:
        """
        Construct async PostgreSQL connection URL.

        Plain postgres:// and postgresql:// schemes from DATABASE_URL are
        rewritten to the asyncpg driver. URLs that already name a driver
        (e.g. sqlite+aiosqlite) are returned unchanged.

        Returns:
            str: SQLAlchemy async-compatible database URL (asyncpg uses 'ssl' param)
        """
        if self.url:
            for scheme in ("postgresql://", "postgres://"):
                if self.url.startswith(scheme):
                    return _ASYNC_DRIVER + self.url[len(scheme):]
            return self.url

        ssl_param = "ssl=require" if self.sslmode == "require" else ""
        return (
            f"{_ASYNC_DRIVER}{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.db}?{ssl_param}"
        )
