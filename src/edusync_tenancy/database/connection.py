"""
Database connection management using asyncpg.
"""
from typing import Optional, Any
from contextlib import asynccontextmanager
import asyncpg
from asyncpg import Pool, Record
import logging

from ..config.settings import TenancySettings, get_settings

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages the read pool for the schools data store."""

    def __init__(self, database_url: Optional[str] = None, application_name: str = "edusync-tenancy", **pool_config):
        """Initialize DatabaseManager.

        Args:
            database_url: Database URL
            application_name: Name reported to the server
            **pool_config: Additional pool configuration options
        """
        self.pool: Optional[Pool] = None
        self.dsn = database_url or ""
        if "+asyncpg" in self.dsn:
            self.dsn = self.dsn.replace("+asyncpg", "")
        self.application_name = application_name

        self.pool_config = {
            "min_size": 1,
            "max_size": 10,
            "max_inactive_connection_lifetime": 300,
            "command_timeout": 60,
            **pool_config
        }

    @classmethod
    def from_settings(cls, settings: Optional[TenancySettings] = None) -> "DatabaseManager":
        """Create a manager from application settings."""
        settings = settings or get_settings()
        return cls(
            settings.database_url,
            application_name=settings.app_name,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
            command_timeout=settings.db_command_timeout,
        )

    async def create_pool(self) -> Pool:
        """Create and return a connection pool."""
        if self.pool is None:
            logger.info(f"Creating database pool with size {self.pool_config['max_size']}")
            self.pool = await asyncpg.create_pool(
                self.dsn,
                server_settings={"application_name": self.application_name},
                **self.pool_config
            )
            logger.info("Database pool created successfully")
        return self.pool

    async def close_pool(self):
        """Close the connection pool."""
        if self.pool:
            await self.pool.close()
            self.pool = None
            logger.info("Database pool closed")

    @asynccontextmanager
    async def acquire(self):
        """Acquire a connection from the pool."""
        if not self.pool:
            await self.create_pool()

        async with self.pool.acquire() as connection:
            yield connection

    async def fetchrow(self, query: str, *args, timeout: float = None) -> Optional[Record]:
        """Fetch a single row."""
        async with self.acquire() as connection:
            return await connection.fetchrow(query, *args, timeout=timeout)

    async def fetchval(self, query: str, *args, column: int = 0, timeout: float = None) -> Any:
        """Fetch a single value."""
        async with self.acquire() as connection:
            return await connection.fetchval(query, *args, column=column, timeout=timeout)

    async def health_check(self) -> bool:
        """Check database health."""
        try:
            return await self.fetchval("SELECT 1") == 1
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False
