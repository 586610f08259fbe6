"""Tests for the asyncpg database manager."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from edusync_tenancy.config import TenancySettings
from edusync_tenancy.database import DatabaseManager


def make_pool(connection):
    acquire_ctx = MagicMock()
    acquire_ctx.__aenter__ = AsyncMock(return_value=connection)
    acquire_ctx.__aexit__ = AsyncMock(return_value=False)
    pool = MagicMock()
    pool.acquire.return_value = acquire_ctx
    pool.close = AsyncMock()
    return pool


class TestDatabaseManager:

    def test_from_settings(self):
        settings = TenancySettings(
            _env_file=None,
            database_url="postgresql+asyncpg://u:p@db:5432/edusync",
            db_pool_max_size=4,
        )

        manager = DatabaseManager.from_settings(settings)

        assert manager.dsn == "postgresql://u:p@db:5432/edusync"
        assert manager.pool_config["max_size"] == 4
        assert manager.application_name == "EduSync"

    @pytest.mark.asyncio
    async def test_fetchrow_creates_pool_lazily(self):
        connection = MagicMock()
        connection.fetchrow = AsyncMock(return_value={"id": 1})
        pool = make_pool(connection)
        manager = DatabaseManager("postgresql://localhost/edusync")

        with patch("edusync_tenancy.database.connection.asyncpg.create_pool", AsyncMock(return_value=pool)) as create:
            row = await manager.fetchrow("SELECT 1 AS id")
            await manager.fetchrow("SELECT 1 AS id")

        assert row == {"id": 1}
        create.assert_awaited_once()
        assert create.await_args.kwargs["server_settings"] == {"application_name": "edusync-tenancy"}

    @pytest.mark.asyncio
    async def test_health_check(self):
        connection = MagicMock()
        connection.fetchval = AsyncMock(return_value=1)
        manager = DatabaseManager("postgresql://localhost/edusync")
        manager.pool = make_pool(connection)

        assert await manager.health_check() is True

    @pytest.mark.asyncio
    async def test_health_check_failure(self):
        manager = DatabaseManager("postgresql://localhost/edusync")

        with patch("edusync_tenancy.database.connection.asyncpg.create_pool",
                   AsyncMock(side_effect=OSError("connection refused"))):
            assert await manager.health_check() is False

    @pytest.mark.asyncio
    async def test_close_pool(self):
        pool = make_pool(MagicMock())
        manager = DatabaseManager("postgresql://localhost/edusync")
        manager.pool = pool

        await manager.close_pool()

        pool.close.assert_awaited_once()
        assert manager.pool is None
