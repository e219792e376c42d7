"""Postgres user store - upserts users keyed by their Clerk id."""

import asyncio
import logging
from typing import Optional

import asyncpg

from app.errors import UserSyncError

from .base import UserSync, UserSyncRequest

logger = logging.getLogger(__name__)

_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    external_id TEXT PRIMARY KEY,
    email       TEXT NOT NULL,
    name        TEXT NOT NULL DEFAULT '',
    image_url   TEXT,
    created_at  TIMESTAMPTZ DEFAULT NOW(),
    updated_at  TIMESTAMPTZ DEFAULT NOW()
);
"""

_UPSERT_SQL = """
INSERT INTO users (external_id, email, name, image_url)
VALUES ($1, $2, $3, $4)
ON CONFLICT (external_id) DO UPDATE SET
    email = EXCLUDED.email,
    name = EXCLUDED.name,
    image_url = EXCLUDED.image_url,
    updated_at = NOW()
"""


class PostgresUserSync(UserSync):
    """asyncpg-backed user table."""

    def __init__(self, database_url: str):
        self.database_url = database_url
        self._pool: Optional[asyncpg.Pool] = None
        self._pool_lock = asyncio.Lock()

    @property
    def store_name(self) -> str:
        return "postgres"

    def is_configured(self) -> bool:
        return bool(self.database_url)

    async def _get_pool(self) -> asyncpg.Pool:
        async with self._pool_lock:
            if self._pool is None:
                if not self.is_configured():
                    raise UserSyncError("Database not configured (DATABASE_URL)")
                dsn = self.database_url.replace("postgresql+asyncpg://", "postgresql://")
                pool = await asyncpg.create_pool(dsn=dsn, min_size=1, max_size=5)
                try:
                    async with pool.acquire() as conn:
                        await conn.execute(_SCHEMA_SQL)
                except BaseException:
                    await pool.close()
                    raise
                self._pool = pool
                logger.info("User store DB pool ready")
        return self._pool

    async def sync_user(self, request: UserSyncRequest) -> None:
        try:
            pool = await self._get_pool()
            async with pool.acquire() as conn:
                await conn.execute(
                    _UPSERT_SQL,
                    request.external_id,
                    request.email,
                    request.name,
                    request.image_url,
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise UserSyncError(f"User upsert failed: {e}") from e

        logger.info(f"Upserted user {request.external_id}")

    async def close(self) -> None:
        if self._pool is not None:
            await self._pool.close()
            self._pool = None
