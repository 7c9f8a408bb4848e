"""Database connection management"""

from typing import Optional
import asyncpg
from contextlib import asynccontextmanager

from core.exceptions import DataSourceError
from config import settings


class DatabaseManager:
    """PostgreSQL (Supabase) connection manager"""

    def __init__(self, connection_string: Optional[str] = None):
        self.connection_string = connection_string or settings.DATABASE_URL
        self.pool: Optional[asyncpg.Pool] = None

        if not self.connection_string:
            raise DataSourceError("No database connection string provided")

        # Supabase only accepts SSL connections
        if "supabase" in self.connection_string and "sslmode" not in self.connection_string:
            separator = "&" if "?" in self.connection_string else "?"
            self.connection_string = f"{self.connection_string}{separator}sslmode=require"

    async def create_pool(
        self,
        min_size: Optional[int] = None,
        max_size: Optional[int] = None,
    ):
        """
        Create connection pool

        Args:
            min_size: Minimum pool size (defaults to DB_POOL_MIN_SIZE)
            max_size: Maximum pool size (defaults to DB_POOL_MAX_SIZE)
        """
        try:
            self.pool = await asyncpg.create_pool(
                self.connection_string,
                min_size=min_size or settings.DB_POOL_MIN_SIZE,
                max_size=max_size or settings.DB_POOL_MAX_SIZE,
                command_timeout=settings.DB_COMMAND_TIMEOUT,
            )
        except (OSError, asyncpg.PostgresError) as e:
            raise DataSourceError(f"Failed to create connection pool: {e}") from e

    async def close(self):
        """Close the pool if one was created"""
        if self.pool is not None:
            await self.pool.close()
            self.pool = None

    @asynccontextmanager
    async def get_connection(self):
        """Get async database connection, from the pool when available"""
        if self.pool is not None:
            async with self.pool.acquire() as conn:
                yield conn
            return
        try:
            conn = await asyncpg.connect(self.connection_string)
        except (OSError, asyncpg.PostgresError) as e:
            raise DataSourceError(f"Database connection failed: {e}") from e
        try:
            yield conn
        finally:
            await conn.close()

    async def execute(self, query: str, *args) -> list:
        """Execute query and return results"""
        async with self.get_connection() as conn:
            try:
                return await conn.fetch(query, *args)
            except asyncpg.PostgresError as e:
                raise DataSourceError(f"Query failed: {e}") from e

    async def test_connection(self) -> bool:
        """Test database connection"""
        try:
            async with self.get_connection() as conn:
                await conn.fetchval("SELECT 1")
            return True
        except (DataSourceError, OSError, asyncpg.PostgresError):
            return False
