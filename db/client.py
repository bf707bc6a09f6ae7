import json
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional

import asyncpg
import aiosql

from db.config import DatabaseConfig

SCHEMA = "parto_static"

# Load queries from SQL files
queries = aiosql.from_path(
    Path(__file__).parent / "queries",
    "asyncpg",
)

# Global connection pool
_pool = None


async def _init_connection(conn):
    """Initialize each connection with search_path and JSONB codecs."""
    await conn.execute(f"CREATE SCHEMA IF NOT EXISTS {SCHEMA}")
    await conn.execute(f"SET search_path TO {SCHEMA}, public")
    await conn.set_type_codec(
        "jsonb",
        encoder=json.dumps,
        decoder=json.loads,
        schema="pg_catalog",
    )


async def init_db(config: Optional[DatabaseConfig] = None):
    """Initialize connection pool once at startup."""
    global _pool
    if _pool is None:
        config = config or DatabaseConfig.from_env()
        _pool = await asyncpg.create_pool(
            host=config.host,
            port=config.port,
            database=config.database,
            user=config.username,
            password=config.password.get_secret_value(),
            min_size=1,
            max_size=4,
            command_timeout=300,
            init=_init_connection,
        )
    return _pool


@asynccontextmanager
async def get_conn():
    """Get connection from pool (recommended pattern from asyncpg docs)."""
    pool = await init_db()
    async with pool.acquire() as conn:
        yield conn


@asynccontextmanager
async def get_transaction():
    """Get connection with transaction context."""
    pool = await init_db()
    async with pool.acquire() as conn:
        async with conn.transaction():
            yield conn


async def close_db():
    """Gracefully close all connections."""
    global _pool
    if _pool:
        await _pool.close()
        _pool = None
