from __future__ import annotations

import sqlite3
from contextlib import asynccontextmanager, contextmanager
from pathlib import Path
from typing import AsyncGenerator, Generator, Union

import aiomysql

from ..core.config import Settings


# SQLite

@contextmanager
def sqlite_connection(db_path: Union[str, Path]) -> Generator[sqlite3.Connection, None, None]:
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_sqlite(db_path: Union[str, Path]) -> None:
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    with sqlite_connection(db_path) as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS birds (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                description TEXT NOT NULL,
                price REAL NOT NULL,
                image_path TEXT NOT NULL
            )
            """
        )


# MySQL

async def create_mysql_pool(settings: Settings) -> aiomysql.Pool:
    return await aiomysql.create_pool(
        host=settings.MYSQL_HOST,
        port=settings.MYSQL_PORT,
        user=settings.MYSQL_USER,
        password=settings.MYSQL_PASSWORD,
        db=settings.MYSQL_DATABASE,
        minsize=settings.MYSQL_POOL_MINSIZE,
        maxsize=settings.MYSQL_POOL_MAXSIZE,
        charset="utf8mb4",
        autocommit=False,
    )


@asynccontextmanager
async def mysql_transaction(pool: aiomysql.Pool) -> AsyncGenerator[aiomysql.Connection, None]:
    """Borrow a pooled connection, committing on success and rolling back on error."""
    async with pool.acquire() as conn:
        try:
            yield conn
            await conn.commit()
        except Exception:
            await conn.rollback()
            raise


async def init_mysql(pool: aiomysql.Pool) -> None:
    async with mysql_transaction(pool) as conn:
        async with conn.cursor() as cursor:
            await cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS birds (
                    id INT AUTO_INCREMENT PRIMARY KEY,
                    name VARCHAR(255) NOT NULL,
                    description TEXT NOT NULL,
                    price DECIMAL(10, 2) NOT NULL,
                    image_path VARCHAR(512) NOT NULL
                )
                """
            )

