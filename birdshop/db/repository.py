from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import List, Optional, Protocol, Union

import aiomysql
from fastapi.concurrency import run_in_threadpool

from ..core.config import Settings
from ..models.schemas import Bird, BirdCreate
from .database import init_mysql, init_sqlite, create_mysql_pool, mysql_transaction, sqlite_connection

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, description, price, image_path"


def _row_to_bird(row_dict: dict) -> Bird:
    data = dict(row_dict)
    # MySQL DECIMAL comes back as decimal.Decimal
    data["price"] = float(data["price"])
    return Bird(**data)


class BirdRepository(Protocol):
    """Storage operations the API depends on."""

    async def find_all(self) -> List[Bird]:
        ...

    async def save(self, bird: BirdCreate) -> Bird:
        ...


class SqliteBirdRepository:
    """Embedded SQLite storage. Each call opens its own connection in the threadpool."""

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = db_path

    def _find_all(self) -> List[Bird]:
        with sqlite_connection(self.db_path) as conn:
            rows = conn.execute(f"SELECT {_COLUMNS} FROM birds ORDER BY id").fetchall()
            return [_row_to_bird(dict(r)) for r in rows]

    def _save(self, bird: BirdCreate) -> Bird:
        params = (bird.name, bird.description, bird.price, bird.image_path)
        with sqlite_connection(self.db_path) as conn:
            bird_id: Optional[int] = None
            if bird.id is not None:
                cur = conn.execute(
                    "UPDATE birds SET name = ?, description = ?, price = ?, image_path = ? WHERE id = ?",
                    params + (bird.id,),
                )
                if cur.rowcount > 0:
                    bird_id = bird.id
            if bird_id is None:
                cur = conn.execute(
                    "INSERT INTO birds (name, description, price, image_path) VALUES (?, ?, ?, ?)",
                    params,
                )
                bird_id = cur.lastrowid
            row = conn.execute(
                f"SELECT {_COLUMNS} FROM birds WHERE id = ?", (bird_id,)
            ).fetchone()
            assert row is not None
            return _row_to_bird(dict(row))

    async def find_all(self) -> List[Bird]:
        try:
            return await run_in_threadpool(self._find_all)
        except sqlite3.Error as e:
            logger.error(f"SQLite error listing birds: {e}")
            raise

    async def save(self, bird: BirdCreate) -> Bird:
        try:
            return await run_in_threadpool(self._save, bird)
        except sqlite3.Error as e:
            logger.error(f"SQLite error saving bird {bird.name!r}: {e}")
            raise


class MySQLBirdRepository:
    """MySQL storage backed by an aiomysql connection pool."""

    def __init__(self, pool: aiomysql.Pool):
        self.pool = pool

    async def find_all(self) -> List[Bird]:
        try:
            async with mysql_transaction(self.pool) as conn:
                async with conn.cursor(aiomysql.DictCursor) as cursor:
                    await cursor.execute(f"SELECT {_COLUMNS} FROM birds ORDER BY id")
                    rows = await cursor.fetchall()
        except aiomysql.Error as e:
            logger.error(f"MySQL error listing birds: {e}")
            raise
        return [_row_to_bird(r) for r in rows]

    async def save(self, bird: BirdCreate) -> Bird:
        params = (bird.name, bird.description, bird.price, bird.image_path)
        try:
            async with mysql_transaction(self.pool) as conn:
                async with conn.cursor(aiomysql.DictCursor) as cursor:
                    bird_id: Optional[int] = None
                    if bird.id is not None:
                        # rowcount on UPDATE counts changed rows, not matched ones
                        await cursor.execute("SELECT id FROM birds WHERE id = %s", (bird.id,))
                        if await cursor.fetchone() is not None:
                            await cursor.execute(
                                "UPDATE birds SET name = %s, description = %s, price = %s, image_path = %s "
                                "WHERE id = %s",
                                params + (bird.id,),
                            )
                            bird_id = bird.id
                    if bird_id is None:
                        await cursor.execute(
                            "INSERT INTO birds (name, description, price, image_path) VALUES (%s, %s, %s, %s)",
                            params,
                        )
                        bird_id = cursor.lastrowid
                    await cursor.execute(f"SELECT {_COLUMNS} FROM birds WHERE id = %s", (bird_id,))
                    row = await cursor.fetchone()
        except aiomysql.Error as e:
            logger.error(f"MySQL error saving bird {bird.name!r}: {e}")
            raise
        if row is None:
            raise ValueError(f"Failed to retrieve saved bird with id {bird_id}")
        return _row_to_bird(row)


async def open_repository(settings: Settings) -> Union[SqliteBirdRepository, MySQLBirdRepository]:
    """Prepare the configured backend and return a repository bound to it."""
    if settings.DB_BACKEND == "mysql":
        logger.info(
            f"Using MySQL backend at {settings.MYSQL_HOST}:{settings.MYSQL_PORT}/{settings.MYSQL_DATABASE}"
        )
        pool = await create_mysql_pool(settings)
        await init_mysql(pool)
        return MySQLBirdRepository(pool)

    logger.info(f"Using SQLite backend at {settings.SQLITE_PATH}")
    await run_in_threadpool(init_sqlite, settings.SQLITE_PATH)
    return SqliteBirdRepository(settings.SQLITE_PATH)


async def close_repository(repository: Union[SqliteBirdRepository, MySQLBirdRepository]) -> None:
    if isinstance(repository, MySQLBirdRepository):
        repository.pool.close()
        await repository.pool.wait_closed()
