import logging
from collections.abc import Sequence
from typing import Any

import asyncpg
from fastapi import Request
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateTable, DropTable

from jobly.core.config import Settings
from jobly.models import Base

logger = logging.getLogger(__name__)

Executor = asyncpg.Pool | asyncpg.Connection


class Database:
    """Thin query client over an asyncpg pool or a single connection.

    Statements use PostgreSQL's positional ``$1 .. $n`` placeholders and
    ``values`` is bound in list order. Rows come back as plain dicts keyed by
    the selected column names (``AS`` aliases included).
    """

    def __init__(self, executor: Executor) -> None:
        self._executor = executor

    async def query(self, sql: str, values: Sequence[Any] = ()) -> list[dict[str, Any]]:
        logger.debug("SQL: %s | params=%r", " ".join(sql.split()), list(values))
        records = await self._executor.fetch(sql, *values)
        return [dict(record) for record in records]


async def create_pool(settings: Settings) -> asyncpg.Pool:
    return await asyncpg.create_pool(
        settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout,
    )


def _compile(statement) -> str:
    return str(statement.compile(dialect=postgresql.dialect()))


async def create_tables(connection: asyncpg.Connection) -> None:
    """Create every table declared on the models' metadata, skipping existing ones."""
    for table in Base.metadata.sorted_tables:
        await connection.execute(_compile(CreateTable(table, if_not_exists=True)))


async def drop_tables(connection: asyncpg.Connection) -> None:
    for table in reversed(Base.metadata.sorted_tables):
        await connection.execute(_compile(DropTable(table, if_exists=True)))


def get_db(request: Request) -> Database:
    return Database(request.app.state.db_pool)
