# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""MySQL backend connector built on aiomysql.

This is the boundary between the adapter and the driver. The adapter only
relies on the small surface exposed here::

    connection = connector.create_connection({"host": "localhost", "db": "app"})
    await connection.connect()
    rows = await connection.query("SELECT * FROM `articles`")
    connection.escape_id("articles")   # -> "`articles`"
    connection.escape("it's")          # -> "'it\\'s'"
    await connection.close()

Tests replace ``create_connection`` (or pass their own connector) so no live
server is required.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import aiomysql
from pymysql.constants import CLIENT

from .logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger("MysqlConnector")


@dataclass
class OkPacket:
    """Result of a statement that returns no result set.

    Attributes:
        affected_rows: Rows changed by the statement.
        insert_id: AUTO_INCREMENT value generated by an INSERT, 0 otherwise.
    """

    affected_rows: int = 0
    insert_id: int = 0


def escape_id(name: str) -> str:
    """Quote an identifier with backticks.

    Dotted names are quoted per part (``db.table`` -> ```db`.`table```) and
    embedded backticks are doubled.
    """
    return ".".join(
        "`" + part.replace("`", "``") + "`" for part in str(name).split(".")
    )


class Connection:
    """A single aiomysql connection with escaping helpers.

    The underlying driver connection only exists after ``connect()``.
    """

    def __init__(self, config: Mapping[str, Any]):
        """Initialize the connection handle.

        Args:
            config: aiomysql keyword arguments (host, port, user, password,
                db, ...). ``autocommit`` defaults to True and ``client_flag``
                to ``CLIENT.FOUND_ROWS``, so UPDATE reports matched rows
                rather than changed rows.
        """
        self.config = {"autocommit": True, "client_flag": CLIENT.FOUND_ROWS, **config}
        self._conn: Any = None

    async def connect(self) -> None:
        """Open the connection to the server."""
        self._conn = await aiomysql.connect(**self.config)
        logger.debug(f"Connected to {self.config.get('host')}:{self.config.get('port', 3306)}")

    async def close(self) -> None:
        """Close the connection, waiting for the server to acknowledge."""
        if self._conn is not None:
            await self._conn.ensure_closed()
            self._conn = None

    def escape_id(self, name: str) -> str:
        """Quote a table or column name."""
        return escape_id(name)

    def escape(self, value: Any) -> str:
        """Render a value as a SQL literal using the driver's escaping."""
        return self._conn.escape(value)

    async def query(self, statement: str) -> list[dict[str, Any]] | OkPacket:
        """Execute a statement.

        Returns:
            The rows as dicts when the statement produced a result set,
            otherwise an ``OkPacket`` with the affected row count and the
            last insert id.
        """
        async with self._conn.cursor(aiomysql.DictCursor) as cur:
            await cur.execute(statement)
            if cur.description is None:
                return OkPacket(
                    affected_rows=cur.rowcount, insert_id=cur.lastrowid or 0
                )
            return list(await cur.fetchall())


class MysqlConnector:
    """Factory for backend connections."""

    def create_connection(self, config: Mapping[str, Any]) -> Connection:
        """Create an unconnected ``Connection`` for ``config``."""
        return Connection(config)
