# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""MySQL datastore adapter using a single cached aiomysql connection."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from .base import DatastoreAdapter
from .connector import MysqlConnector
from .logger import get_logger
from .models import FindOptions
from .query import build_insert, build_select, build_update

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .connector import Connection, OkPacket

logger = get_logger("MysqlAdapter")


class MysqlAdapter(DatastoreAdapter):
    """Datastore adapter translating get/find/update/insert into MySQL statements.

    The connection is opened on first use and reused by every later call.
    A failed connection attempt is not cached: the next operation tries
    again. Driver exceptions (connection and query failures alike) reach
    the caller unchanged.

    Example:
        adapter = MysqlAdapter({"host": "localhost", "user": "me",
                                "password": "secret", "db": "my_db"})
        article = await adapter.get("articles", 42)
        rows = await adapter.find("articles", {"filter": {"author": "bob"},
                                               "fields": ["title"], "limit": 10})
    """

    def __init__(
        self,
        config: Mapping[str, Any] | None = None,
        *,
        connector: MysqlConnector | None = None,
        escape_fields: bool = False,
    ):
        """Initialize the adapter.

        Args:
            config: Connection parameters handed verbatim to the connector.
            connector: Object providing ``create_connection(config)``.
                Defaults to the aiomysql-based ``MysqlConnector``.
            escape_fields: Quote projected field names with ``escape_id``.
                Off by default: field lists are joined as given.
        """
        self.config = dict(config or {})
        self.client = connector or MysqlConnector()
        self.escape_fields = escape_fields
        self.connection: Connection | None = None
        self._connect_lock = asyncio.Lock()

    @property
    def connected(self) -> bool:
        """True when a connection is cached."""
        return self.connection is not None

    async def get_connection(self) -> Connection:
        """Return the cached connection, opening it on first use."""
        if self.connection is not None:
            return self.connection
        async with self._connect_lock:
            if self.connection is not None:
                return self.connection
            connection = self.client.create_connection(self.config)
            try:
                await connection.connect()
            except Exception as e:
                logger.warning(f"Connection to MySQL failed: {e}")
                raise
            self.connection = connection
            logger.info("MySQL connection established")
            return connection

    async def close(self) -> None:
        """Close and forget the cached connection."""
        connection, self.connection = self.connection, None
        if connection is not None:
            await connection.close()
            logger.info("MySQL connection closed")

    async def run_query(
        self, connection: Connection, statement: str
    ) -> list[dict[str, Any]] | OkPacket:
        """Execute ``statement`` and return the driver's raw result."""
        logger.debug(f"Executing: {statement}")
        try:
            return await connection.query(statement)
        except Exception as e:
            logger.warning(f"Query failed: {e}")
            raise

    async def get(self, type: str, id: Any) -> dict[str, Any] | None:
        """Return the row whose ``id`` matches, or None."""
        rows = await self.find(type, {"filter": {"id": id}, "limit": 1})
        if not rows:
            return None
        return rows[0]

    async def find(
        self, type: str, options: Mapping[str, Any] | FindOptions | None = None
    ) -> list[dict[str, Any]]:
        """Return rows of ``type`` matching filter, fields, offset and limit."""
        options = FindOptions.coerce(options)
        connection = await self.get_connection()
        statement = build_select(connection, type, options, self.escape_fields)
        return await self.run_query(connection, statement)

    async def update(self, type: str, id: Any, data: Mapping[str, Any] | None) -> int:
        """Update the row keyed by ``id``, return the affected row count.

        Empty ``data`` is a no-op returning 0 without touching the backend.
        """
        if not data:
            return 0
        connection = await self.get_connection()
        statement = build_update(connection, type, id, data)
        if statement is None:
            return 0
        result = await self.run_query(connection, statement)
        return result.affected_rows

    async def insert(self, type: str, data: Mapping[str, Any] | None) -> int:
        """Insert a row, return the id assigned by the backend.

        Empty ``data`` is a no-op returning 0 without touching the backend.
        """
        if not data:
            return 0
        connection = await self.get_connection()
        statement = build_insert(connection, type, data)
        if statement is None:
            return 0
        result = await self.run_query(connection, statement)
        return result.insert_id
