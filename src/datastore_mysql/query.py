# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Statement builders for the MySQL datastore adapter.

Every function is synchronous and performs no I/O. The ``connection``
argument only provides the ``escape_id`` and ``escape`` primitives, so any
object with those two methods works (tests use identity escapes).

Example:
    >>> build_select(conn, "articles", FindOptions(filter={"id": 42}, limit=1))
    'SELECT * FROM `articles` WHERE `id`=42 LIMIT 1'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .connector import Connection
    from .models import FindOptions


def build_fields(fields: Sequence[str] | None, connection: Connection | None = None) -> str:
    """Return the projection list.

    Names are joined with "," as given, without identifier escaping, unless
    a connection is passed, in which case each name goes through
    ``escape_id``.
    """
    if not fields:
        return "*"
    if connection is None:
        return ",".join(fields)
    return ",".join(connection.escape_id(name) for name in fields)


def build_assignments(connection: Connection, values: Any, separator: str) -> str:
    """Render ``name=value`` pairs joined by ``separator``.

    Returns an empty string when ``values`` is empty or not a mapping.
    """
    if not isinstance(values, Mapping):
        return ""
    return separator.join(
        f"{connection.escape_id(name)}={connection.escape(value)}"
        for name, value in values.items()
    )


def build_where(connection: Connection, filter: Mapping[str, Any] | None) -> str:
    """Return the WHERE clause, or an empty string for no restriction."""
    conditions = build_assignments(connection, filter, " AND ")
    if not conditions:
        return ""
    return f" WHERE {conditions}"


def build_limit(connection: Connection, offset: int | None, limit: int | None) -> str:
    """Return the LIMIT clause.

    Without a limit no clause is emitted, even if an offset is given. A
    missing or zero offset produces ``LIMIT n``, a positive one
    ``LIMIT offset,n``. Negative values produce no clause.
    """
    if limit is None or limit < 0:
        return ""
    if not offset:
        return f" LIMIT {connection.escape(limit)}"
    if offset > 0:
        return f" LIMIT {connection.escape(offset)},{connection.escape(limit)}"
    return ""


def build_select(
    connection: Connection,
    table: str,
    options: FindOptions,
    escape_fields: bool = False,
) -> str:
    """Build the SELECT statement used by ``find``."""
    fields = build_fields(options.fields, connection if escape_fields else None)
    return (
        f"SELECT {fields} FROM {connection.escape_id(table)}"
        f"{build_where(connection, options.filter)}"
        f"{build_limit(connection, options.offset, options.limit)}"
    )


def build_update(
    connection: Connection, table: str, id: Any, data: Mapping[str, Any]
) -> str | None:
    """Build an UPDATE of the single row keyed by ``id``.

    Returns None when ``data`` yields no assignments.
    """
    assignments = build_assignments(connection, data, ",")
    if not assignments:
        return None
    return (
        f"UPDATE {connection.escape_id(table)} SET {assignments}"
        f"{build_where(connection, {'id': id})}"
        f"{build_limit(connection, None, 1)}"
    )


def build_insert(connection: Connection, table: str, data: Mapping[str, Any]) -> str | None:
    """Build an INSERT ... SET statement, None when ``data`` is empty."""
    assignments = build_assignments(connection, data, ",")
    if not assignments:
        return None
    return f"INSERT INTO {connection.escape_id(table)} SET {assignments}"
