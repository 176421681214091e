# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Shared fixtures: a fake backend connection with identity escaping."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from datastore_mysql import MysqlAdapter

CONFIG = {
    "host": "localhost",
    "user": "me",
    "password": "secret",
    "db": "my_db",
}


def make_connection(result=None):
    """Build a fake connection whose escapes return their input unchanged."""
    connection = MagicMock()
    connection.connect = AsyncMock()
    connection.close = AsyncMock()
    connection.query = AsyncMock(return_value=result if result is not None else [])
    connection.escape_id = MagicMock(side_effect=lambda value: value)
    connection.escape = MagicMock(side_effect=lambda value: value)
    return connection


@pytest.fixture
def config():
    """Connection parameters the adapter fixture is built with."""
    return dict(CONFIG)


@pytest.fixture
def connection_factory():
    """Factory building independent fake connections."""
    return make_connection


@pytest.fixture
def connection():
    """Fake backend connection returning no rows."""
    return make_connection()


@pytest.fixture
def connector(connection):
    """Connector handing out the fake connection."""
    connector = MagicMock()
    connector.create_connection = MagicMock(return_value=connection)
    return connector


@pytest.fixture
def adapter(config, connector):
    """Adapter wired to the fake connector."""
    return MysqlAdapter(config, connector=connector)
