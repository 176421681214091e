# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Logging utilities for the MySQL datastore adapter.

The package never configures handlers, levels or formats. Applications
embedding the adapter are expected to call ``logging.basicConfig()`` (or
their own logging setup) in their entry point.

Example:
    Typical usage in a module::

        from datastore_mysql.logger import get_logger

        logger = get_logger("MysqlAdapter")
        logger.debug("Running statement")
"""

import logging


def get_logger(name: str = "DatastoreMysql") -> logging.Logger:
    """Retrieve a logger instance for the adapter.

    Args:
        name: The logger name. Defaults to "DatastoreMysql".

    Returns:
        A ``logging.Logger`` instance bound to the given name.
    """
    return logging.getLogger(name)
