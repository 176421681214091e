# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Base class describing the datastore capability contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .models import FindOptions


class DatastoreAdapter(ABC):
    """Abstract base class for async datastore adapters.

    A datastore façade delegates its ``get``/``find``/``update``/``insert``
    calls to an adapter. ``type`` always names the target table.
    """

    @abstractmethod
    async def get(self, type: str, id: Any) -> dict[str, Any] | None:
        """Return the record whose ``id`` matches, or None."""
        ...

    @abstractmethod
    async def find(
        self, type: str, options: Mapping[str, Any] | FindOptions | None = None
    ) -> list[dict[str, Any]]:
        """Return the records matching filter, fields, offset and limit."""
        ...

    @abstractmethod
    async def update(self, type: str, id: Any, data: Mapping[str, Any] | None) -> int:
        """Update the record identified by ``id``, return affected row count."""
        ...

    @abstractmethod
    async def insert(self, type: str, data: Mapping[str, Any] | None) -> int:
        """Insert a record, return the backend-assigned identifier."""
        ...
