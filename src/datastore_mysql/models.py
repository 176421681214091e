# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""Pydantic models for datastore query options.

Models:
    - FindOptions: filter, projection and pagination accepted by ``find``
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field


class FindOptions(BaseModel):
    """Options accepted by ``find``.

    Attributes:
        filter: Field name to exact-match value. Entries are AND-ed in
            insertion order. None or empty means no restriction.
        fields: Field names to project. None or empty means all fields.
        offset: Number of rows to skip. Ignored when ``limit`` is None.
        limit: Maximum number of rows to return.
    """

    model_config = ConfigDict(extra="forbid")

    filter: Annotated[
        dict[str, Any] | None,
        Field(default=None, description="Equality filter, AND-ed in order")
    ]
    fields: Annotated[
        list[str] | None,
        Field(default=None, description="Fields to project, all when empty")
    ]
    offset: Annotated[
        int | None,
        Field(default=None, description="Rows to skip before the first result")
    ]
    limit: Annotated[
        int | None,
        Field(default=None, description="Maximum number of rows")
    ]

    @classmethod
    def coerce(cls, options: Mapping[str, Any] | FindOptions | None) -> FindOptions:
        """Build options from a mapping, an instance or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(dict(options))
