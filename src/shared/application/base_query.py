"""
Base Query Contract for CQRS
All queries (read operations) inherit from this
"""
from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class BaseQuery:
    """
    Base class for all queries in the system.

    Queries represent read operations and must not modify state.
    Each query has a corresponding QueryHandler.

    Example:
        @dataclass(frozen=True)
        class ListBatchesQuery(BaseQuery):
            include_inactive: bool = False
    """

    # Optional: query metadata
    query_id: UUID | None = field(default=None, kw_only=True)
    requested_by: UUID | None = field(default=None, kw_only=True)  # User who requested the query
