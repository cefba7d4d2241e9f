"""
Unit of Work Interface (Protocol)
Manages transactions and coordinates repository operations
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IUnitOfWork(Protocol):
    """
    Unit of Work interface for transaction management.

    Coordinates multiple repository operations within a single transaction.
    All writes must occur within a UoW context to ensure atomicity.

    Usage:
        async with uow:
            family = await uow.families.get_for_update(family_id)
            await uow.families.append_child(family_id, slot, child)
            await uow.commit()  # Commits all changes atomically
    """

    async def __aenter__(self) -> IUnitOfWork:
        """Enter async context manager and begin the transaction."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit async context manager.

        Rolls back if an exception occurred or commit() was never called.
        """
        ...

    async def commit(self) -> None:
        """
        Commit the current transaction.

        Persists all changes made within this UoW context.
        """
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...
