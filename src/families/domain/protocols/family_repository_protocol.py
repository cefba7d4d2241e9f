"""
Family Repository Protocol (Interface)
"""
from __future__ import annotations

from typing import Optional, Protocol, Sequence
from uuid import UUID

from src.families.domain.entities.family import ChildEntry, Family
from src.families.domain.value_objects.slot_key import SlotKey


class IFamilyRepository(Protocol):
    """Family repository interface"""

    async def list_assignable(self, status: str = "current") -> Sequence[Family]:
        """
        Families in the given status that have at least one parent pair,
        hydrated with their parent and child student records.
        """
        ...

    async def get_by_id(self, family_id: UUID) -> Optional[Family]:
        """Get hydrated family by ID"""
        ...

    async def get_for_update(self, family_id: UUID) -> Optional[Family]:
        """Re-read a hydrated family, row-locked for the current transaction where supported"""
        ...

    async def append_child(self, family_id: UUID, slot: SlotKey, child: ChildEntry) -> None:
        """Append one child entry under the parent pair at ``slot``"""
        ...
