"""
Slot Key Value Object
"""
from __future__ import annotations

from src.shared.domain.base_value_object import BaseValueObject


class SlotKey(BaseValueObject):
    """
    Address of a parent-pair slot inside one family.

    Attributes:
        grandparent_index: Position of the grandparent group in the family
        parent_pair_index: Position of the parent pair within that group
    """

    def __init__(self, grandparent_index: int, parent_pair_index: int) -> None:
        if grandparent_index < 0 or parent_pair_index < 0:
            raise ValueError("Slot indices must be non-negative")
        self.grandparent_index = grandparent_index
        self.parent_pair_index = parent_pair_index
        self._finalize_init()

    def __str__(self) -> str:
        return f"{self.grandparent_index}/{self.parent_pair_index}"
