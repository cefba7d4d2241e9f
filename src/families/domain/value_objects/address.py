"""
Address Value Object
"""
from __future__ import annotations

from typing import Optional

from src.shared.domain.base_value_object import BaseValueObject
from src.families.domain.value_objects.address_level import ADDRESS_CHAIN, AddressLevel


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class Address(BaseValueObject):
    """
    Nested residential address (region ⊃ zone ⊃ wereda ⊃ kebele).

    Every level is optional; blank strings are stored as unknown (None).
    """

    def __init__(
        self,
        region: Optional[str] = None,
        zone: Optional[str] = None,
        wereda: Optional[str] = None,
        kebele: Optional[str] = None,
    ) -> None:
        self.region = _clean(region)
        self.zone = _clean(zone)
        self.wereda = _clean(wereda)
        self.kebele = _clean(kebele)
        self._finalize_init()

    def value_at(self, level: AddressLevel) -> Optional[str]:
        """Value at the given level, or None when unknown."""
        return getattr(self, level.value)

    def common_with(self, other: Address) -> tuple[Optional[AddressLevel], Optional[str]]:
        """
        Most specific level shared with another address.

        A level only counts when every coarser level also matches and both
        values are known. Returns ``(None, None)`` when even the region differs.
        """
        level: Optional[AddressLevel] = None
        value: Optional[str] = None
        for candidate in ADDRESS_CHAIN:
            mine = self.value_at(candidate)
            if mine is None or mine != other.value_at(candidate):
                break
            level, value = candidate, mine
        return level, value

    def to_dict(self) -> dict[str, Optional[str]]:
        return {lvl.value: self.value_at(lvl) for lvl in ADDRESS_CHAIN}
