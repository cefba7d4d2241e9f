"""
Address Level Value Object
"""
from __future__ import annotations

from enum import Enum
from typing import Final


class AddressLevel(str, Enum):
    """Administrative address levels, coarsest first."""

    REGION = "region"
    ZONE = "zone"
    WEREDA = "wereda"
    KEBELE = "kebele"


# region ⊃ zone ⊃ wereda ⊃ kebele
ADDRESS_CHAIN: Final[tuple[AddressLevel, ...]] = (
    AddressLevel.REGION,
    AddressLevel.ZONE,
    AddressLevel.WEREDA,
    AddressLevel.KEBELE,
)

# Probe order used by homogeneous fallback scoring (finest first)
FALLBACK_ORDER: Final[tuple[AddressLevel, ...]] = tuple(reversed(ADDRESS_CHAIN))
