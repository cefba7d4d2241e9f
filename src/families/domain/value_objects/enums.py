"""
Family Domain Enumerations
"""
from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Relationship(str, Enum):
    SON = "son"
    DAUGHTER = "daughter"

    @classmethod
    def for_gender(cls, gender: Gender) -> Relationship:
        return cls.SON if gender is Gender.MALE else cls.DAUGHTER


class AssignmentMode(str, Enum):
    """
    HOMOGENEOUS: prefer children sharing the parents' address
    HETEROGENEOUS: prefer children from elsewhere
    """

    HOMOGENEOUS = "homogeneous"
    HETEROGENEOUS = "heterogeneous"


class FamilyStatus(str, Enum):
    CURRENT = "current"
    FINISHED = "finished"
