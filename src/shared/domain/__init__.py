"""
Shared Domain Layer
Base building blocks for entities and value objects
"""
from src.shared.domain.base_entity import BaseEntity, utcnow
from src.shared.domain.base_value_object import BaseValueObject

__all__ = ["BaseEntity", "BaseValueObject", "utcnow"]
