"""
SQLAlchemy Implementation of Generic Repository
Concrete async repository base using SQLAlchemy 2.x
"""
from __future__ import annotations

from typing import Generic, Type, TypeVar
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.domain.base_entity import BaseEntity
from src.shared.infrastructure.database.base_model import Base
from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TEntity = TypeVar("TEntity", bound=BaseEntity)
TModel = TypeVar("TModel", bound=Base)


class SQLAlchemyRepository(Generic[TEntity, TModel]):
    """
    Generic async SQLAlchemy repository.

    Maps ORM models to domain entities. Subclasses implement ``_to_entity``
    and may override ``_select`` to attach eager-loading options so that
    entities are fully hydrated without lazy loads.

    Type Parameters:
        TEntity: Domain entity type
        TModel: SQLAlchemy ORM model type
    """

    def __init__(
        self,
        session: AsyncSession,
        model_class: Type[TModel],
        entity_class: Type[TEntity],
    ) -> None:
        self.session = session
        self.model_class = model_class
        self.entity_class = entity_class

    def _to_entity(self, model: TModel) -> TEntity:
        """Convert ORM model to domain entity. Must be implemented by subclass."""
        raise NotImplementedError("Subclass must implement _to_entity")

    def _select(self) -> Select:
        """Base SELECT for this repository's model."""
        return select(self.model_class)

    async def get_by_id(self, entity_id: UUID) -> TEntity | None:
        """
        Retrieve entity by its unique identifier.

        Returns:
            Entity if found, None otherwise
        """
        stmt = self._select().where(self.model_class.id == entity_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            logger.debug(
                "Entity not found",
                entity=self.entity_class.__name__,
                entity_id=str(entity_id),
            )
            return None

        return self._to_entity(model)
