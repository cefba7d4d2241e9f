"""
List Batches Query
"""
from __future__ import annotations

from dataclasses import dataclass

from src.shared.application.base_query import BaseQuery
from src.shared.application.query_handler import QueryHandler

from src.families.domain.protocols.unit_of_work_protocol import IFamilyUnitOfWork


@dataclass(frozen=True)
class ListBatchesQuery(BaseQuery):
    """Query for the batches an operator can target."""


class ListBatchesQueryHandler(QueryHandler[ListBatchesQuery, list[str]]):
    def __init__(self, uow: IFamilyUnitOfWork) -> None:
        self.uow = uow

    async def handle(self, query: ListBatchesQuery) -> list[str]:
        async with self.uow:
            return list(await self.uow.students.list_batches())
