"""
Base Query Handler
Abstract base for all query handlers
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.shared.application.base_query import BaseQuery
from src.shared.exceptions import DomainError
from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TQuery = TypeVar("TQuery", bound=BaseQuery)
TResult = TypeVar("TResult")


class QueryHandler(ABC, Generic[TQuery, TResult]):
    """
    Abstract base class for query handlers.

    Query handlers execute read operations without modifying state.

    Type Parameters:
        TQuery: Query type this handler processes
        TResult: Return type of the handler
    """

    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        """
        Handle the query and return result.

        Raises:
            ValidationError: If the query cannot be answered with the given input
        """

    async def __call__(self, query: TQuery) -> TResult:
        """Make handler callable directly, with logging around execution."""
        query_name = query.__class__.__name__

        logger.debug("Executing query", query=query_name)

        try:
            result = await self.handle(query)
        except DomainError as e:
            logger.warning(
                "Query rejected",
                query=query_name,
                code=e.code,
                error=e.message,
            )
            raise
        except Exception as e:
            logger.error(
                "Query execution failed",
                query=query_name,
                error=str(e),
                exc_info=True,
            )
            raise

        logger.debug("Query executed successfully", query=query_name)
        return result
