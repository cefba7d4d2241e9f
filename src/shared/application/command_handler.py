"""
Base Command Handler
Abstract base for all command handlers
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.shared.application.base_command import BaseCommand
from src.shared.exceptions import DomainError
from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TCommand = TypeVar("TCommand", bound=BaseCommand)
TResult = TypeVar("TResult")


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """
    Abstract base class for command handlers.

    Command handlers execute write operations and enforce business rules.
    They orchestrate domain logic and coordinate with the unit of work.

    Type Parameters:
        TCommand: Command type this handler processes
        TResult: Return type of the handler
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """
        Handle the command and return result.

        Raises:
            ValidationError: If command data invalid
            NotFoundError: If a referenced aggregate is gone
            ConflictError: If current state contradicts the command
        """

    async def __call__(self, command: TCommand) -> TResult:
        """
        Make handler callable directly.

        Adds logging around command execution. Domain errors are expected
        outcomes and are logged at warning level; anything else is an error.
        """
        command_name = command.__class__.__name__

        logger.info("Executing command", command=command_name)

        try:
            result = await self.handle(command)
        except DomainError as e:
            logger.warning(
                "Command rejected",
                command=command_name,
                code=e.code,
                error=e.message,
            )
            raise
        except Exception as e:
            logger.error(
                "Command execution failed",
                command=command_name,
                error=str(e),
                exc_info=True,
            )
            raise

        logger.info("Command executed successfully", command=command_name)
        return result
