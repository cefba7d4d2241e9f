from src.families.application.commands.execute_auto_assign_command import (
    ExecuteAutoAssignCommand,
    ExecuteAutoAssignCommandHandler,
)

__all__ = ["ExecuteAutoAssignCommand", "ExecuteAutoAssignCommandHandler"]
