"""
Shared Application Layer
Command/query contracts and their handler bases
"""
from src.shared.application.base_command import BaseCommand
from src.shared.application.base_query import BaseQuery
from src.shared.application.command_handler import CommandHandler
from src.shared.application.query_handler import QueryHandler

__all__ = [
    "BaseCommand",
    "BaseQuery",
    "CommandHandler",
    "QueryHandler",
]
