from .command import Command
from .handler import CommandHandler, QueryHandler
from .query import Query
from .response import CommandResponse, QueryResponse

__all__ = [
    "Command",
    "CommandHandler",
    "CommandResponse",
    "Query",
    "QueryHandler",
    "QueryResponse",
]
