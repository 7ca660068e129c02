"""
Kan MCP - Model Context Protocol tools for the Kan board API.
"""

from .client import KanAPIError, KanClient, TransportError
from .handlers import (
    KanValidationError,
    boards_handler,
    card_comments_handler,
    card_labels_handler,
    card_members_handler,
    cards_handler,
    labels_handler,
    lists_handler,
    workspaces_handler,
)
from .logging_config import configure_logging
from .tools import TOOLS, ToolExecutor

__all__ = [
    "KanClient",
    "KanAPIError",
    "KanValidationError",
    "TransportError",
    "TOOLS",
    "ToolExecutor",
    "workspaces_handler",
    "boards_handler",
    "lists_handler",
    "cards_handler",
    "labels_handler",
    "card_comments_handler",
    "card_members_handler",
    "card_labels_handler",
    "configure_logging",
]
__version__ = "1.0.0"
