"""Per-resource handlers that validate tool input and issue one Kan API call."""

from ._common import KanValidationError
from .boards import boards_handler
from .card_actions import card_comments_handler, card_labels_handler, card_members_handler
from .cards import cards_handler
from .labels import labels_handler
from .lists import lists_handler
from .workspaces import workspaces_handler

__all__ = [
    "KanValidationError",
    "workspaces_handler",
    "boards_handler",
    "lists_handler",
    "cards_handler",
    "labels_handler",
    "card_comments_handler",
    "card_members_handler",
    "card_labels_handler",
]
