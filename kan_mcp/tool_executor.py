"""Tool executor routing MCP tool calls to the Kan resource handlers."""

import json
from typing import Any

from .client import KanClient
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
from .tool_schemas import TOOLS

HANDLERS = {
    "workspaces": workspaces_handler,
    "boards": boards_handler,
    "lists": lists_handler,
    "cards": cards_handler,
    "labels": labels_handler,
    "card_comments": card_comments_handler,
    "card_members": card_members_handler,
    "card_labels": card_labels_handler,
}


def _get_required_params(tool_name: str) -> list[str]:
    """Get required parameters for a tool from its schema."""
    for tool in TOOLS:
        if tool["name"] == tool_name:
            return tool["input_schema"].get("required", [])
    return []


def _validate_tool_input(tool_name: str, tool_input: dict[str, Any]) -> None:
    """Validate that all schema-required parameters are present.

    Raises:
        KanValidationError: If a required parameter is missing
    """
    required = _get_required_params(tool_name)
    missing = [param for param in required if param not in tool_input]
    if missing:
        raise KanValidationError(f"Missing required parameter(s): {', '.join(missing)}")


def format_result(result: Any) -> str:
    """Render a handler result as the pretty-printed JSON text sent back to the agent."""
    return json.dumps(result, indent=2)


class ToolExecutor:
    """Executes tool calls using the Kan API client."""

    def __init__(self, client: KanClient):
        """Initialize with a configured API client."""
        self.client = client

    async def execute(self, tool_name: str, tool_input: dict[str, Any]) -> Any:
        """
        Execute a tool call and return the result.

        Args:
            tool_name: Name of the tool to execute
            tool_input: Input parameters for the tool

        Returns:
            Result from the API call

        Raises:
            KanValidationError: If tool_name is not recognized or required params missing
            KanAPIError: If the Kan API rejects the request
        """
        handler = HANDLERS.get(tool_name)
        if handler is None:
            raise KanValidationError(f"Unknown tool: {tool_name}")

        _validate_tool_input(tool_name, tool_input)
        return await handler(self.client, tool_input)
