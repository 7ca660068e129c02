"""MCP tool definitions and executor for the Kan API.

Re-exports from tool_schemas and tool_executor.
"""

from .tool_executor import ToolExecutor, format_result
from .tool_schemas import TOOLS

__all__ = ["TOOLS", "ToolExecutor", "format_result"]
