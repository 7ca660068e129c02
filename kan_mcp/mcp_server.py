import asyncio
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from . import config
from .client import KanClient
from .logging_config import configure_logging
from .tools import TOOLS, ToolExecutor, format_result

logger = logging.getLogger(__name__)


class KanMCPServer:
    def __init__(self, api_key: str, api_url: str | None = None):
        self.client = KanClient(api_key=api_key, base_url=api_url)
        self.executor = ToolExecutor(self.client)
        self.server = Server("kan")
        self._setup_handlers()

    def _setup_handlers(self):
        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return [Tool(name=t["name"], description=t["description"], inputSchema=t["input_schema"]) for t in TOOLS]

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            try:
                result = await self.executor.execute(name, arguments or {})
            except Exception as e:
                # Re-raised so the MCP layer marks the call as failed
                logger.warning("Tool %s failed: %s", name, e)
                raise
            return [TextContent(type="text", text=format_result(result))]

    async def run(self):
        try:
            async with stdio_server() as (read_stream, write_stream):
                await self.server.run(read_stream, write_stream, self.server.create_initialization_options())
        finally:
            await self.client.aclose()


def main():
    import argparse

    parser = argparse.ArgumentParser(description="Kan MCP Server")
    parser.add_argument("--api-key", help=f"Kan API key (or set {config.API_KEY_ENV} env var)")
    parser.add_argument("--api-url", help=f"Kan API base URL (or set {config.API_URL_ENV} env var)")
    args = parser.parse_args()

    api_key = args.api_key or config.get_api_key()
    if not api_key:
        parser.error(
            f"--api-key is required (or set {config.API_KEY_ENV}). "
            "Generate a key at https://kan.bn under Account Settings."
        )

    configure_logging(verbose=config.debug_enabled_from_env())
    server = KanMCPServer(api_key, api_url=args.api_url)
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
