"""MCP stdio server exposing the Confluence tools.

The dispatcher is synchronous (requests), so each call runs in a worker
thread to keep the event loop free for protocol traffic.
"""

import asyncio
import json
import logging
from typing import Any, Dict, List

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from ..confluence_client.api_wrapper import APIWrapper
from ..confluence_client.config import Settings
from ..confluence_client.errors import ToolCallError
from .dispatcher import ToolDispatcher
from .tools import TOOLS

logger = logging.getLogger(__name__)

SERVER_NAME = "confluence-mcp"


class ConfluenceMCPServer:
    """MCP server for Confluence Cloud.

    Attributes:
        server: MCP Server instance
        dispatcher: ToolDispatcher handling tool calls
    """

    def __init__(self, settings: Settings):
        """Initialize the server.

        Args:
            settings: Settings used to build the API wrapper
        """
        self.api = APIWrapper(settings)
        self.dispatcher = ToolDispatcher(self.api)
        self.server = Server(SERVER_NAME)
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Register MCP tool handlers."""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            return TOOLS

        @self.server.call_tool()
        async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
            return await self.handle_call(name, arguments)

    async def handle_call(self, name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        """Run one tool call.

        A failure payload is raised as ToolCallError; the MCP library turns
        it into a result flagged isError with the message as text.
        """
        result = await asyncio.to_thread(self.dispatcher.call, name, arguments)
        if result.is_error:
            raise ToolCallError(f"Error: {result.error}")
        return [TextContent(type="text", text=json.dumps(result.payload, indent=2))]

    async def run(self) -> None:
        """Run the MCP server using stdio transport."""
        logger.info("Confluence MCP server running on stdio")
        try:
            async with stdio_server() as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        finally:
            self.api.close()
