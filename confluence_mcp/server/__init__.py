"""MCP tool boundary: tool declarations, dispatch and the stdio server."""

from .dispatcher import ToolDispatcher, ToolResult
from .tools import TOOLS, TOOL_NAMES
from .mcp_server import ConfluenceMCPServer

__all__ = [
    'ToolDispatcher',
    'ToolResult',
    'TOOLS',
    'TOOL_NAMES',
    'ConfluenceMCPServer',
]
