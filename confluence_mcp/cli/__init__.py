"""Command-line interface for the Confluence MCP server.

This package provides the `confluence-mcp` CLI tool: run the stdio server,
call a single tool from the shell, or list the available tools.
"""

from .models import ExitCode
from .output import OutputHandler

__all__ = [
    'ExitCode',
    'OutputHandler',
]
