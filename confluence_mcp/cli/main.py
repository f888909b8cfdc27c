"""Main CLI entry point for the confluence-mcp command.

This module provides the Typer application: `serve` runs the MCP stdio
server, `call` invokes a single tool from the shell, and `tools` lists
what is available.
"""

import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from confluence_mcp import __version__
from confluence_mcp.cli.models import ExitCode
from confluence_mcp.cli.output import OutputHandler
from confluence_mcp.confluence_client.api_wrapper import APIWrapper
from confluence_mcp.confluence_client.config import Settings, load_settings
from confluence_mcp.confluence_client.errors import ConfigurationError
from confluence_mcp.server.dispatcher import ToolDispatcher
from confluence_mcp.server.mcp_server import ConfluenceMCPServer
from confluence_mcp.server.tools import TOOLS

app = typer.Typer(
    name="confluence-mcp",
    help="""MCP server exposing Confluence Cloud pages, spaces, labels and comments.

QUICK START:
  confluence-mcp serve                                          # Run stdio MCP server
  confluence-mcp tools                                          # List tools
  confluence-mcp call confluence_get_page --args '{"pageId": "123"}'

Credentials come from ATLASSIAN_EMAIL, ATLASSIAN_API_TOKEN and
ATLASSIAN_DOMAIN (a .env file in the working directory is read too).""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    help="YAML file with timeout / max_pages / max_workers / child_page_limit",
)
VERBOSE_OPTION = typer.Option(
    0,
    "--verbosity",
    "-v",
    help="Verbosity level: 0=warnings, 1=info, 2=debug",
)
LOGDIR_OPTION = typer.Option(
    None,
    "--logdir",
    help="Directory for timestamped log files",
)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'confluence_mcp' logger, and only on stderr:
    stdout belongs to the MCP transport.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("confluence_mcp")
    app_logger.setLevel(level)
    app_logger.handlers.clear()

    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter("%(asctime)s [%(levelname)8s] %(message)s", datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"confluence-mcp_{timestamp}.log"

        file_formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt=date_format
        )
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _load_settings_or_exit(config: Optional[str], output: OutputHandler) -> Settings:
    try:
        return load_settings(config)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        output.error(str(e))
        raise typer.Exit(ExitCode.CONFIG_ERROR)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"confluence-mcp version {__version__}")
        raise typer.Exit()


@app.callback()
def root(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """MCP server exposing Confluence Cloud to tool-calling agents."""


@app.command()
def serve(
    config: Optional[str] = CONFIG_OPTION,
    verbosity: int = VERBOSE_OPTION,
    logdir: Optional[str] = LOGDIR_OPTION,
) -> None:
    """Run the MCP server on stdio."""
    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity)
    settings = _load_settings_or_exit(config, output)

    server = ConfluenceMCPServer(settings)
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Server stopped")


@app.command()
def call(
    tool: str = typer.Argument(..., help="Tool name, e.g. confluence_get_page"),
    args: str = typer.Option("{}", "--args", "-a", help="Tool arguments as a JSON object"),
    config: Optional[str] = CONFIG_OPTION,
    verbosity: int = VERBOSE_OPTION,
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
) -> None:
    """Invoke one tool and print its JSON result."""
    _configure_logging(verbosity)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)

    try:
        arguments = json.loads(args)
    except json.JSONDecodeError as e:
        output.error(f"--args is not valid JSON: {e}")
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    if not isinstance(arguments, dict):
        output.error("--args must be a JSON object")
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    settings = _load_settings_or_exit(config, output)
    api = APIWrapper(settings)
    try:
        result = ToolDispatcher(api).call(tool, arguments)
    finally:
        api.close()

    if result.is_error:
        output.error(result.error)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    output.print_json(result.payload)


@app.command()
def tools() -> None:
    """List the available tools."""
    OutputHandler().print_tools(TOOLS)


def main() -> None:
    """Main entry point for the CLI application."""
    app()


# Allow running as: python -m confluence_mcp.cli.main
if __name__ == "__main__":
    main()
