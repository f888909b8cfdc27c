"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Command completed successfully
    - GENERAL_ERROR (1): Tool call failed or unexpected error
    - CONFIG_ERROR (2): Missing credentials or invalid settings file

    Example:
        >>> raise typer.Exit(ExitCode.CONFIG_ERROR)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 2
