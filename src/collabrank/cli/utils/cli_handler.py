"""Unified CLI handler for standardized error handling and output."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from collabrank.cli.formatters.json_formatter import JsonFormatter
from collabrank.config import get_logger
from collabrank.exceptions import CollabRankError, ValidationError

logger = get_logger(__name__)


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()
        self.json_formatter = JsonFormatter()

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Display an error and exit.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use

        Raises:
            typer.Exit: Always
        """
        logger.error("Command failed", error=str(error), exc_info=error)

        if json_output:
            # Plain print keeps JSON free of rich markup
            print(self.json_formatter.format_error_response(error, exit_code))
        elif isinstance(error, ValidationError):
            self.console.print(f"[red]Validation {escape(str(error))}[/red]")
        elif isinstance(error, CollabRankError):
            self.console.print(f"[red]{escape(str(error))}[/red]")
        else:
            self.console.print(f"[red]Error: {escape(str(error))}[/red]")

        raise typer.Exit(exit_code)


def cli_command(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorate a CLI command with standardized error handling."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            CLIHandler().handle_error(e, kwargs.get("json_output", False))

    return wrapper
