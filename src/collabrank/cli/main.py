"""Main CLI entry point."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from collabrank import __version__
from collabrank.cli.commands import analyze_command
from collabrank.cli.formatters.json_formatter import JsonFormatter
from collabrank.cli.utils.cli_handler import CLIHandler
from collabrank.config import (
    clear_settings_cache,
    configure_logging,
    get_logger,
    get_settings,
)

logger = get_logger(__name__)
console = Console()

app = typer.Typer(
    name="collabrank",
    help="Centrality rankings for undirected collaboration graphs",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="analyze")(analyze_command)


@app.command()
def version(
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show collabrank version."""
    version_info = {
        "name": "collabrank",
        "version": __version__,
        "description": "Centrality rankings for undirected collaboration graphs",
    }

    if json_output:
        print(JsonFormatter().format(version_info))
    else:
        console.print(f"collabrank v{version_info['version']}")


def _reconfigure_logging(level: str, debug: bool = False) -> None:
    """Apply a log level from a CLI flag and rebuild logging."""
    os.environ["COLLABRANK_LOG_LEVEL"] = level
    if debug:
        os.environ["COLLABRANK_DEBUG"] = "true"
    clear_settings_cache()
    configure_logging(get_settings())


@app.callback()
def main_callback(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            envvar="COLLABRANK_CONFIG",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging (INFO level)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Configure global options."""
    if debug:
        _reconfigure_logging("DEBUG", debug=True)
        logger.debug("Debug mode enabled")
    elif verbose:
        _reconfigure_logging("INFO")
        logger.info("Verbose mode enabled")

    if config:
        if not config.exists():
            console.print(f"[red]Error: Config file not found: {config}[/red]")
            raise typer.Exit(1)

        from collabrank.config import set_settings
        from collabrank.config.settings import CollabRankSettings

        try:
            settings = CollabRankSettings.from_multiple_sources(config_files=[config])
        except Exception as e:
            CLIHandler(console).handle_error(e)
        set_settings(settings)
        configure_logging(settings)
        logger.debug("Loaded configuration", config_file=str(config))


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
