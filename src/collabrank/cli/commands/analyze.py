"""Analyze command for collabrank CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from collabrank.analysis.report import analyze_graph
from collabrank.cli.formatters.base import OutputFormat
from collabrank.cli.formatters.report_formatter import ReportFormatter
from collabrank.cli.utils.cli_handler import cli_command
from collabrank.config import get_logger, get_settings_for_cli
from collabrank.graph.builder import load_graph
from collabrank.visualization.renderer import render_graph

logger = get_logger(__name__)
console = Console()


@cli_command
def analyze_command(
    dataset: Annotated[
        Path,
        typer.Argument(help="Edge-list file: two node IDs per line"),
    ],
    top_k: Annotated[
        int | None,
        typer.Option("--top-k", "-k", help="Number of nodes to list per metric"),
    ] = None,
    render: Annotated[
        bool | None,
        typer.Option(
            "--render/--no-render",
            help="Render the graph to a PNG image (default from settings)",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory for the rendered image"),
    ] = None,
    parallel: Annotated[
        bool,
        typer.Option("--parallel", help="Compute the metrics on worker threads"),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file (YAML, TOML, or JSON)",
        ),
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output the report as JSON")
    ] = False,
    plain: Annotated[
        bool,
        typer.Option("--plain", help="Print plain \"Author id: score\" lines"),
    ] = False,
) -> None:
    """Rank the most central nodes of a collaboration graph.

    Reports node, edge and connected-component counts, then the top nodes
    by degree, by path-sum (a betweenness approximation) and by eigenvector
    centrality.
    """
    overrides: dict[str, Any] = {
        "top_k": top_k,
        "render_image": render,
        "output_dir": output_dir,
        "parallel_metrics": True if parallel else None,
    }
    settings = get_settings_for_cli(config_file=config, cli_overrides=overrides)

    graph = load_graph(dataset)
    report = analyze_graph(graph, settings)
    report.source = dataset

    # Render first so a write failure leaves a single error document on stdout
    image_path = None
    if settings.render_image:
        image_path = render_graph(
            graph,
            settings.output_dir,
            filename=settings.image_filename,
            size=(settings.image_width, settings.image_height),
        )

    formatter = ReportFormatter(console)
    if json_output:
        # Plain print keeps the JSON free of ANSI codes
        print(formatter.format(report, OutputFormat.JSON))
        return
    if plain:
        print(formatter.format(report, OutputFormat.TEXT))
    else:
        # Already rendered by rich
        print(formatter.format(report, OutputFormat.TABLE), end="")

    if image_path is not None:
        console.print(f"\n[green]Graph image written to {image_path}[/green]")
