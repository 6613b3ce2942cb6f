"""Analysis report formatter for CLI."""

from __future__ import annotations

import io

from rich.console import Console
from rich.table import Table

from collabrank.analysis.centrality import CentralityMetric
from collabrank.analysis.ranking import RankedEntry
from collabrank.analysis.report import AnalysisReport
from collabrank.cli.formatters.base import OutputFormat, OutputFormatter
from collabrank.cli.formatters.json_formatter import JsonFormatter


def metric_heading(metric: CentralityMetric) -> str:
    """Heading for a metric's ranking section."""
    if metric == CentralityMetric.EIGENVECTOR:
        return f"Top authors by {metric.label} centrality (scaled x1e6)"
    return f"Top authors by {metric.label} centrality"


class ReportFormatter(OutputFormatter[AnalysisReport]):
    """Formatter for graph analysis reports."""

    def format(
        self, data: AnalysisReport, format_type: OutputFormat = OutputFormat.TABLE
    ) -> str:
        """Format an analysis report.

        Args:
            data: Report to format
            format_type: Output format type

        Returns:
            Formatted string
        """
        if format_type == OutputFormat.JSON:
            return JsonFormatter().format(data)
        if format_type == OutputFormat.TABLE:
            return self._format_tables(data)
        return self._format_text(data)

    def format_summary(self, data: AnalysisReport) -> str:
        """Format the graph size and component lines."""
        return (
            f"Graph loaded with {data.node_count} nodes and {data.edge_count} edges.\n"
            f"Number of connected components: {data.component_count}"
        )

    def _format_text(self, data: AnalysisReport) -> str:
        lines = [self.format_summary(data)]
        for metric, entries in data.rankings.items():
            lines.append("")
            lines.append(f"{metric_heading(metric)}:")
            lines.extend(
                f"Author {entry.node_id}: {entry.score}" for entry in entries
            )
        return "\n".join(lines)

    def _format_tables(self, data: AnalysisReport) -> str:
        string_io = io.StringIO()
        temp_console = Console(file=string_io, force_terminal=True)
        temp_console.print(self.format_summary(data))
        for metric, entries in data.rankings.items():
            temp_console.print()
            temp_console.print(f"[bold]{metric_heading(metric)}:[/bold]")
            temp_console.print(self._build_table(entries))
        return string_io.getvalue()

    def _build_table(self, entries: list[RankedEntry]) -> Table:
        table = Table(show_header=True)
        table.add_column("Rank", style="dim", justify="right")
        table.add_column("Node", style="cyan", justify="right")
        table.add_column("Score", style="green", justify="right")

        for rank, entry in enumerate(entries, 1):
            table.add_row(str(rank), str(entry.node_id), str(entry.score))
        return table
