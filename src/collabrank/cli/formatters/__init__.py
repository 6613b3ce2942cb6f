"""CLI output formatters."""

from collabrank.cli.formatters.base import OutputFormat, OutputFormatter
from collabrank.cli.formatters.json_formatter import JsonFormatter
from collabrank.cli.formatters.report_formatter import ReportFormatter

__all__ = [
    "JsonFormatter",
    "OutputFormat",
    "OutputFormatter",
    "ReportFormatter",
]
