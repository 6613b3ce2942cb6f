"""JSON output formatter for CLI."""

from __future__ import annotations

import json
from typing import Any

from collabrank.cli.formatters.base import OutputFormat, OutputFormatter


class JsonFormatter(OutputFormatter[Any]):
    """Serialize reports, version info and errors as indented JSON."""

    def format(self, data: Any, format_type: OutputFormat = OutputFormat.JSON) -> str:  # noqa: ARG002
        """Format a mapping, or an object with ``to_dict()``, as JSON.

        Args:
            data: Report or plain dictionary
            format_type: Ignored, always JSON

        Returns:
            JSON string
        """
        if hasattr(data, "to_dict"):
            data = data.to_dict()
        return json.dumps(data, default=str, indent=2)

    def format_error_response(self, error: str | Exception, code: int = 1) -> str:
        """Format a failed command as ``{"success": false, ...}``.

        Args:
            error: Error message or exception
            code: Exit code reported alongside the message

        Returns:
            JSON string
        """
        response = {"success": False, "error": str(error), "code": code}
        return json.dumps(response, indent=2)
