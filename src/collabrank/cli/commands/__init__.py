"""collabrank CLI commands."""

from __future__ import annotations

from collabrank.cli.commands.analyze import analyze_command

__all__ = [
    "analyze_command",
]
