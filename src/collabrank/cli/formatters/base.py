"""Shared pieces of the CLI output formatters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Generic, TypeVar

from rich.console import Console

T = TypeVar("T")


class OutputFormat(str, Enum):
    """How analyze prints its report."""

    TEXT = "text"  # "Author id: score" lines
    JSON = "json"
    TABLE = "table"  # rich tables


class OutputFormatter(ABC, Generic[T]):
    """Turn a result object into printable text.

    The console supplies width and color settings for rich rendering.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    @abstractmethod
    def format(self, data: T, format_type: OutputFormat) -> str:
        """Render ``data`` in ``format_type``."""
