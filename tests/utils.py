"""Common test utilities for collabrank tests."""

import re
from pathlib import Path

from typer.testing import CliRunner, Result

from collabrank.cli.main import app

TRIANGLE_PLUS_PAIR = "1 2\n2 3\n3 1\n4 5\n"


def strip_ansi_codes(text: str) -> str:
    """Strip ANSI escape sequences and box-drawing characters from text.

    Rich tables render differently across terminals, so CLI assertions run
    against the stripped text.

    Args:
        text: Text potentially containing ANSI escape codes

    Returns:
        Text with all ANSI escape sequences removed
    """
    ansi_escape = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")
    text = ansi_escape.sub("", text)

    box_chars = re.compile(r"[━─│┃┏┓┗┛┡┩┠┨┯┷┼╇╈┳┻╋┌┐└┘├┤┬┴╭╮╰╯]")
    return box_chars.sub(" ", text)


class CLITestHelper:
    """Helper class for invoking the CLI against datasets in a temp dir."""

    def __init__(self, tmp_path: Path):
        """Initialize the CLI test helper.

        Args:
            tmp_path: Temporary directory path from pytest fixture
        """
        self.tmp_path = tmp_path
        self.runner = CliRunner()
        self.output_dir = tmp_path / "output"

    def write_dataset(self, content: str, name: str = "edges.txt") -> Path:
        """Write an edge-list file and return its path."""
        path = self.tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    def analyze(self, dataset: Path, *args: str) -> tuple[Result, str]:
        """Run ``collabrank analyze`` and return the result plus cleaned output."""
        result = self.runner.invoke(
            app,
            ["analyze", str(dataset), "--output-dir", str(self.output_dir), *args],
        )
        return result, strip_ansi_codes(result.output)
