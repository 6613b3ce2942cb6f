"""Integration tests for ``collabrank analyze``."""

import json

import pytest

from collabrank.cli.main import app
from tests.utils import TRIANGLE_PLUS_PAIR, CLITestHelper, strip_ansi_codes

pytestmark = pytest.mark.integration


@pytest.fixture
def cli(tmp_path):
    """CLI helper rooted at the test's tmp_path."""
    return CLITestHelper(tmp_path)


def test_analyze_prints_report_and_renders(cli):
    """Test the default run prints every section and writes the image."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    result, output = cli.analyze(dataset)

    assert result.exit_code == 0, output
    assert "Graph loaded with 5 nodes and 4 edges." in output
    assert "Number of connected components: 2" in output
    assert "Top authors by degree centrality:" in output
    assert "Top authors by betweenness (path-sum approximation) centrality:" in output
    assert "Top authors by eigenvector centrality (scaled x1e6):" in output
    assert "Graph image written" in output

    image = cli.output_dir / "network.png"
    assert image.exists()
    assert image.stat().st_size > 0


def test_no_render(cli):
    """Test --no-render skips the image."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    result, output = cli.analyze(dataset, "--no-render")

    assert result.exit_code == 0, output
    assert "Graph image written" not in output
    assert not (cli.output_dir / "network.png").exists()


def test_json_output(cli):
    """Test --json prints a parseable report and nothing else on stdout."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    result, _ = cli.analyze(dataset, "--json", "--no-render")

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["node_count"] == 5
    assert data["edge_count"] == 4
    assert data["component_count"] == 2
    assert [entry["node_id"] for entry in data["rankings"]["degree"][3:]] == [4, 5]


def test_plain_output_with_top_k(cli):
    """Test --plain with --top-k limits every ranking."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    result, output = cli.analyze(dataset, "--plain", "--top-k", "2", "--no-render")

    assert result.exit_code == 0, output
    author_lines = [line for line in output.splitlines() if line.startswith("Author")]
    assert len(author_lines) == 6


def test_parallel(cli):
    """Test --parallel gives the same JSON report as a serial run."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    serial, _ = cli.analyze(dataset, "--json", "--no-render")
    parallel, _ = cli.analyze(dataset, "--json", "--no-render", "--parallel")

    assert parallel.exit_code == 0
    assert json.loads(parallel.stdout) == json.loads(serial.stdout)


def test_json_render_failure_prints_one_document(cli, tmp_path):
    """Test a failed render under --json leaves only the error object on stdout."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")

    result, _ = cli.analyze(dataset, "--json", "--output-dir", str(blocker / "sub"))

    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["success"] is False
    assert "Failed to write graph image" in data["error"]


def test_render_failure_skips_report(cli, tmp_path):
    """Test a failed render exits before any report is printed."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")

    result, output = cli.analyze(dataset, "--output-dir", str(blocker / "sub"))

    assert result.exit_code == 1
    assert "Failed to write graph image" in output
    assert "Graph loaded with" not in output


def test_missing_dataset(cli, tmp_path):
    """Test a missing dataset exits with code 1 and explains why."""
    result, output = cli.analyze(tmp_path / "missing.txt", "--no-render")

    assert result.exit_code == 1
    assert "Failed to load graph" in output


def test_missing_dataset_json(cli, tmp_path):
    """Test a missing dataset with --json reports a JSON error."""
    result, _ = cli.analyze(tmp_path / "missing.txt", "--json", "--no-render")

    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["success"] is False
    assert "Failed to load graph" in data["error"]


def test_invalid_top_k(cli):
    """Test a top-k below one is rejected."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    result, _ = cli.analyze(dataset, "--top-k", "0", "--no-render")
    assert result.exit_code == 1


def test_command_config_file(cli, tmp_path):
    """Test analyze --config applies file settings."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    config = tmp_path / "run.yaml"
    config.write_text("top_k: 1\nrender_image: false\n", encoding="utf-8")

    result, output = cli.analyze(dataset, "--config", str(config), "--plain")

    assert result.exit_code == 0, output
    assert len([line for line in output.splitlines() if line.startswith("Author")]) == 3
    assert not (cli.output_dir / "network.png").exists()


def test_command_config_missing(cli, tmp_path):
    """Test analyze --config with a missing file fails."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    result, _ = cli.analyze(dataset, "--config", str(tmp_path / "absent.toml"))
    assert result.exit_code == 1


def test_global_config_file(cli, tmp_path):
    """Test the global --config option reaches the analyze command."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    config = tmp_path / "global.json"
    config.write_text(json.dumps({"top_k": 2}), encoding="utf-8")

    result = cli.runner.invoke(
        app,
        ["--config", str(config), "analyze", str(dataset), "--plain", "--no-render"],
    )
    output = strip_ansi_codes(result.output)

    assert result.exit_code == 0, output
    assert len([line for line in output.splitlines() if line.startswith("Author")]) == 6


@pytest.mark.parametrize(
    "content",
    ["top_k: 0\n", "top: 5\n", "- top_k\n"],
    ids=["out-of-range", "misspelled-key", "not-a-mapping"],
)
def test_global_config_file_invalid(cli, tmp_path, content):
    """Test a bad global --config file exits cleanly with the error shown."""
    dataset = cli.write_dataset(TRIANGLE_PLUS_PAIR)
    config = tmp_path / "bad.yaml"
    config.write_text(content, encoding="utf-8")

    result = cli.runner.invoke(
        app, ["--config", str(config), "analyze", str(dataset), "--no-render"]
    )
    output = strip_ansi_codes(result.output)

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error:" in output
    assert "Graph loaded with" not in output
