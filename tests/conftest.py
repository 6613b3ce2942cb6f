"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from collabrank.config import (
    CollabRankSettings,
    configure_logging,
    reset_settings,
    set_settings,
)
from collabrank.graph import Graph, build_graph
from tests.utils import TRIANGLE_PLUS_PAIR


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow running (may need extended timeout)",
    )


@pytest.fixture(autouse=True)
def isolated_test_environment(tmp_path, monkeypatch):
    """Run every test with isolated settings and no stray COLLABRANK_ env vars.

    Output lands in the test's tmp_path so nothing is written to the repo.
    """
    import os

    for var in [k for k in os.environ if k.startswith("COLLABRANK_")]:
        monkeypatch.delenv(var)
    # Recorded so values written by --verbose/--debug are undone afterwards
    monkeypatch.setenv("COLLABRANK_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("COLLABRANK_DEBUG", "false")
    monkeypatch.chdir(tmp_path)

    reset_settings()
    settings = CollabRankSettings(_env_file=None, output_dir=tmp_path / "output")
    set_settings(settings)
    # Rebind handlers to this test's stderr; CLI flags may have replaced them
    configure_logging(settings)

    yield

    reset_settings()


@pytest.fixture
def dataset_file(tmp_path: Path) -> Path:
    """Edge-list file with a triangle {1,2,3} and a pair {4,5}."""
    path = tmp_path / "ca-GrQc.txt"
    path.write_text(TRIANGLE_PLUS_PAIR, encoding="utf-8")
    return path


@pytest.fixture
def path_graph() -> Graph:
    """Path graph 1 - 2 - 3."""
    return build_graph([(1, 2), (2, 3)])


@pytest.fixture
def two_component_graph() -> Graph:
    """Components {1-2-3} and {4-5}."""
    return build_graph([(1, 2), (2, 3), (4, 5)])


@pytest.fixture
def star_graph() -> Graph:
    """Star with hub 0 and leaves 1..5."""
    return build_graph([(0, leaf) for leaf in range(1, 6)])
