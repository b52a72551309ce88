"""Pytest configuration and fixtures."""

import pytest

from fairqueue import PriorityQueue, TakingTurnsQueue


@pytest.fixture
def priority_queue():
    """Create an empty priority queue."""
    return PriorityQueue()


@pytest.fixture
def turns_queue():
    """Create an empty turn-taking queue."""
    return TakingTurnsQueue()


@pytest.fixture
def scenario_file(tmp_path):
    """Write scenario YAML to a temporary file and return its path."""

    def write(content: str):
        path = tmp_path / "scenario.yaml"
        path.write_text(content)
        return path

    return write
