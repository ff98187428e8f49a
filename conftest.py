"""
Pytest configuration for ninjagen test suite.

Provides shared fixtures for graph construction and project descriptions.
"""

import pytest

from ninjagen.build.graph import BuildGraph
from ninjagen.build.rules import DEFAULT_RULES


@pytest.fixture
def graph():
    """Empty graph with the shared rule templates declared."""
    g = BuildGraph()
    for template in DEFAULT_RULES:
        g.rule(template)
    return g


@pytest.fixture
def write_project(tmp_path):
    """Write INI text to a project file and return its path."""

    def _write(content, name="project.ini"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
