"""Pytest configuration and fixtures for vertextual tests."""

import pytest

from vertextual.config import AppearanceConfig
from vertextual.parser import EdgeCompiler, SelfLoopPolicy


@pytest.fixture
def compiler():
    """Compiler with the default self-loop policy."""
    return EdgeCompiler()


@pytest.fixture
def dropping_compiler():
    """Compiler that removes self-loops."""
    return EdgeCompiler(self_loops=SelfLoopPolicy.DROP)


@pytest.fixture
def appearance():
    """Default appearance settings."""
    return AppearanceConfig()


@pytest.fixture
def workflow_text():
    """A small network using every carry-over rule."""
    return "\n".join([
        "Daydream > Idea",
        "> Sketch",
        "^ Doodle",
        "> Sketch",
        "",
        "not an edge",
        "Sketch > Daydream",
    ])
