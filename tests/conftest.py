"""Pytest configuration and fixtures."""

import pytest

from gremlin_translator.process.traversal import GraphTraversalSource
from gremlin_translator.renderer.translator import Translator


@pytest.fixture
def g() -> GraphTraversalSource:
    """A fresh traversal source with no source instructions."""
    return GraphTraversalSource()


@pytest.fixture
def translator() -> Translator:
    """Default translator for the ``g`` source."""
    return Translator("g")
