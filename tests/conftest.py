"""Shared test fixtures."""

import io
from unittest.mock import MagicMock

import pytest

from concept.notion.directory import PageDirectory


@pytest.fixture
def directory() -> MagicMock:
    """A PageDirectory double; no Notion calls are made."""
    return MagicMock(spec=PageDirectory)


@pytest.fixture
def out() -> io.StringIO:
    """Captures progress lines written by the trim command."""
    return io.StringIO()
