"""
Pytest configuration and fixtures for the test suite.
"""

import os
from unittest.mock import patch

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run every test without MD_STYLER_* variables or a stray .env file."""
    monkeypatch.chdir(tmp_path)
    environment = {key: value for key, value in os.environ.items() if not key.startswith("MD_STYLER_")}
    with patch.dict(os.environ, environment, clear=True):
        yield


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added during a test, e.g. by the CLI's logging setup."""
    yield
    logger.remove()


@pytest.fixture
def markdown_file(tmp_path):
    """Create a Markdown file with the given content and return its path."""

    def _create(content: str, name: str = "document.md"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8", newline="")
        return path

    return _create
