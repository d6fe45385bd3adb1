from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable repo builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch: pytest.MonkeyPatch):
    """Disable ANSI colours and undo CLI logging setup between tests."""
    monkeypatch.setenv("NO_COLOR", "1")
    yield
    logger = logging.getLogger("svcguard")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
