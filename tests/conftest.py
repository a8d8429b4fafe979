"""Root conftest for test suite - adds src to Python path and shared fakes."""

import logging
import sys
from pathlib import Path

# Add src directory to Python path so tests run without an install
src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

import pytest  # noqa: E402

from idea_scout.types.search import RawResult  # noqa: E402


class FakeSearchGateway:
    """In-memory search gateway that records every query it receives."""

    def __init__(self, results: list[RawResult] | None = None, error: Exception | None = None):
        self.results = results
        self.error = error
        self.calls: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def search(self, query: str) -> list[RawResult] | None:
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return self.results


@pytest.fixture
def make_gateway():
    """Build a FakeSearchGateway from plain dicts (or None for a failed search)."""

    def _make(items: list[dict] | None = None, error: Exception | None = None):
        results = None if items is None else [RawResult(**item) for item in items]
        return FakeSearchGateway(results=results, error=error)

    return _make


@pytest.fixture
def quizlet_result() -> dict:
    """A product homepage that matches the study-app idea closely."""
    return {
        "title": "Quizlet - Study with flashcards",
        "description": "The AI-powered study app and learning platform trusted by college students",
        "url": "https://quizlet.com",
    }


@pytest.fixture
def capture_logger(caplog):
    """Route one idea_scout logger into caplog.

    Package loggers do not propagate to the root logger, so caplog only sees
    their records once its handler is attached directly.
    """
    attached = []

    def _capture(name: str):
        logger = logging.getLogger(name)
        logger.addHandler(caplog.handler)
        attached.append(logger)
        return caplog

    yield _capture

    for logger in attached:
        logger.removeHandler(caplog.handler)
