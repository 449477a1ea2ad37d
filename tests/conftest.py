"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable, Generator

os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient

from esas_triage.knowledge.base import KnowledgeBase, load_knowledge_base
from esas_triage.main import app


@pytest.fixture(scope="session")
def knowledge_base() -> KnowledgeBase:
    """Load the packaged knowledge base once for all tests."""
    return load_knowledge_base()


@pytest.fixture
def make_answers() -> Callable[..., dict[str, int]]:
    """Build a full ESAS answer set, all zeros unless overridden.

    Usage: make_answers({1: 9}) or make_answers(default=5)
    """

    def _make(overrides: dict[int, int] | None = None, default: int = 0) -> dict[str, int]:
        answers = {str(i): default for i in range(1, 10)}
        for item, score in (overrides or {}).items():
            answers[str(item)] = score
        return answers

    return _make


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client
