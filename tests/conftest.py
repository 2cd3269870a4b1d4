"""Pytest configuration and fixtures."""

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_cutoff_table
from app.main import app
from app.scoring.models import AnswerValue, Domain
from app.services.screening import AnswerSubmission


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create FastAPI test client using the built-in cutoff table."""
    get_cutoff_table.cache_clear()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    get_cutoff_table.cache_clear()


@pytest.fixture
def reference_date() -> date:
    """Fixed "today" for age calculations."""
    return date(2024, 6, 15)


def _build_answers(
    domain: Domain,
    answer: AnswerValue,
    count: int = 6,
) -> list[AnswerSubmission]:
    prefix = domain.value.lower()
    return [
        AnswerSubmission(question_id=f"{prefix}_{i}", domain=domain, answer=answer)
        for i in range(1, count + 1)
    ]


def _build_payload(
    domain: Domain,
    answer: AnswerValue,
    count: int = 6,
) -> list[dict]:
    return [
        {"question_id": a.question_id, "domain": a.domain.value, "answer": a.answer.value}
        for a in _build_answers(domain, answer, count)
    ]


@pytest.fixture
def make_answers():
    """Factory building ``count`` identical answers for one domain."""
    return _build_answers


@pytest.fixture
def answers_payload():
    """Factory building a JSON answers list for API requests."""
    return _build_payload
