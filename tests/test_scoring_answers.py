"""Unit tests for ASQ-3 answer scoring."""

import pytest

from app.scoring.answers import (
    ANSWER_SCORES,
    calculate_domain_score,
    calculate_max_score,
    score_answer,
)
from app.scoring.models import AnswerValue, Domain
from app.services.screening import AnswerSubmission


class TestScoreAnswer:
    """Tests for single answer scoring."""

    def test_answer_mapping(self) -> None:
        """Test the fixed answer-to-score mapping."""
        assert score_answer(AnswerValue.YES) == 10
        assert score_answer(AnswerValue.SOMETIMES) == 5
        assert score_answer(AnswerValue.NOT_YET) == 0

    def test_mapping_is_total(self) -> None:
        """Test every answer value has exactly one score."""
        assert set(ANSWER_SCORES) == set(AnswerValue)

    def test_accepts_string_values(self) -> None:
        """Test raw string answer values are scored."""
        assert score_answer("SOMETIMES") == 5

    def test_unknown_answer_rejected(self) -> None:
        """Test unknown answer values raise instead of defaulting."""
        with pytest.raises(ValueError):
            score_answer("MAYBE")


class TestCalculateDomainScore:
    """Tests for domain total calculation."""

    def test_empty_is_zero(self) -> None:
        """Test a domain with no answers scores zero."""
        assert calculate_domain_score([]) == 0

    def test_all_yes_equals_max(self) -> None:
        """Test all-YES answers reach the maximum score."""
        for n in range(0, 8):
            answers = [AnswerValue.YES] * n
            assert calculate_domain_score(answers) == 10 * n == calculate_max_score(n)

    def test_mixed_answers(self) -> None:
        """Test mixed answers sum their mapped scores."""
        answers = ["YES", "SOMETIMES", "NOT_YET", "YES"]
        assert calculate_domain_score(answers) == 25

    def test_order_independent(self) -> None:
        """Test the total doesn't depend on answer order."""
        answers = [AnswerValue.NOT_YET, AnswerValue.YES, AnswerValue.SOMETIMES]
        assert calculate_domain_score(answers) == calculate_domain_score(answers[::-1])

    def test_explicit_score_overrides_mapping(self) -> None:
        """Test an explicit item score takes precedence."""
        answers = [
            {"answer": "YES", "score": 7},
            {"answer": "SOMETIMES"},
        ]
        assert calculate_domain_score(answers) == 12

    def test_explicit_zero_is_respected(self) -> None:
        """Test an explicit zero is not treated as missing."""
        assert calculate_domain_score([{"answer": "YES", "score": 0}]) == 0

    def test_submission_objects(self) -> None:
        """Test answer objects with attributes are scored."""
        answers = [
            AnswerSubmission("q1", Domain.FINE_MOTOR, AnswerValue.YES),
            AnswerSubmission("q2", Domain.FINE_MOTOR, AnswerValue.NOT_YET, score=5),
        ]
        assert calculate_domain_score(answers) == 15


class TestCalculateMaxScore:
    """Tests for maximum possible score."""

    @pytest.mark.parametrize("count,expected", [(0, 0), (1, 10), (6, 60)])
    def test_ten_points_per_question(self, count: int, expected: int) -> None:
        """Test maximum is ten points per question."""
        assert calculate_max_score(count) == expected
