"""ASQ-3 answer scoring.

Each item is scored:
- YES = 10
- SOMETIMES = 5
- NOT_YET = 0

A domain total is the sum of its item scores. A submitted item may carry an
explicit score, which takes precedence over the mapped value.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from app.scoring.models import AnswerValue

ANSWER_SCORES: dict[AnswerValue, int] = {
    AnswerValue.YES: 10,
    AnswerValue.SOMETIMES: 5,
    AnswerValue.NOT_YET: 0,
}

MAX_ITEM_SCORE = ANSWER_SCORES[AnswerValue.YES]


def score_answer(answer: AnswerValue | str) -> int:
    """Score a single answer.

    Raises:
        ValueError: If the string is not a known answer value.
    """
    return ANSWER_SCORES[AnswerValue(answer)]


def _item_score(item: Any) -> float:
    """Resolve the score of one submitted item."""
    if isinstance(item, (AnswerValue, str)):
        return score_answer(item)

    if isinstance(item, Mapping):
        explicit = item.get("score")
        answer = item.get("answer")
    else:
        explicit = getattr(item, "score", None)
        answer = getattr(item, "answer", None)

    if explicit is not None:
        return explicit
    return score_answer(answer)


def calculate_domain_score(answers: Iterable[Any]) -> float:
    """Calculate the total score for one domain.

    Args:
        answers: Answer values, or objects/mappings with ``answer`` and an
                 optional explicit ``score``

    Returns:
        Sum of item scores (0 for no answers)
    """
    return sum(_item_score(item) for item in answers)


def calculate_max_score(question_count: int) -> int:
    """Calculate maximum possible score for a number of questions."""
    return question_count * MAX_ITEM_SCORE
