"""
Condition Evaluator - Show/hide decision for conditional questions

Missing answers evaluate to False (referenced question not answered =
condition not met), so a question depending on a skipped question is
itself skipped.
"""

import logging
from typing import Mapping

from questionnaire.contracts import QuestionDefinition

logger = logging.getLogger(__name__)


def _normalize(answer: str) -> str:
    return answer.strip().lower()


class ConditionEvaluator:
    """Stateless evaluator for QuestionDefinition.condition."""

    def should_display(self, question: QuestionDefinition, answers: Mapping[str, str]) -> bool:
        """
        Decide whether a question is shown given the answers so far.

        Args:
            question: Question to evaluate
            answers: Question id -> answer for questions already answered

        Returns:
            True if the question has no condition, or the referenced answer
            matches one of the expected answers (trimmed, case-insensitive).
        """
        condition = question.condition
        if condition is None:
            return True

        previous = answers.get(condition.question_id)
        if previous is None:
            logger.debug(
                f"Question '{question.id}' depends on unanswered '{condition.question_id}'"
            )
            return False

        normalized = _normalize(previous)
        return any(_normalize(expected) == normalized for expected in condition.expected_answers)
