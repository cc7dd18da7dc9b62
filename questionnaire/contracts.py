"""
Semantic contracts for the questionnaire runner.

This module defines immutable data structures shared between modules.
These are NOT validators - the Config Loader is responsible for building
them correctly from a raw document.

Design principles:
- Frozen dataclasses (immutable after creation)
- Tuples instead of lists for sequences
- No dependencies on other modules

Contents:
- QuestionKind: The three supported question types
- Condition: Show/hide rule referencing an earlier answer
- QuestionDefinition: One question from the document
- QuestionnaireDocument: Title plus ordered questions
- ValidationOutcome: Accept/reject verdict for one raw answer

Usage:
    from questionnaire.contracts import QuestionDefinition, QuestionKind
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class QuestionKind(str, Enum):
    """
    Question type as written in the configuration document.

    String-based so kinds compare equal to their raw JSON values:
        >>> QuestionKind.YES_NO == "yesno"
        True
    """
    TEXT = "text"
    YES_NO = "yesno"
    MULTIPLE_CHOICE = "multiple-choice"


# Single source of truth for valid type strings
# Used by ConfigLoader for schema validation
VALID_KINDS = tuple(kind.value for kind in QuestionKind)


@dataclass(frozen=True)
class Condition:
    """
    Display rule for a question.

    The question is shown only if the answer recorded for question_id
    matches one of expected_answers (trimmed, case-insensitive).

    Attributes:
        question_id: Id of the question whose answer is inspected.
            Should reference an earlier question in the document.
        expected_answers: Acceptable answers. Never empty.
            A single string in the document becomes a one-element tuple.
    """
    question_id: str
    expected_answers: Tuple[str, ...]


@dataclass(frozen=True)
class QuestionDefinition:
    """
    Immutable question representation built by the Config Loader.

    Attributes:
        id: Unique question identifier (e.g., 'q1', 'has_pet').
            Join key for conditions and stored answers.
        text: Prompt text shown to the user.
        kind: QuestionKind (or raw string for kinds the loader never produces).
        choices: Allowed answers for multiple-choice questions, in display
            order. None for text and yes/no questions.
        condition: Optional display rule.

    Examples:
        >>> q = QuestionDefinition(
        ...     id='q3',
        ...     text='What kind of pet?',
        ...     kind=QuestionKind.MULTIPLE_CHOICE,
        ...     choices=('Dog', 'Cat', 'Bird'),
        ...     condition=Condition('q2', ('yes', 'y'))
        ... )
        >>> q.choices
        ('Dog', 'Cat', 'Bird')
    """
    id: str
    text: str
    kind: QuestionKind = QuestionKind.TEXT
    choices: Optional[Tuple[str, ...]] = None
    condition: Optional[Condition] = None


@dataclass(frozen=True)
class QuestionnaireDocument:
    """
    Parsed and validated questionnaire.

    Owned by the caller; lent to the Session Engine for one session.

    Attributes:
        title: Questionnaire title, displayed once per session
        questions: Ordered question definitions (at least one)
    """
    title: str
    questions: Tuple[QuestionDefinition, ...]

    def get_question(self, question_id: str) -> Optional[QuestionDefinition]:
        """Return the question with the given id, or None if unknown."""
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Result of checking one raw answer against its question.

    Attributes:
        is_valid: Whether the answer is acceptable
        reason: User-facing explanation when invalid, None when valid
    """
    is_valid: bool
    reason: Optional[str] = None

    @classmethod
    def valid(cls) -> "ValidationOutcome":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationOutcome":
        return cls(is_valid=False, reason=reason)
