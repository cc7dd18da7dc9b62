"""
Response Validator - Per-type validation of raw user answers

Responsibilities:
- Reject empty input for every question type
- Check yes/no answers (case-insensitive)
- Check multiple-choice answers against the defined choices (case-sensitive)

Design principles:
- Stateless: all input comes from parameters
- Deterministic: same input always produces same outcome
- Pure functions: no side effects
"""

import logging

from questionnaire.contracts import QuestionDefinition, QuestionKind, ValidationOutcome

logger = logging.getLogger(__name__)


class ResponseValidator:
    """
    Validates raw answers against their question definition.

    Failures carry a user-facing reason that the Session Engine shows
    before asking the same question again.
    """

    EMPTY_INPUT_MESSAGE = "Input cannot be empty. Please provide an answer."
    YES_NO_MESSAGE = "Invalid input. Expected: yes, no, y, or n (case-insensitive). Please try again."
    NO_CHOICES_MESSAGE = "No choices defined for this question."

    YES_NO_ANSWERS = {"yes", "no", "y", "n"}

    def validate(self, raw_input: str, question: QuestionDefinition) -> ValidationOutcome:
        """
        Validate user input against question configuration.

        Args:
            raw_input: Untrimmed line typed by the user
            question: Question being answered

        Returns:
            ValidationOutcome (reason set when invalid)
        """
        trimmed = raw_input.strip()

        # Applies to all question types, before type-specific checks
        if trimmed == "":
            return ValidationOutcome.invalid(self.EMPTY_INPUT_MESSAGE)

        if question.kind == QuestionKind.TEXT:
            return ValidationOutcome.valid()

        if question.kind == QuestionKind.YES_NO:
            return self._validate_yes_no(trimmed)

        if question.kind == QuestionKind.MULTIPLE_CHOICE:
            return self._validate_multiple_choice(trimmed, question)

        kind = question.kind.value if isinstance(question.kind, QuestionKind) else question.kind
        logger.warning(f"Question '{question.id}' has unknown type: {kind}")
        return ValidationOutcome.invalid(f"Unknown question type: {kind}")

    def _validate_yes_no(self, trimmed: str) -> ValidationOutcome:
        if trimmed.lower() in self.YES_NO_ANSWERS:
            return ValidationOutcome.valid()
        return ValidationOutcome.invalid(self.YES_NO_MESSAGE)

    def _validate_multiple_choice(self, trimmed: str, question: QuestionDefinition) -> ValidationOutcome:
        """
        Exact membership test against question.choices.

        Case is NOT normalized: 'red' does not match 'Red'.
        """
        if not question.choices:
            # Configuration defect, not a user error
            return ValidationOutcome.invalid(self.NO_CHOICES_MESSAGE)

        if trimmed in question.choices:
            return ValidationOutcome.valid()

        choices_list = ", ".join(question.choices)
        return ValidationOutcome.invalid(
            f"Invalid choice. Expected one of: {choices_list}. Please try again."
        )
