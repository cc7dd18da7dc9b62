"""
Config Loader - Load questionnaire documents from JSON files

Responsibilities:
- Read the configuration file
- Parse raw JSON into a generic structure
- Validate the document shape and build immutable contracts

Design principles:
- Two phases: parse (bytes -> dict), then validate/convert (dict -> contracts)
- Fail fast: first violation found raises ConfigSchemaError
- Question-level errors name the 0-based question index
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Tuple

from questionnaire.contracts import (
    Condition,
    QuestionDefinition,
    QuestionKind,
    QuestionnaireDocument,
    VALID_KINDS,
)
from questionnaire.errors import ConfigNotFoundError, ConfigParseError, ConfigSchemaError

logger = logging.getLogger(__name__)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


class ConfigLoader:
    """
    Configuration provider for the Session Engine.

    Stateless; safe to share between sessions. Each load() re-reads the file.
    """

    def load(self, path) -> QuestionnaireDocument:
        """
        Load questionnaire configuration from a JSON file.

        Args:
            path: Path to the configuration file (str or Path)

        Returns:
            QuestionnaireDocument

        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigParseError: If the file is not valid JSON
            ConfigSchemaError: If the document shape is invalid
        """
        config_path = Path(path)

        try:
            content = config_path.read_text(encoding='utf-8')
        except FileNotFoundError:
            raise ConfigNotFoundError(f"Configuration file not found: {path}") from None
        except UnicodeDecodeError as e:
            raise ConfigParseError(f"Failed to parse JSON: {e}") from e

        document = self.loads(content)
        logger.info(
            f"Loaded questionnaire '{document.title}' with "
            f"{len(document.questions)} questions from {config_path}"
        )
        return document

    def loads(self, content: str) -> QuestionnaireDocument:
        """
        Parse and validate a JSON document held in memory.

        Raises:
            ConfigParseError: If content is not valid JSON
            ConfigSchemaError: If the document shape is invalid
        """
        try:
            raw = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigParseError(f"Failed to parse JSON: {e}") from e

        return self.build_document(raw)

    # =========================================================================
    # Validation / conversion
    # =========================================================================

    def build_document(self, raw: Any) -> QuestionnaireDocument:
        """
        Validate a generic parsed value and convert it to contracts.

        Args:
            raw: Result of json.loads()

        Returns:
            QuestionnaireDocument

        Raises:
            ConfigSchemaError: At the first violation found
        """
        if not isinstance(raw, dict):
            raise ConfigSchemaError("Configuration must be an object")

        title = raw.get("title")
        if not _is_non_empty_string(title):
            raise ConfigSchemaError('Configuration must have a "title" field of type string')

        raw_questions = raw.get("questions")
        if not isinstance(raw_questions, list):
            raise ConfigSchemaError('Configuration must have a "questions" field of type array')

        if not raw_questions:
            raise ConfigSchemaError("Configuration must have at least one question")

        questions = []
        seen_ids = set()

        for index, raw_question in enumerate(raw_questions):
            question = self._build_question(raw_question, index)

            if question.id in seen_ids:
                raise ConfigSchemaError(
                    f'Question at index {index} has duplicate id "{question.id}"'
                )
            seen_ids.add(question.id)

            questions.append(question)

        return QuestionnaireDocument(title=title, questions=tuple(questions))

    def _build_question(self, raw: Any, index: int) -> QuestionDefinition:
        if not isinstance(raw, dict):
            raise ConfigSchemaError(f"Question at index {index} must be an object")

        for key in ("id", "text", "type"):
            if not _is_non_empty_string(raw.get(key)):
                article = "an" if key == "id" else "a"
                raise ConfigSchemaError(
                    f'Question at index {index} must have {article} "{key}" field of type string'
                )

        q_type = raw["type"]
        if q_type not in VALID_KINDS:
            raise ConfigSchemaError(
                f'Question at index {index} has invalid type "{q_type}". '
                f"Must be one of: {', '.join(VALID_KINDS)}"
            )
        kind = QuestionKind(q_type)

        choices = None
        if kind == QuestionKind.MULTIPLE_CHOICE:
            choices = self._build_choices(raw.get("choices"), index)

        condition = None
        if "condition" in raw:
            condition = self._build_condition(raw["condition"], index)

        return QuestionDefinition(
            id=raw["id"],
            text=raw["text"],
            kind=kind,
            choices=choices,
            condition=condition,
        )

    def _build_choices(self, raw_choices: Any, index: int) -> Tuple[str, ...]:
        if not isinstance(raw_choices, list) or not raw_choices:
            raise ConfigSchemaError(
                f'Question at index {index} with type "multiple-choice" '
                f'must have a non-empty "choices" array'
            )

        if not all(isinstance(choice, str) for choice in raw_choices):
            raise ConfigSchemaError(
                f"Question at index {index} has invalid choices. All choices must be strings"
            )

        return tuple(raw_choices)

    def _build_condition(self, raw: Any, index: int) -> Condition:
        """
        Convert a raw condition.

        expectedAnswer may be a single string or a non-empty list of strings;
        both become a tuple.
        """
        if not isinstance(raw, dict):
            raise ConfigSchemaError(
                f"Question at index {index} has invalid condition. Must be an object"
            )

        question_id = raw.get("questionId")
        if not _is_non_empty_string(question_id):
            raise ConfigSchemaError(
                f'Question at index {index} condition must have a "questionId" field of type string'
            )

        if "expectedAnswer" not in raw:
            raise ConfigSchemaError(
                f'Question at index {index} condition must have an "expectedAnswer" field'
            )

        expected = raw["expectedAnswer"]
        if isinstance(expected, str):
            expected_answers: List[str] = [expected]
        elif (isinstance(expected, list) and expected
              and all(isinstance(item, str) for item in expected)):
            expected_answers = expected
        else:
            raise ConfigSchemaError(
                f'Question at index {index} condition "expectedAnswer" must be '
                f"a string or non-empty array of strings"
            )

        return Condition(question_id=question_id, expected_answers=tuple(expected_answers))

