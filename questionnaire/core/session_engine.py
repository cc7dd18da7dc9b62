"""
Session Engine - Questionnaire session orchestration

Responsibilities:
- Load the questionnaire once per session
- Walk questions in document order, skipping hidden ones
- Prompt / validate / retry until each visible question has a valid answer
- Return an immutable SessionResult

Design principles:
- One Answer Set per run_session() call (no state between sessions)
- Thin orchestration layer (rules live in ResponseValidator and ConditionEvaluator)
- Configuration errors propagate unmodified (no partial result)
- Validation errors never propagate (retried in place, no retry cap)
"""

import logging
from typing import Dict, Optional

from questionnaire.contracts import QuestionDefinition
from questionnaire.results import SessionResult
from questionnaire.utils.display_helpers import build_prompt_text, format_title
from questionnaire.utils.helpers import generate_session_id

logger = logging.getLogger(__name__)


class QuestionnaireEngine:
    """
    Runs questionnaire sessions against a prompt/display capability.

    Collaborators are cached; sessions are not. The same engine can run
    any number of sessions one after another.
    """

    REQUIRED_METHODS = {
        'config_loader': ('load',),
        'validator': ('validate',),
        'condition_evaluator': ('should_display',),
        'input_handler': ('prompt', 'display', 'display_error'),
    }

    def __init__(self, config_loader, validator, condition_evaluator, input_handler,
                 config_path: str):
        """
        Initialize engine with collaborator instances.

        Args:
            config_loader: ConfigLoader (or anything with load(path))
            validator: ResponseValidator (validate(raw_input, question))
            condition_evaluator: ConditionEvaluator (should_display(question, answers))
            input_handler: ConsoleInputHandler (prompt, display, display_error)
            config_path: Questionnaire path passed to config_loader.load()

        Raises:
            TypeError: If any collaborator is missing a required method
        """
        self._validate_modules(
            config_loader=config_loader,
            validator=validator,
            condition_evaluator=condition_evaluator,
            input_handler=input_handler,
        )

        self.config_loader = config_loader
        self.validator = validator
        self.condition_evaluator = condition_evaluator
        self.input_handler = input_handler
        self.config_path = config_path

        logger.info(f"Questionnaire engine initialized (config: {config_path})")

    def _validate_modules(self, **modules):
        """Validate collaborator interfaces"""
        for name, module in modules.items():
            for method in self.REQUIRED_METHODS[name]:
                if not callable(getattr(module, method, None)):
                    raise TypeError(f"{name} must have callable {method}() method")

    def run_session(self, session_id: Optional[str] = None) -> SessionResult:
        """
        Run one complete questionnaire session.

        Args:
            session_id: Identifier for this session (generated if omitted)

        Returns:
            SessionResult with one answer per displayed question

        Raises:
            ConfigError: Propagated unmodified from the config loader
        """
        if session_id is None:
            session_id = generate_session_id()

        logger.info(f"Starting session {session_id}")

        document = self.config_loader.load(self.config_path)
        logger.info(f"Loaded questionnaire: {document.title}")

        answers: Dict[str, str] = {}

        self.input_handler.display(format_title(document.title))

        for question in document.questions:
            if not self.condition_evaluator.should_display(question, answers):
                logger.info(f"Skipping question {question.id} due to unmet condition")
                continue

            answers[question.id] = self._prompt_until_valid(question)
            logger.info(f"Stored response for {question.id}: {answers[question.id]}")

        result = SessionResult(session_id=session_id, answers=answers, document=document)
        logger.info(f"Session {session_id} completed with {result.answer_count} responses")

        return result

    def _prompt_until_valid(self, question: QuestionDefinition) -> str:
        """
        Ask one question until the answer validates.

        No retry limit: only a valid answer (or an interrupt handled by the
        input handler) leaves this loop.

        Returns:
            Trimmed valid answer
        """
        prompt_text = build_prompt_text(question)

        while True:
            raw_input = self.input_handler.prompt(prompt_text)
            outcome = self.validator.validate(raw_input, question)

            if outcome.is_valid:
                return raw_input.strip()

            logger.debug(f"Invalid response for {question.id}: {outcome.reason}")
            if outcome.reason:
                self.input_handler.display_error(outcome.reason)
