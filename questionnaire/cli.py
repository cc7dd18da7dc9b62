"""
Console entry point for the questionnaire runner

Runs sessions in a loop until the operator declines to start another one.

Error policy:
- ConfigError: fatal, exit status 1
- Anything else: offer one retry-or-exit choice
"""

import logging
import sys

from questionnaire.core.condition_evaluator import ConditionEvaluator
from questionnaire.core.config_loader import ConfigLoader
from questionnaire.core.response_validator import ResponseValidator
from questionnaire.core.session_engine import QuestionnaireEngine
from questionnaire.errors import ConfigError
from questionnaire.utils.console_io import ConsoleInputHandler
from questionnaire.utils.display_helpers import format_session_summary
from questionnaire.utils.helpers import resolve_config_path, resolve_log_level

logger = logging.getLogger(__name__)

AFFIRMATIVE_ANSWERS = {"yes", "y"}

NEW_SESSION_PROMPT = "Would you like to start a new session? (yes/no): "
RETRY_PROMPT = "An error occurred. Would you like to try again? (yes/no): "
FAREWELL_MESSAGE = "\nThank you for using the Questionnaire Engine. Goodbye!"


def configure_logging():
    """Configure root logging once for the console run"""
    logging.basicConfig(
        level=resolve_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def is_affirmative(response):
    return response.strip().lower() in AFFIRMATIVE_ANSWERS


def build_engine(input_handler, config_path):
    """Wire the engine with its default collaborators"""
    return QuestionnaireEngine(
        config_loader=ConfigLoader(),
        validator=ResponseValidator(),
        condition_evaluator=ConditionEvaluator(),
        input_handler=input_handler,
        config_path=config_path
    )


def run(engine, input_handler):
    """
    Session loop.

    Args:
        engine: QuestionnaireEngine
        input_handler: Prompt/display capability shared with the engine

    Returns:
        int: Process exit status (0 normal exit, 1 configuration error)
    """
    session_count = 0

    while True:
        session_count += 1
        logger.info(f"Starting session {session_count}")

        try:
            result = engine.run_session()

        except ConfigError as e:
            logger.error(f"Unrecoverable configuration error, exiting: {e}")
            input_handler.display_error(f"Error: {e}")
            input_handler.close()
            return 1

        except Exception as e:
            logger.exception("Session error occurred")
            input_handler.display_error(f"Error: {e}")

            if not is_affirmative(input_handler.prompt(RETRY_PROMPT)):
                logger.info("User chose not to retry after error")
                break
            continue

        input_handler.display(format_session_summary(result))
        logger.info(f"Session {result.session_id} completed successfully")

        if not is_affirmative(input_handler.prompt(NEW_SESSION_PROMPT)):
            logger.info("User chose to exit")
            break

        logger.info("User chose to start new session")
        input_handler.display("\n")

    input_handler.display(FAREWELL_MESSAGE)
    input_handler.close()
    logger.info("Application exiting normally")
    return 0


def main():
    """Run the questionnaire console"""
    configure_logging()
    logger.info("Application started")

    input_handler = ConsoleInputHandler()

    try:
        engine = build_engine(input_handler, resolve_config_path())
        return run(engine, input_handler)
    except Exception as e:
        logger.exception("Unexpected error in main loop")
        input_handler.display_error(f"Fatal error: {e}")
        input_handler.close()
        return 1


if __name__ == '__main__':
    sys.exit(main())
