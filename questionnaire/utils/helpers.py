"""
Utility helpers for the questionnaire runner

Session id generation and environment-based settings.
"""

import logging
import os
import uuid

DEFAULT_CONFIG_PATH = "questionnaire.json"
CONFIG_PATH_ENV = "QUESTIONNAIRE_CONFIG"
LOG_LEVEL_ENV = "QUESTIONNAIRE_LOG_LEVEL"


def generate_session_id():
    """
    Generate unique session identifier (random UUID4 string)

    Examples:
        >>> generate_session_id()
        '3f2b8c1e-5a4d-4e7f-9b6a-0c1d2e3f4a5b'
    """
    return str(uuid.uuid4())


def resolve_config_path(environ=None):
    """
    Questionnaire path from QUESTIONNAIRE_CONFIG, else 'questionnaire.json'.

    An empty variable is treated as unset.
    """
    environ = os.environ if environ is None else environ
    return environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_PATH


def resolve_log_level(environ=None):
    """
    Logging level from QUESTIONNAIRE_LOG_LEVEL (name, e.g. 'DEBUG'), default INFO.

    Unknown names fall back to INFO.
    """
    environ = os.environ if environ is None else environ
    name = (environ.get(LOG_LEVEL_ENV) or "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
