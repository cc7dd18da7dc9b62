"""
Test the console session loop (questionnaire.cli)
"""

import io
import json

import pytest

from questionnaire import cli
from questionnaire.errors import ConfigParseError
from questionnaire.results import SessionResult
from questionnaire.contracts import QuestionDefinition, QuestionKind, QuestionnaireDocument


DOCUMENT = QuestionnaireDocument(
    title="T",
    questions=(QuestionDefinition('q1', 'Name?', QuestionKind.TEXT),),
)


class ScriptedEngine:
    """Each run_session() call returns or raises the next scripted outcome"""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = 0

    def run_session(self):
        self.calls += 1
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class RecordingHandler:
    def __init__(self, inputs):
        self.inputs = list(inputs)
        self.prompts = []
        self.displayed = []
        self.errors = []
        self.closed = False

    def prompt(self, message):
        self.prompts.append(message)
        return self.inputs.pop(0)

    def display(self, message):
        self.displayed.append(message)

    def display_error(self, message):
        self.errors.append(message)

    def close(self):
        self.closed = True


def make_result(session_id="s1", name="Alice"):
    return SessionResult(session_id, {'q1': name}, DOCUMENT)


# ========== run() ==========

def test_single_session_then_exit():
    engine = ScriptedEngine([make_result()])
    handler = RecordingHandler(["no"])

    status = cli.run(engine, handler)

    assert status == 0
    assert engine.calls == 1
    assert handler.prompts == [cli.NEW_SESSION_PROMPT]
    assert any("SESSION SUMMARY" in message for message in handler.displayed)
    assert handler.displayed[-1] == cli.FAREWELL_MESSAGE
    assert handler.closed


def test_repeats_while_user_says_yes():
    engine = ScriptedEngine([make_result("s1"), make_result("s2"), make_result("s3")])
    handler = RecordingHandler([" YES ", "y", "nope"])

    status = cli.run(engine, handler)

    assert status == 0
    assert engine.calls == 3


def test_config_error_is_fatal():
    engine = ScriptedEngine([ConfigParseError("Failed to parse JSON: bad")])
    handler = RecordingHandler([])

    status = cli.run(engine, handler)

    assert status == 1
    assert handler.errors == ["Error: Failed to parse JSON: bad"]
    assert handler.prompts == []
    assert handler.closed


def test_unexpected_error_offers_retry():
    engine = ScriptedEngine([OSError("terminal went away"), make_result()])
    handler = RecordingHandler(["yes", "no"])

    status = cli.run(engine, handler)

    assert status == 0
    assert engine.calls == 2
    assert handler.prompts == [cli.RETRY_PROMPT, cli.NEW_SESSION_PROMPT]
    assert handler.errors == ["Error: terminal went away"]


def test_declining_retry_ends_gracefully():
    engine = ScriptedEngine([RuntimeError("boom")])
    handler = RecordingHandler(["n"])

    status = cli.run(engine, handler)

    assert status == 0
    assert engine.calls == 1
    assert handler.displayed[-1] == cli.FAREWELL_MESSAGE


@pytest.mark.parametrize("response, expected", [
    ("yes", True), ("Y", True), ("  y ", True), ("no", False), ("", False), ("yeah", False),
])
def test_is_affirmative(response, expected):
    assert cli.is_affirmative(response) is expected


# ========== main() end to end ==========

def write_questionnaire(tmp_path):
    path = tmp_path / "survey.json"
    path.write_text(json.dumps({
        "title": "Pet Survey",
        "questions": [
            {"id": "q1", "text": "What is your name?", "type": "text"},
            {"id": "q2", "text": "Do you have a pet?", "type": "yesno"},
            {"id": "q3", "text": "What kind of pet?", "type": "multiple-choice",
             "choices": ["Dog", "Cat", "Bird"],
             "condition": {"questionId": "q2", "expectedAnswer": ["yes", "y"]}},
        ],
    }), encoding="utf-8")
    return path


def test_main_runs_session_from_env_config(tmp_path, monkeypatch, capsys):
    path = write_questionnaire(tmp_path)
    monkeypatch.setenv("QUESTIONNAIRE_CONFIG", str(path))
    monkeypatch.setattr("sys.stdin", io.StringIO("\nJohn Doe\nyes\nDog\nno\n"))

    status = cli.main()

    captured = capsys.readouterr()
    assert status == 0
    assert "=== Pet Survey ===" in captured.out
    assert "1. What is your name?" in captured.out
    assert "   Answer: John Doe" in captured.out
    assert "3. What kind of pet?" in captured.out
    assert "   Answer: Dog" in captured.out
    assert "Goodbye!" in captured.out
    assert "❌ Input cannot be empty. Please provide an answer." in captured.err


def test_main_missing_config_exits_with_failure(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("QUESTIONNAIRE_CONFIG", str(tmp_path / "missing.json"))
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    status = cli.main()

    captured = capsys.readouterr()
    assert status == 1
    assert "Configuration file not found" in captured.err


def test_main_undecodable_config_exits_with_failure(tmp_path, monkeypatch, capsys):
    path = tmp_path / "survey.json"
    path.write_bytes(b'{"title": "\xff\xfe", "questions": []}')
    monkeypatch.setenv("QUESTIONNAIRE_CONFIG", str(path))
    monkeypatch.setattr("sys.stdin", io.StringIO(""))

    status = cli.main()

    captured = capsys.readouterr()
    assert status == 1
    assert "Failed to parse JSON" in captured.err


def test_console_harness_delegates_to_package_entry_point():
    import main as harness

    assert harness.main is cli.main
