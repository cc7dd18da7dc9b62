"""
Display Helpers - Convert questions and results to terminal text

Used by the Session Engine (prompts, title) and the console entry point
(session summary).
"""

from typing import List

from questionnaire.contracts import QuestionDefinition, QuestionKind

SEPARATOR_WIDTH = 50


def separator(char: str = "=", length: int = SEPARATOR_WIDTH) -> str:
    """Return a separator line"""
    return char * length


def format_title(title: str) -> str:
    """Questionnaire title banner, shown once per session."""
    return f"\n=== {title} ===\n"


def build_prompt_text(question: QuestionDefinition) -> str:
    """
    Build the prompt shown for a question.

    Args:
        question: Question being asked

    Returns:
        Question text, plus the choice list (multiple-choice) or a
        '(yes/no)' hint, ending with the input marker '> '.

    Examples:
        >>> build_prompt_text(QuestionDefinition('q2', 'Do you have a pet?', QuestionKind.YES_NO))
        'Do you have a pet? (yes/no)\\n> '
    """
    prompt = question.text

    if question.kind == QuestionKind.MULTIPLE_CHOICE and question.choices:
        prompt += f"\nChoices: {', '.join(question.choices)}"
    elif question.kind == QuestionKind.YES_NO:
        prompt += " (yes/no)"

    return prompt + "\n> "


def format_session_summary(result) -> str:
    """
    Render a SessionResult as a numbered question/answer list.

    Format:
        ==================================================
        SESSION SUMMARY
        ==================================================
        Session ID: <id>

        1. <question>
           Answer: <answer>

        ==================================================

    Args:
        result: SessionResult

    Returns:
        Multi-line summary text
    """
    lines: List[str] = [
        "\n" + separator(),
        "SESSION SUMMARY",
        separator(),
        f"Session ID: {result.session_id}",
        "",
    ]

    for number, (question_text, answer) in enumerate(result.to_pairs(), start=1):
        lines.append(f"{number}. {question_text}")
        lines.append(f"   Answer: {answer}")
        lines.append("")

    lines.append(separator() + "\n")
    return "\n".join(lines)
