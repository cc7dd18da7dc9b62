"""
Result type returned by QuestionnaireEngine.run_session()

Read-side projection of one completed session. Never mutated after creation.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

from questionnaire.contracts import QuestionnaireDocument


@dataclass(frozen=True)
class SessionResult:
    """
    Immutable record of one completed session.

    Attributes:
        session_id: Caller-supplied or generated session identifier
        answers: Question id -> trimmed answer, in the order answered.
            Stored as a read-only view over a private copy.
        document: Originating questionnaire (resolves id -> question text)
    """
    session_id: str
    answers: Mapping[str, str]
    document: QuestionnaireDocument = field(repr=False)

    def __post_init__(self):
        # Detach from the engine's dict so later mutation cannot leak in
        object.__setattr__(self, 'answers', MappingProxyType(dict(self.answers)))

    @property
    def answer_count(self) -> int:
        return len(self.answers)

    def to_pairs(self) -> List[Tuple[str, str]]:
        """
        Pair each recorded answer with its question text.

        Returns:
            List of (question_text, answer_text) in answer order.
            Answers whose id is not in the document are omitted.
        """
        pairs = []
        for question_id, answer in self.answers.items():
            question = self.document.get_question(question_id)
            if question is None:
                continue
            pairs.append((question.text, answer))
        return pairs

    def to_json(self) -> List[Dict[str, str]]:
        """
        JSON-safe view of to_pairs().

        Returns:
            list: [{'question': ..., 'answer': ...}, ...]
        """
        return [
            {'question': question_text, 'answer': answer}
            for question_text, answer in self.to_pairs()
        ]
