"""
Fill-in-the-blank answer evaluator.

Handles free text and numeric answers with units. See
:mod:`semestre.answer.compare` for the matching rules.
"""

from __future__ import annotations

from typing import Any

from semestre.exam.models import QuestionType

from ..compare import Comparison, explain
from ..evaluator import AnswerEvaluator
from ..text import extract_number, normalize_answer, parse_number


class FillInTheBlankEvaluator(AnswerEvaluator):
    """
    Evaluator for fill-in-the-blank answers.

    Supports:
    - Case and accent insensitive matching
    - Numbers with units, 5% relative tolerance
    - Typos in longer answers (Levenshtein distance)
    - Answers padded with extra words, or truncated
    """

    answer_type = QuestionType.FILL_IN_THE_BLANK.value

    def compare(self, student_answer: Any) -> Comparison:
        return explain(student_answer, self.correct_answer, QuestionType.FILL_IN_THE_BLANK)

    def describe(self, student_answer: str) -> dict[str, Any]:
        """Expose the numbers read from both answers, if any."""
        metadata: dict[str, Any] = {}
        for key, text in (("student_number", student_answer), ("correct_number", self.correct_answer)):
            token = extract_number(normalize_answer(text))
            value = parse_number(token) if token is not None else None
            if value is not None:
                metadata[key] = value
        return metadata
