"""
Multiple-choice answer evaluator.

Students may echo the whole option text or just its letter, so the check is
deliberately loose: identical trimmed strings, or identical first
characters.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from semestre.exam.models import QuestionType

from ..compare import Comparison, explain
from ..evaluator import AnswerEvaluator


class MultipleChoiceEvaluator(AnswerEvaluator):
    """
    Evaluator for multiple-choice answers.

    Note that any two answers sharing a first character are considered
    equal (``"Apple"`` matches ``"Avocado"``). Options formatted with a
    common prefix such as ``"$10 J$"`` and ``"$15 J$"`` therefore match each
    other.
    """

    answer_type = QuestionType.MULTIPLE_CHOICE.value

    options: Optional[list[str]] = Field(default=None, description="Choices shown to the student")

    def compare(self, student_answer: Any) -> Comparison:
        return explain(student_answer, self.correct_answer, QuestionType.MULTIPLE_CHOICE)

    def describe(self, student_answer: str) -> dict[str, Any]:
        """Record which option the student picked, when it is one verbatim."""
        if not self.options:
            return {}
        picked = student_answer.strip()
        for index, option in enumerate(self.options):
            if option.strip() == picked:
                return {"option_index": index}
        return {}
