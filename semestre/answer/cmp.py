"""
Answer checker convenience functions.

Short factories for building evaluators from a correct answer or directly
from a Question.
"""

from __future__ import annotations

from typing import Any

from semestre.exam.models import Question, QuestionType

from .evaluator import AnswerEvaluator
from .evaluators import FillInTheBlankEvaluator, MultipleChoiceEvaluator


def mc_cmp(
    correct_answer: str,
    options: list[str] | None = None,
    **kwargs: Any,
) -> MultipleChoiceEvaluator:
    """
    Create multiple-choice answer checker.

    Examples:
        >>> mc_cmp("B").evaluate("B. 4 m/s").correct
        True
    """
    return MultipleChoiceEvaluator(correct_answer=correct_answer, options=options, **kwargs)


def blank_cmp(correct_answer: str, **kwargs: Any) -> FillInTheBlankEvaluator:
    """
    Create fill-in-the-blank answer checker.

    Examples:
        >>> blank_cmp("120 N").evaluate("125 N").correct
        True
    """
    return FillInTheBlankEvaluator(correct_answer=correct_answer, **kwargs)


def question_cmp(question: Question) -> AnswerEvaluator:
    """Create the checker matching a question's type."""
    if question.type == QuestionType.MULTIPLE_CHOICE:
        return mc_cmp(question.correct_answer, options=question.options)
    return blank_cmp(question.correct_answer)
