"""
Type-specific answer evaluators.

Each module implements an evaluator for a specific question type. Both are
registered in the global registry on import.
"""

from semestre.exam.models import QuestionType

from ..evaluator import register_evaluator
from .fill_in_blank import FillInTheBlankEvaluator
from .multiple_choice import MultipleChoiceEvaluator

register_evaluator(QuestionType.MULTIPLE_CHOICE.value, MultipleChoiceEvaluator)
register_evaluator(QuestionType.FILL_IN_THE_BLANK.value, FillInTheBlankEvaluator)

__all__ = [
    "MultipleChoiceEvaluator",
    "FillInTheBlankEvaluator",
]
