"""
Answer evaluation for generated exams.

Provides:
- compare(): the single answer comparator shared by every consumer
- Type-specific evaluators wrapping it into AnswerResults
- ExamGrader for scoring a whole exam
"""

from .answer_result import AnswerResult
from .cmp import blank_cmp, mc_cmp, question_cmp
from .compare import Comparison, MatchStrategy, compare, explain
from .evaluator import (
    AnswerEvaluator,
    EvaluatorRegistry,
    create_evaluator,
    get_evaluator,
    register_evaluator,
)
from .evaluators import FillInTheBlankEvaluator, MultipleChoiceEvaluator
from .graders import ExamGrader, GradeReport, feedback_for
from .text import levenshtein_distance, normalize_answer

__all__ = [
    "compare",
    "explain",
    "Comparison",
    "MatchStrategy",
    "AnswerResult",
    "AnswerEvaluator",
    "EvaluatorRegistry",
    "create_evaluator",
    "get_evaluator",
    "register_evaluator",
    "MultipleChoiceEvaluator",
    "FillInTheBlankEvaluator",
    "ExamGrader",
    "GradeReport",
    "feedback_for",
    # Convenience functions
    "mc_cmp",
    "blank_cmp",
    "question_cmp",
    "levenshtein_distance",
    "normalize_answer",
]
