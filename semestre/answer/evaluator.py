"""
Base answer evaluator framework.

Provides abstract base class for answer evaluators and a registry
for dispatch by question type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .answer_result import AnswerResult
from .compare import Comparison


class AnswerEvaluator(BaseModel, ABC):
    """
    Abstract base class for answer evaluators.

    Each evaluator checks answers of one question type against a canonical
    answer. The decision itself is made by the shared comparator; an
    evaluator wraps it into an AnswerResult and adds type-specific metadata.

    Subclasses must implement:
    - compare(): Delegate to the comparator for their question type
    - answer_type: Class variable for type identification
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    # Type identifier (must be set by subclasses)
    answer_type: ClassVar[str] = "unknown"

    correct_answer: str = Field(description="The correct answer to compare against")

    @abstractmethod
    def compare(self, student_answer: Any) -> Comparison:
        """
        Compare a raw student answer with the correct answer.

        Args:
            student_answer: Submitted answer (None means unanswered)

        Returns:
            Comparison(matched, strategy)
        """

    def describe(self, student_answer: str) -> dict[str, Any]:
        """
        Extra metadata attached to the result.

        Override in subclasses; the default adds nothing.
        """
        return {}

    def evaluate(self, student_answer: Any) -> AnswerResult:
        """
        Evaluate student's answer against correct answer.

        Args:
            student_answer: Student's answer; None, non-string or blank
                values are graded as unanswered

        Returns:
            AnswerResult with score, strategy and feedback
        """
        comparison = self.compare(student_answer)
        text = student_answer if isinstance(student_answer, str) else ""

        if not text.strip():
            return AnswerResult.answer_blank(self.correct_answer, answer_type=self.answer_type)

        if comparison.matched:
            result = AnswerResult.answer_correct(
                student_ans=text,
                correct_ans=self.correct_answer,
                answer_type=self.answer_type,
                strategy=comparison.strategy,
            )
        else:
            result = AnswerResult.answer_incorrect(
                student_ans=text,
                correct_ans=self.correct_answer,
                answer_type=self.answer_type,
                strategy=comparison.strategy,
            )

        result.metadata = self.describe(text)
        return result

    def get_correct_answer_display(self) -> str:
        return self.correct_answer


class EvaluatorRegistry(BaseModel):
    """
    Registry for answer evaluators.

    Provides type-based dispatch to appropriate evaluator.
    Pydantic-based with private attribute management.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _evaluators: dict[str, type[AnswerEvaluator]] = PrivateAttr(default_factory=dict)

    def register(
        self, answer_type: str, evaluator_class: type[AnswerEvaluator]
    ) -> None:
        """
        Register an evaluator for a specific question type.

        Args:
            answer_type: Type identifier (e.g., "multiple_choice")
            evaluator_class: Evaluator class to use for this type

        Raises:
            TypeError: If evaluator_class is not an AnswerEvaluator subclass
        """
        if not (isinstance(evaluator_class, type) and issubclass(evaluator_class, AnswerEvaluator)):
            raise TypeError(f"evaluator_class must be a subclass of AnswerEvaluator, got {evaluator_class}")
        self._evaluators[str(getattr(answer_type, "value", answer_type))] = evaluator_class

    def get_evaluator(self, answer_type: str) -> type[AnswerEvaluator] | None:
        """
        Get evaluator class for a question type.

        Returns:
            Evaluator class, or None if not found
        """
        return self._evaluators.get(str(getattr(answer_type, "value", answer_type)))

    def create_evaluator(
        self,
        answer_type: str,
        correct_answer: str,
        **options: Any,
    ) -> AnswerEvaluator:
        """
        Create evaluator instance for a question type.

        Raises:
            ValueError: If answer type not registered
        """
        evaluator_class = self.get_evaluator(answer_type)
        if evaluator_class is None:
            raise ValueError(f"No evaluator registered for type: {answer_type}")

        return evaluator_class(correct_answer=correct_answer, **options)

    def get_registered_types(self) -> list[str]:
        return list(self._evaluators.keys())


# Global registry instance
_global_registry = EvaluatorRegistry()


def register_evaluator(
    answer_type: str, evaluator_class: type[AnswerEvaluator]
) -> None:
    """Register an evaluator in the global registry."""
    _global_registry.register(answer_type, evaluator_class)


def get_evaluator(answer_type: str) -> type[AnswerEvaluator] | None:
    """Get evaluator from global registry."""
    return _global_registry.get_evaluator(answer_type)


def create_evaluator(
    answer_type: str, correct_answer: str, **options: Any
) -> AnswerEvaluator:
    """Create evaluator instance from global registry."""
    return _global_registry.create_evaluator(answer_type, correct_answer, **options)
