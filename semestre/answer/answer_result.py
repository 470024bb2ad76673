"""
Answer result data structure.

This module provides the AnswerResult class which records the outcome of
grading one question:
- Correctness (boolean and 0/1 score)
- Student/correct answers as submitted
- The comparison rule that decided
- Feedback message and metadata

A result is computed once per question when an exam is finished and handed
to every consumer (score tally, results view, report rows).
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, field_validator

from .compare import MatchStrategy


class AnswerResult(BaseModel):
    """
    Result of answer evaluation.

    Attributes:
        score: 1.0 when correct, 0.0 otherwise
        correct: Boolean outcome of the comparison
        answered: False when the student left the question blank
        student_answer: Student's answer as submitted ("" when unanswered)
        correct_answer: Canonical answer of the question
        type: Question type the answer was graded as
        strategy: Comparison rule that decided the outcome
        answer_message: Feedback line shown to the student
        question_id: Id of the graded question, when known
        metadata: Additional metadata for debugging/analysis
    """

    model_config = ConfigDict(validate_assignment=True)

    score: float = 0.0
    correct: StrictBool = False
    answered: bool = True

    student_answer: str = ""
    correct_answer: str = ""

    type: str = "unknown"
    strategy: MatchStrategy = MatchStrategy.NO_MATCH
    answer_message: str = ""

    question_id: Optional[int] = None
    metadata: dict[str, Any] = {}

    def model_post_init(self, __context: Any) -> None:
        """Keep score and correct flag in sync."""
        if self.correct and self.score != 1.0:
            self.score = 1.0
        elif not self.correct and self.score != 0.0:
            self.score = 0.0

    @field_validator("score")
    @classmethod
    def validate_score(cls, v: float) -> float:
        """Validate score is in valid range."""
        if v < 0.0 or v > 1.0:
            raise ValueError("score must be between 0.0 and 1.0")
        return float(v)

    @field_validator("metadata", mode="before")
    @classmethod
    def validate_metadata(cls, v: Any) -> dict[str, Any]:
        """Ensure metadata is a dict."""
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("metadata must be a dict")
        return v

    def is_blank(self) -> bool:
        """Check if the question was left unanswered."""
        return not self.answered

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary for serialization.

        Returns:
            Dictionary representation suitable for JSON/API responses
        """
        return {
            "question_id": self.question_id,
            "score": self.score,
            "correct": self.correct,
            "answered": self.answered,
            "student_answer": self.student_answer,
            "correct_answer": self.correct_answer,
            "type": self.type,
            "strategy": self.strategy.value,
            "answer_message": self.answer_message,
            "metadata": self.metadata,
        }

    @classmethod
    def answer_correct(
        cls,
        student_ans: str,
        correct_ans: str,
        answer_type: str = "unknown",
        strategy: MatchStrategy = MatchStrategy.EXACT,
        message: str = "",
    ) -> AnswerResult:
        """
        Create a correct answer result (convenience factory).

        Returns:
            AnswerResult with score=1.0, correct=True
        """
        return cls(
            score=1.0,
            correct=True,
            student_answer=student_ans,
            correct_answer=correct_ans,
            type=answer_type,
            strategy=strategy,
            answer_message=message or "Correct!",
        )

    @classmethod
    def answer_incorrect(
        cls,
        student_ans: str,
        correct_ans: str,
        answer_type: str = "unknown",
        strategy: MatchStrategy = MatchStrategy.NO_MATCH,
        message: str = "",
    ) -> AnswerResult:
        """
        Create an incorrect answer result (convenience factory).

        Returns:
            AnswerResult with score=0.0, correct=False
        """
        return cls(
            score=0.0,
            correct=False,
            student_answer=student_ans,
            correct_answer=correct_ans,
            type=answer_type,
            strategy=strategy,
            answer_message=message or "Incorrect.",
        )

    @classmethod
    def answer_blank(
        cls,
        correct_ans: str,
        answer_type: str = "unknown",
    ) -> AnswerResult:
        """Create a result for an unanswered question."""
        return cls(
            score=0.0,
            correct=False,
            answered=False,
            correct_answer=correct_ans,
            type=answer_type,
            strategy=MatchStrategy.UNANSWERED,
            answer_message="Not answered.",
        )
