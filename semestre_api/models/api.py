"""
Request and response models for the grading API.
"""

from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from semestre.answer import AnswerResult, GradeReport
from semestre.exam import Exam, HistoryEntry, QuestionType


class CompareRequest(BaseModel):
    """Compare one submitted answer with the canonical one"""
    model_config = ConfigDict(populate_by_name=True)

    user_answer: Optional[str] = Field(None, alias="userAnswer")
    correct_answer: str = Field(..., alias="correctAnswer", min_length=1)
    question_type: QuestionType = Field(..., alias="questionType")


class CompareResponse(BaseModel):
    """Outcome of a single comparison"""
    correct: bool
    strategy: str


class GradeRequest(BaseModel):
    """Request to grade a finished exam"""
    exam: Exam
    answers: Dict[int, Optional[str]] = Field(
        default_factory=dict,
        description="Submitted answers by question id; missing ids are unanswered",
    )


class AnswerFeedbackResponse(BaseModel):
    """Per-question grading feedback"""
    question_id: Optional[int]
    correct: bool
    answered: bool
    student_answer: str
    correct_answer: str
    strategy: str
    message: str

    @classmethod
    def from_domain(cls, result: AnswerResult) -> "AnswerFeedbackResponse":
        """Convert domain model to response"""
        return cls(
            question_id=result.question_id,
            correct=result.correct,
            answered=result.answered,
            student_answer=result.student_answer,
            correct_answer=result.correct_answer,
            strategy=result.strategy.value,
            message=result.answer_message,
        )


class GradeResponse(BaseModel):
    """Grading response"""
    score: int
    answered: int
    total: int
    percentage: int
    passed: bool
    feedback: str
    results: List[AnswerFeedbackResponse]
    history_entry: HistoryEntry

    @classmethod
    def from_domain(cls, report: GradeReport, history_entry: HistoryEntry) -> "GradeResponse":
        return cls(
            score=report.score,
            answered=report.answered,
            total=report.total,
            percentage=report.percentage,
            passed=report.passed,
            feedback=report.feedback,
            results=[AnswerFeedbackResponse.from_domain(r) for r in report.results],
            history_entry=history_entry,
        )
