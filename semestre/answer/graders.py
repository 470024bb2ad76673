"""
Exam grader.

Combines per-question AnswerResults into the exam score. Each question is
compared exactly once; the resulting report is what the results view and
the report export read from.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from semestre.exam.models import AnswerRecord, Exam, HistoryEntry, Question

from .answer_result import AnswerResult
from .cmp import question_cmp

logger = logging.getLogger(__name__)

PASS_PERCENTAGE = 60
EXCELLENT_PERCENTAGE = 90

FEEDBACK_EXCELLENT = "PRIMARIO (ECCELLENTE)"
FEEDBACK_SUFFICIENT = "SPECIALIZZANDO (SUFFICIENTE)"
FEEDBACK_INSUFFICIENT = "STUDENTE AL PRIMO ANNO (INSUFFICIENTE)"


def feedback_for(percentage: int) -> str:
    """Rank label for a percentage score."""
    if percentage >= EXCELLENT_PERCENTAGE:
        return FEEDBACK_EXCELLENT
    if percentage >= PASS_PERCENTAGE:
        return FEEDBACK_SUFFICIENT
    return FEEDBACK_INSUFFICIENT


class GradeReport(BaseModel):
    """
    Outcome of grading an exam.

    Attributes:
        results: One AnswerResult per question, in exam order
        score: Number of correct answers
        answered: Number of non-blank answers
        total: Number of questions, answered or not
        percentage: score / total as a whole percent, halves rounded up; 0 for an empty exam
        feedback: Rank label for the percentage
    """

    model_config = ConfigDict(validate_assignment=True)

    results: list[AnswerResult] = Field(default_factory=list)
    score: int = Field(0, ge=0)
    answered: int = Field(0, ge=0)
    total: int = Field(0, ge=0)
    percentage: int = Field(0, ge=0, le=100)
    feedback: str = FEEDBACK_INSUFFICIENT

    @property
    def passed(self) -> bool:
        return self.percentage >= PASS_PERCENTAGE

    def result_for(self, question_id: int) -> Optional[AnswerResult]:
        """Result of one question, or None if it is not part of the exam."""
        for result in self.results:
            if result.question_id == question_id:
                return result
        return None

    def to_history_entry(self, exam: Exam, answers: Optional[AnswerRecord] = None) -> HistoryEntry:
        """Build the archive entry for this attempt (not persisted here)."""
        return HistoryEntry(
            id=exam.id,
            score=self.score,
            total_questions=self.total,
            difficulty=exam.difficulty,
            topic=exam.display_topic,
            answers=dict(answers or {}),
        )


class ExamGrader:
    """
    Grades every question of an exam against the submitted answers.

    Unanswered questions score zero and are excluded from ``answered`` but
    still count toward ``total``.
    """

    def grade(
        self,
        exam: Union[Exam, Iterable[Question]],
        answers: Mapping[int, str],
    ) -> GradeReport:
        """
        Grade an exam.

        Args:
            exam: Exam or plain sequence of questions
            answers: Submitted answers keyed by question id

        Returns:
            GradeReport with per-question results and totals
        """
        questions = exam.questions if isinstance(exam, Exam) else list(exam)

        results = [self.grade_question(q, answers.get(q.id)) for q in questions]

        score = sum(1 for r in results if r.correct)
        answered = sum(1 for r in results if r.answered)
        total = len(results)
        # half-up rounding
        percentage = (score * 200 + total) // (2 * total) if total else 0

        logger.debug("Graded exam: %d/%d correct, %d answered", score, total, answered)

        return GradeReport(
            results=results,
            score=score,
            answered=answered,
            total=total,
            percentage=percentage,
            feedback=feedback_for(percentage),
        )

    def grade_question(self, question: Question, answer: Optional[str]) -> AnswerResult:
        result = question_cmp(question).evaluate(answer)
        result.question_id = question.id
        return result
