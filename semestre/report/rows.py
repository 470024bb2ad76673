"""
Report rows for an exported exam.

Rendering (PDF or otherwise) happens elsewhere; this module only decides
what each row says. Correctness is read from the GradeReport, never
recomputed.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from pydantic import BaseModel, Field

from semestre.answer.graders import GradeReport
from semestre.exam.models import Exam, Question

from .latex import readable

QUESTION_PREVIEW_LENGTH = 60
UNANSWERED_MARK = "-"

STATUS_CORRECT = "CORRETTA"
STATUS_WRONG = "ERRATA"
STATUS_UNANSWERED = "NON DATA"


class ReportRow(BaseModel):
    """One line of the answer summary table"""
    number: int = Field(..., ge=1)
    question_id: int
    question: str
    user_answer: str
    correct_answer: str
    status: str
    correct: bool


class ExamReport(BaseModel):
    """Header and rows of an exported exam"""
    exam_id: str
    exam_type: str
    topic: Optional[str] = None
    difficulty: Optional[str] = None
    score: int
    total: int
    percentage: int
    feedback: str
    rows: list[ReportRow] = Field(default_factory=list)


def _preview(text: str) -> str:
    flat = readable(text)
    if len(flat) <= QUESTION_PREVIEW_LENGTH:
        return flat
    return flat[:QUESTION_PREVIEW_LENGTH] + "..."


def build_report_rows(
    questions: Iterable[Question],
    answers: Mapping[int, str],
    report: GradeReport,
) -> list[ReportRow]:
    """
    Build one row per question.

    Args:
        questions: Exam questions, in display order
        answers: Submitted answers keyed by question id
        report: Grade report computed for the same answers

    Returns:
        Rows numbered from 1
    """
    rows = []
    for number, question in enumerate(questions, start=1):
        result = report.result_for(question.id)
        answered = result is not None and result.answered
        correct = result is not None and result.correct

        if not answered:
            status = STATUS_UNANSWERED
        elif correct:
            status = STATUS_CORRECT
        else:
            status = STATUS_WRONG

        user_answer = answers.get(question.id)
        rows.append(
            ReportRow(
                number=number,
                question_id=question.id,
                question=_preview(question.text),
                user_answer=readable(user_answer) if answered and user_answer else UNANSWERED_MARK,
                correct_answer=readable(question.correct_answer),
                status=status,
                correct=correct,
            )
        )
    return rows


def build_report(exam: Exam, answers: Mapping[int, str], report: GradeReport) -> ExamReport:
    """Assemble the full export for an exam."""
    return ExamReport(
        exam_id=exam.id,
        exam_type=exam.exam_type,
        topic=exam.display_topic,
        difficulty=exam.difficulty,
        score=report.score,
        total=report.total,
        percentage=report.percentage,
        feedback=report.feedback,
        rows=build_report_rows(exam.questions, answers, report),
    )
