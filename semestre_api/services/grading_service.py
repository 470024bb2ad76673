"""
Grading service for exam evaluation.

Validates submissions at the boundary, grades them once with the shared
comparator and derives the history entry and report rows from that single
result.
"""

from typing import Mapping, Optional
import traceback

from semestre.answer import Comparison, ExamGrader, GradeReport, explain
from semestre.exam import Exam, HistoryEntry, QuestionType
from semestre.report import ExamReport, build_report

from ..core.config import Settings, settings as default_settings
from ..core.errors import ExamValidationError, GradingError, UnknownQuestionError
from ..core.logging import get_context_logger, get_logger

logger = get_logger(__name__)


class GradingService:
    """
    Service for answer grading operations.

    Grades finished exams and builds export rows from the same results.
    """

    def __init__(
        self,
        grader: Optional[ExamGrader] = None,
        settings: Optional[Settings] = None
    ):
        self.grader = grader or ExamGrader()
        self.settings = settings or default_settings

        logger.debug("GradingService initialized")

    def compare_answer(
        self,
        user_answer: Optional[str],
        correct_answer: str,
        question_type: QuestionType
    ) -> Comparison:
        """Compare a single answer pair."""
        self._check_answer_length(user_answer, field="user_answer")
        return explain(user_answer, correct_answer, question_type)

    async def grade_exam(
        self,
        exam: Exam,
        answers: Mapping[int, Optional[str]]
    ) -> tuple[GradeReport, HistoryEntry]:
        """
        Grade a finished exam.

        Args:
            exam: Exam with its questions
            answers: Submitted answers by question id

        Returns:
            Tuple of (grade_report, history_entry)

        Raises:
            ExamValidationError: If the exam or an answer is out of bounds
            UnknownQuestionError: If answers reference unknown questions
            GradingError: If grading fails
        """
        self._validate(exam, answers)
        exam_logger = get_context_logger(__name__, exam_id=exam.id)

        exam_logger.info(
            "Grading exam",
            extra_data={
                "num_questions": len(exam.questions),
                "num_answers": len(answers)
            }
        )

        try:
            report = self.grader.grade(exam, answers)
            history_entry = report.to_history_entry(
                exam,
                {qid: text for qid, text in answers.items() if text is not None}
            )
        except Exception as e:
            exam_logger.error(
                "Failed to grade exam",
                extra_data={
                    "error": str(e),
                    "traceback": traceback.format_exc()
                }
            )
            raise GradingError(exam.id, str(e)) from e

        exam_logger.info(
            "Grading completed",
            extra_data={
                "score": report.score,
                "total": report.total,
                "percentage": report.percentage
            }
        )

        return report, history_entry

    async def build_report(
        self,
        exam: Exam,
        answers: Mapping[int, Optional[str]]
    ) -> ExamReport:
        """Grade the exam and build its export rows."""
        report, _ = await self.grade_exam(exam, answers)
        return build_report(exam, answers, report)

    def _validate(self, exam: Exam, answers: Mapping[int, Optional[str]]) -> None:
        if not exam.questions:
            raise ExamValidationError("Exam has no questions", field="exam.questions")

        if len(exam.questions) > self.settings.MAX_QUESTIONS:
            raise ExamValidationError(
                f"Exam has too many questions (max {self.settings.MAX_QUESTIONS})",
                field="exam.questions"
            )

        unknown = sorted(set(answers) - exam.question_ids())
        if unknown:
            raise UnknownQuestionError(exam.id, unknown)

        for question_id, text in answers.items():
            self._check_answer_length(text, field=f"answers.{question_id}")

    def _check_answer_length(self, text: Optional[str], field: str) -> None:
        if text is not None and len(text) > self.settings.MAX_ANSWER_LENGTH:
            raise ExamValidationError(
                f"Answer too long (max {self.settings.MAX_ANSWER_LENGTH} characters)",
                field=field
            )


# Factory function
def get_grading_service() -> GradingService:
    """Create grading service instance"""
    return GradingService()
