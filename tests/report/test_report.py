"""Tests for report text flattening and summary rows."""

import pytest

from semestre.answer import ExamGrader
from semestre.exam import Exam, Question, QuestionType
from semestre.report import (
    build_report,
    build_report_rows,
    latex_to_readable,
    readable,
    sanitize_for_report,
)
from semestre.report.rows import (
    QUESTION_PREVIEW_LENGTH,
    STATUS_CORRECT,
    STATUS_UNANSWERED,
    STATUS_WRONG,
    UNANSWERED_MARK,
)


class TestLatexToReadable:

    @pytest.mark.parametrize(
        "latex, expected",
        [
            (r"$\frac{1}{2} m v^{2}$", "(1/2) m v^(2)"),
            (r"$a \times b$", "a x b"),
            (r"$\Delta x$", "Delta x"),
            (r"$\sqrt{2}$", "sqrt(2)"),
            (r"$v_{0}$", "v_(0)"),
            (r"$\alpha_{1}$", "alpha_(1)"),
            (r"$\Omega$", "Ohm"),
            (r"$x \leq 5$", "x <= 5"),
            (r"$10 \text{ m/s}$", "10 m/s"),
            (r"$\vec{F}$", "F"),
            ("Quanto vale la forza?", "Quanto vale la forza?"),
        ],
    )
    def test_conversions(self, latex, expected):
        assert latex_to_readable(latex) == expected

    def test_greek_letter_in_formula(self):
        assert latex_to_readable(r"$\pi r^{2}$") == "pi r^(2)"

    def test_whitespace_is_collapsed(self):
        assert latex_to_readable("  a   $b$\n c ") == "a b c"


class TestSanitize:

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("10 €", "10 EUR"),
            ("m²", "m^2"),
            ("H₂O", "H_2O"),
            ("“forza”", '"forza"'),
            ("a – b", "a - b"),
        ],
    )
    def test_replacements(self, text, expected):
        assert sanitize_for_report(text) == expected

    def test_plain_ascii_is_unchanged(self):
        assert sanitize_for_report("F = m a") == "F = m a"

    def test_readable_combines_both(self):
        assert readable(r"$10 \text{ m/s}$ ≈ 36 km/h") == "10 m/s ~ 36 km/h"


class TestReportRows:

    def test_statuses(self, two_question_exam):
        answers = {1: "$A$"}
        report = ExamGrader().grade(two_question_exam, answers)
        rows = build_report_rows(two_question_exam.questions, answers, report)

        assert [r.number for r in rows] == [1, 2]
        assert rows[0].status == STATUS_CORRECT
        assert rows[0].user_answer == "A"
        assert rows[0].correct_answer == "A"
        assert rows[1].status == STATUS_UNANSWERED
        assert rows[1].user_answer == UNANSWERED_MARK
        assert rows[1].correct is False

    def test_wrong_answer(self, two_question_exam):
        answers = {1: "$A$", 2: "20 m/s"}
        report = ExamGrader().grade(two_question_exam, answers)
        rows = build_report_rows(two_question_exam.questions, answers, report)
        assert rows[1].status == STATUS_WRONG
        assert rows[1].user_answer == "20 m/s"
        assert rows[1].correct_answer == "10 m/s"

    def test_rows_agree_with_grade_report(self, two_question_exam):
        # Loose matches accepted by the grader stay correct in the export
        answers = {1: "$C$", 2: "10.4 m/s"}
        report = ExamGrader().grade(two_question_exam, answers)
        rows = build_report_rows(two_question_exam.questions, answers, report)
        assert [r.correct for r in rows] == [r.correct for r in report.results] == [True, True]

    def test_long_question_is_truncated(self):
        question = Question(
            id=7,
            text="x" * 80,
            type=QuestionType.FILL_IN_THE_BLANK,
            correct_answer="1",
        )
        report = ExamGrader().grade([question], {})
        row = build_report_rows([question], {}, report)[0]
        assert len(row.question) == QUESTION_PREVIEW_LENGTH + 3
        assert row.question.endswith("...")

    def test_short_question_is_kept(self, mc_question):
        report = ExamGrader().grade([mc_question], {})
        row = build_report_rows([mc_question], {}, report)[0]
        assert row.question == "Quale opzione e corretta?"


def test_build_report_header(two_question_exam):
    answers = {1: "$A$", 2: "10 m/s"}
    report = ExamGrader().grade(two_question_exam, answers)
    export = build_report(two_question_exam, answers, report)

    assert export.exam_id == "exam-1"
    assert export.exam_type == "topic"
    assert export.topic == "Cinematica"
    assert export.difficulty == "medium"
    assert export.score == 2
    assert export.total == 2
    assert export.percentage == 100
    assert len(export.rows) == 2


def test_full_exam_report_topic(mc_question):
    exam = Exam(id="full", questions=[mc_question])
    export = build_report(exam, {}, ExamGrader().grade(exam, {}))
    assert export.topic == "Simulazione Completa"
    assert export.feedback == "STUDENTE AL PRIMO ANNO (INSUFFICIENTE)"
