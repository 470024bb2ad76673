"""
Shared pytest fixtures for the grading core.

This module provides:
- Sample questions and exams
- A helper for asserting pydantic validation failures
"""

import pytest
from typing import Any, Type
from pydantic import BaseModel, ValidationError

from semestre.exam import Exam, Question, QuestionType


OPTIONS = ["$A$", "$B$", "$C$", "$D$", "$E$"]


@pytest.fixture
def mc_question() -> Question:
    return Question(
        id=1,
        text="Quale opzione e corretta?",
        type=QuestionType.MULTIPLE_CHOICE,
        options=OPTIONS,
        correct_answer="$A$",
        explanation="Per definizione.",
    )


@pytest.fixture
def blank_question() -> Question:
    return Question(
        id=2,
        text=r"Un corpo percorre 100 m in 10 s. Qual e la sua velocita media $v$?",
        type=QuestionType.FILL_IN_THE_BLANK,
        correct_answer="10 m/s",
        explanation=r"$v = \frac{\Delta x}{\Delta t}$",
    )


@pytest.fixture
def two_question_exam(mc_question, blank_question) -> Exam:
    return Exam(
        id="exam-1",
        questions=[mc_question, blank_question],
        exam_type="topic",
        topic="Cinematica",
        difficulty="medium",
    )


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        data: dict[str, Any],
        expected_field: str | None = None,
    ) -> ValidationError:
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'] and e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        return error

    return _assert_validation
