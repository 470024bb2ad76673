"""
Exam domain models.

An exam is an ordered list of generated questions. Answers are kept apart
from the questions, keyed by question id, so grading never touches the
question records themselves.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

FULL_EXAM_TOPIC = "Simulazione Completa"
MULTIPLE_CHOICE_OPTION_COUNT = 5

# Question id -> raw submitted text. Missing key means unanswered.
AnswerRecord = dict[int, str]


class QuestionType(str, Enum):
    """Supported question types"""
    MULTIPLE_CHOICE = "multiple_choice"
    FILL_IN_THE_BLANK = "fill_in_the_blank"


class Question(BaseModel):
    """
    A single generated question.

    Immutable once generated. ``correct_answer`` may contain inline math
    (``$...$``); it is always compared as literal text.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., description="Question identifier, unique within an exam")
    text: str = Field(..., description="Question statement")
    type: QuestionType
    options: Optional[list[str]] = Field(None, description="Choices, multiple choice only")
    correct_answer: str = Field(..., alias="correctAnswer", min_length=1)
    explanation: str = ""
    topic: Optional[str] = None

    @field_validator("correct_answer")
    @classmethod
    def validate_correct_answer(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("correct_answer must not be blank")
        return v

    @model_validator(mode="after")
    def validate_options(self) -> "Question":
        if self.type == QuestionType.MULTIPLE_CHOICE:
            if self.options is None or len(self.options) != MULTIPLE_CHOICE_OPTION_COUNT:
                raise ValueError(
                    f"multiple_choice questions need exactly "
                    f"{MULTIPLE_CHOICE_OPTION_COUNT} options"
                )
        elif self.options:
            raise ValueError("options are only allowed on multiple_choice questions")
        return self


class Exam(BaseModel):
    """An ordered set of questions generated for one session"""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    questions: list[Question]
    exam_type: str = Field("full", alias="examType")
    topic: Optional[str] = None
    difficulty: Optional[str] = None

    @field_validator("questions")
    @classmethod
    def validate_unique_ids(cls, v: list[Question]) -> list[Question]:
        seen: set[int] = set()
        for question in v:
            if question.id in seen:
                raise ValueError(f"duplicate question id: {question.id}")
            seen.add(question.id)
        return v

    @property
    def display_topic(self) -> Optional[str]:
        """Topic label shown in history and reports"""
        if self.exam_type == "full":
            return FULL_EXAM_TOPIC
        return self.topic

    def question_ids(self) -> set[int]:
        return {q.id for q in self.questions}


class HistoryEntry(BaseModel):
    """Summary of a finished exam, as archived by the client"""
    id: str
    date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    score: int = Field(..., ge=0)
    total_questions: int = Field(..., ge=0)
    difficulty: Optional[str] = None
    topic: Optional[str] = None
    answers: AnswerRecord = Field(default_factory=dict)
