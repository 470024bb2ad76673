"""Exam domain models"""

from .models import (
    FULL_EXAM_TOPIC,
    AnswerRecord,
    Exam,
    HistoryEntry,
    Question,
    QuestionType,
)

__all__ = [
    "FULL_EXAM_TOPIC",
    "AnswerRecord",
    "Exam",
    "HistoryEntry",
    "Question",
    "QuestionType",
]
