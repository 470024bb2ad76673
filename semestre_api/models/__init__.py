"""API models package"""

from .api import (
    CompareRequest,
    CompareResponse,
    GradeRequest,
    GradeResponse,
    AnswerFeedbackResponse,
)

__all__ = [
    "CompareRequest",
    "CompareResponse",
    "GradeRequest",
    "GradeResponse",
    "AnswerFeedbackResponse",
]
