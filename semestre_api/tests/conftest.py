"""
Pytest configuration and fixtures.

Provides shared fixtures for testing the grading API.
"""

import pytest
from typing import Any, Dict

from fastapi.testclient import TestClient

from semestre.exam import Exam
from semestre_api.main import app


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def exam_payload() -> Dict[str, Any]:
    """A topic exam as sent by the client"""
    return {
        "id": "exam-42",
        "examType": "topic",
        "topic": "Dinamica",
        "difficulty": "hard",
        "questions": [
            {
                "id": 1,
                "text": r"Qual e l'unita di misura della forza $F$?",
                "type": "multiple_choice",
                "options": ["A. newton", "B. joule", "C. watt", "D. pascal", "E. volt"],
                "correctAnswer": "A. newton",
                "explanation": "Il newton e l'unita SI della forza.",
            },
            {
                "id": 2,
                "text": r"Una massa di 12 kg accelera a 10 m/s^2. Quanto vale $F$?",
                "type": "fill_in_the_blank",
                "correctAnswer": "120 N",
            },
            {
                "id": 3,
                "text": "Come si chiama la forza che si oppone al moto?",
                "type": "fill_in_the_blank",
                "correctAnswer": "attrito",
            },
        ],
    }


@pytest.fixture
def sample_exam(exam_payload) -> Exam:
    """The same exam as a domain model"""
    return Exam.model_validate(exam_payload)
