"""Semestre Filtro - grading core for generated physics exams.

Submodules:
- semestre.exam: Question, Exam and history models
- semestre.answer: Answer comparator, evaluators and exam grader
- semestre.report: Readable text and rows for exported reports
- semestre.cli: Command line entry point
"""

__version__ = "0.1.0"

__all__ = []
