"""Exam report export: readable text and summary rows"""

from .latex import latex_to_readable, readable, sanitize_for_report
from .rows import ExamReport, ReportRow, build_report, build_report_rows

__all__ = [
    "latex_to_readable",
    "readable",
    "sanitize_for_report",
    "ExamReport",
    "ReportRow",
    "build_report",
    "build_report_rows",
]
