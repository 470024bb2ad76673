"""Command line interface for grading exams and comparing single answers."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from semestre.answer import ExamGrader, explain
from semestre.exam import Exam, QuestionType


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="semestre",
        description="Grade generated exams with the shared answer comparator.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    grade = subparsers.add_parser("grade", help="Grade a whole exam.")
    grade.add_argument(
        "exam",
        type=Path,
        help="JSON file with an exam object or a plain list of questions.",
    )
    grade.add_argument(
        "answers",
        type=Path,
        help="JSON object mapping question id to the submitted answer.",
    )
    grade.add_argument(
        "--json",
        action="store_true",
        help="Print the full grade report as JSON.",
    )
    grade.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding to use when reading files (default: utf-8).",
    )

    cmp = subparsers.add_parser("compare", help="Compare one answer with the correct one.")
    cmp.add_argument("user_answer", help="Submitted answer.")
    cmp.add_argument("correct_answer", help="Canonical answer.")
    cmp.add_argument(
        "--type",
        dest="question_type",
        choices=[t.value for t in QuestionType],
        default=QuestionType.FILL_IN_THE_BLANK.value,
        help="Question type (default: fill_in_the_blank).",
    )
    return parser


def _load_json(path: Path, encoding: str) -> Any:
    return json.loads(path.read_text(encoding=encoding))


def _load_exam(path: Path, encoding: str) -> Exam:
    data = _load_json(path, encoding)
    if isinstance(data, list):
        data = {"id": path.stem, "questions": data}
    return Exam.model_validate(data)


def _load_answers(path: Path, encoding: str) -> dict[int, Any]:
    data = _load_json(path, encoding)
    if not isinstance(data, dict):
        raise ValueError("answers file must contain a JSON object")
    return {int(key): value for key, value in data.items()}


def _grade(args: argparse.Namespace) -> int:
    try:
        exam = _load_exam(args.exam, args.encoding)
        answers = _load_answers(args.answers, args.encoding)
    except (OSError, ValueError, ValidationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    report = ExamGrader().grade(exam, answers)

    if args.json:
        print(report.model_dump_json(indent=2))
        return 0

    for result in report.results:
        mark = "-" if result.is_blank() else ("OK" if result.correct else "X")
        print(f"[{mark:>2}] #{result.question_id} ({result.strategy.value})")
    print(f"Score: {report.score}/{report.total} ({report.percentage}%) - {report.feedback}")
    print(f"Answered: {report.answered}/{report.total}")
    return 0


def _compare(args: argparse.Namespace) -> int:
    comparison = explain(args.user_answer, args.correct_answer, args.question_type)
    print(f"{str(comparison.matched).lower()} ({comparison.strategy.value})")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "grade":
        return _grade(args)
    return _compare(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
