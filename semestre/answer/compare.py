"""
Answer comparator.

Single source of truth for deciding whether a submitted answer matches the
canonical answer of a question. Every consumer (score tally, results view,
report export) goes through :func:`compare` or :func:`explain`.

The comparator is a total function: it never raises, never logs and never
mutates its inputs.

Multiple choice:
    trimmed strings equal, or equal first characters (so ``"A"`` matches
    ``"A. 12 J"``).

Fill in the blank, first rule that applies wins:
    1. normalized exact match
    2. numeric comparison with 5% relative tolerance when both sides
       contain a number (final, no text fallback)
    3. Levenshtein distance for correct answers longer than 4 characters
    4. substring containment in either direction
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, NamedTuple

from semestre.exam.models import QuestionType

from .text import (
    collapse_whitespace,
    extract_number,
    levenshtein_distance,
    normalize_answer,
    parse_number,
    strip_whitespace,
)

NUMERIC_RELATIVE_TOLERANCE = 0.05
FUZZY_RATIO = 0.3
FUZZY_MIN_EDITS = 2
FUZZY_MIN_LENGTH = 4
CONTAINMENT_MIN_LENGTH = 3


class MatchStrategy(str, Enum):
    """Rule that decided a comparison"""
    UNANSWERED = "unanswered"
    EXACT = "exact"
    LEADING_CHARACTER = "leading_character"
    NUMERIC = "numeric"
    EDIT_DISTANCE = "edit_distance"
    CONTAINMENT = "containment"
    NO_MATCH = "no_match"


class Comparison(NamedTuple):
    """Outcome of a comparison plus the rule that produced it"""
    matched: bool
    strategy: MatchStrategy


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def explain(user_answer: Any, correct_answer: Any, question_type: Any) -> Comparison:
    """
    Compare two answers and report which rule decided.

    Args:
        user_answer: Submitted answer; None or non-string means unanswered
        correct_answer: Canonical answer text
        question_type: QuestionType or its string value

    Returns:
        Comparison(matched, strategy)
    """
    user = _as_text(user_answer)
    correct = _as_text(correct_answer)

    if not user.strip():
        return Comparison(False, MatchStrategy.UNANSWERED)

    if question_type == QuestionType.MULTIPLE_CHOICE:
        return _compare_choice(user, correct)
    return _compare_blank(user, correct)


def compare(user_answer: Any, correct_answer: Any, question_type: Any) -> bool:
    """
    Decide whether ``user_answer`` is correct.

    Returns:
        True if the answer is accepted
    """
    return explain(user_answer, correct_answer, question_type).matched


def _compare_choice(user: str, correct: str) -> Comparison:
    user_trim = user.strip()
    correct_trim = correct.strip()

    if user_trim == correct_trim:
        return Comparison(True, MatchStrategy.EXACT)
    if user_trim and correct_trim and user_trim[0] == correct_trim[0]:
        return Comparison(True, MatchStrategy.LEADING_CHARACTER)
    return Comparison(False, MatchStrategy.NO_MATCH)


def _compare_blank(user: str, correct: str) -> Comparison:
    user_norm = normalize_answer(user)
    correct_norm = normalize_answer(correct)

    if user_norm == correct_norm:
        return Comparison(True, MatchStrategy.EXACT)

    numeric = _compare_numbers(user_norm, correct_norm)
    if numeric is not None:
        return Comparison(numeric, MatchStrategy.NUMERIC)

    clean_user = collapse_whitespace(user_norm)
    clean_correct = collapse_whitespace(correct_norm)

    if len(clean_correct) > FUZZY_MIN_LENGTH:
        max_distance = max(FUZZY_MIN_EDITS, math.floor(len(clean_correct) * FUZZY_RATIO))
        distance = levenshtein_distance(strip_whitespace(user_norm), strip_whitespace(correct_norm))
        if distance <= max_distance:
            return Comparison(True, MatchStrategy.EDIT_DISTANCE)

    if len(clean_correct) > CONTAINMENT_MIN_LENGTH and clean_correct in clean_user:
        return Comparison(True, MatchStrategy.CONTAINMENT)
    if len(clean_user) > CONTAINMENT_MIN_LENGTH and clean_user in clean_correct:
        return Comparison(True, MatchStrategy.CONTAINMENT)

    return Comparison(False, MatchStrategy.NO_MATCH)


def _compare_numbers(user_norm: str, correct_norm: str) -> bool | None:
    """None when either side has no usable number."""
    user_token = extract_number(user_norm)
    correct_token = extract_number(correct_norm)
    if user_token is None or correct_token is None:
        return None

    user_num = parse_number(user_token)
    correct_num = parse_number(correct_token)
    if user_num is None or correct_num is None:
        return None

    tolerance = abs(correct_num * NUMERIC_RELATIVE_TOLERANCE)
    return abs(user_num - correct_num) <= tolerance
