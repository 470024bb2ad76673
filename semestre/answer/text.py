"""
String and number helpers used by the answer comparator.

All helpers are pure and operate on plain ``str`` values:
- Normalization (lowercase, accent stripping, trimming)
- Whitespace collapsing/removal
- First-number extraction and parsing
- Levenshtein edit distance
"""

from __future__ import annotations

import re
import unicodedata

# Combining diacritical marks block (U+0300..U+036F)
_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_WHITESPACE = re.compile(r"\s+")

# Optional sign, digits with an optional '.' or ',' decimal separator,
# optional exponent. Only the first occurrence is used. The comma is read as
# a decimal separator, so "1,5 kg" gives 1.5 rather than stopping at 1.
NUMBER_PATTERN = re.compile(r"[-+]?[0-9]*[.,]?[0-9]+(?:[eE][-+]?[0-9]+)?")


def normalize_answer(text: str) -> str:
    """
    Normalize an answer for comparison.

    Lowercases, applies canonical decomposition (NFD), removes combining
    diacritics and trims surrounding whitespace, so ``" Énergie "`` becomes
    ``"energie"``.

    Args:
        text: Raw answer text

    Returns:
        Normalized text
    """
    decomposed = unicodedata.normalize("NFD", text.lower())
    return _COMBINING_MARKS.sub("", decomposed).strip()


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character."""
    return _WHITESPACE.sub("", text)


def extract_number(text: str) -> str | None:
    """
    Return the first numeric substring of ``text``.

    Units and surrounding words are ignored: ``"125 n"`` gives ``"125"``,
    ``"v = -3.2e-4 m/s"`` gives ``"-3.2e-4"``.

    Returns:
        The matched token, or None if the text contains no digits
    """
    match = NUMBER_PATTERN.search(text)
    return match.group(0) if match else None


def parse_number(token: str) -> float | None:
    """
    Parse a numeric token, accepting ``,`` as decimal separator.

    Returns:
        The parsed float (``inf`` on overflow), or None when the token
        is not a number
    """
    try:
        return float(token.replace(",", "."))
    except ValueError:
        return None


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning ``a`` into ``b``.

    Uses the full ``(len(a) + 1) x (len(b) + 1)`` table; answers are short
    so no banding or early exit is applied.
    """
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(m + 1):
        table[i][0] = i
    for j in range(n + 1):
        table[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j - 1],  # substitution
                    table[i][j - 1],  # insertion
                    table[i - 1][j],  # deletion
                )

    return table[m][n]
