"""
Plain-text rendering of answers and question statements.

Generated questions carry inline LaTeX. Reports are written with standard
fonts, so math markup is flattened to readable ASCII and unsupported
characters are mapped to safe equivalents.
"""

from __future__ import annotations

import re

GREEK_LETTERS = {
    r"\alpha": "alpha", r"\beta": "beta", r"\gamma": "gamma", r"\delta": "delta",
    r"\epsilon": "epsilon", r"\theta": "theta", r"\lambda": "lambda", r"\mu": "mu",
    r"\pi": "pi", r"\rho": "rho", r"\sigma": "sigma", r"\tau": "tau",
    r"\phi": "phi", r"\omega": "omega", r"\Delta": "Delta", r"\Omega": "Ohm",
}

MATH_SYMBOLS = {
    r"\times": "x", r"\div": "/", r"\pm": "+/-", r"\mp": "-/+",
    r"\leq": "<=", r"\geq": ">=", r"\neq": "!=", r"\approx": "~",
    r"\infty": "infinity", r"\partial": "d", r"\nabla": "del",
    r"\sqrt": "sqrt", r"\int": "integral", r"\sum": "sum", r"\prod": "prod",
    r"\deg": "deg", r"\circ": "deg", r"\cdot": "*",
}

UNSAFE_CHARACTERS = {
    "€": "EUR", "–": "-", "—": "-", "‘": "'", "’": "'", "“": '"', "”": '"',
    "…": "...", "×": "x", "÷": "/", "±": "+/-", "≤": "<=", "≥": ">=",
    "≠": "!=", "≈": "~", "°": " deg", "·": "*", "√": "sqrt", "π": "pi",
    "∞": "infinity", "→": "->", "Δ": "Delta", "Ω": "Ohm", "µ": "u", "μ": "u",
    "⁰": "^0", "¹": "^1", "²": "^2", "³": "^3", "⁴": "^4",
    "⁵": "^5", "⁶": "^6", "⁷": "^7", "⁸": "^8", "⁹": "^9", "⁻": "^-",
    "₀": "_0", "₁": "_1", "₂": "_2", "₃": "_3", "₄": "_4",
    "₅": "_5", "₆": "_6", "₇": "_7", "₈": "_8", "₉": "_9",
}

_STRUCTURES = [
    (re.compile(r"\\frac\{([^}]+)\}\{([^}]+)\}"), r"(\1/\2)"),
    (re.compile(r"\\sqrt\{([^}]+)\}"), r"sqrt(\1)"),
    (re.compile(r"\^\{([^}]+)\}"), r"^(\1)"),
    (re.compile(r"_\{([^}]+)\}"), r"_(\1)"),
    (re.compile(r"\\text\{([^}]+)\}"), r"\1"),
]

# Longest names first
_GREEK = re.compile("|".join(re.escape(k) for k in sorted(GREEK_LETTERS, key=len, reverse=True)) + r"(?![a-zA-Z])")
_SYMBOLS = re.compile("|".join(re.escape(k) for k in sorted(MATH_SYMBOLS, key=len, reverse=True)) + r"(?![a-zA-Z])")
_COMMAND = re.compile(r"\\[a-zA-Z]+")


def latex_to_readable(text: str) -> str:
    """
    Flatten inline LaTeX to readable text.

    Examples:
        >>> latex_to_readable(r"$\\frac{1}{2} m v^{2}$")
        '(1/2) m v^(2)'
        >>> latex_to_readable(r"$a \\times b$")
        'a x b'
    """
    result = text
    for pattern, replacement in _STRUCTURES:
        result = pattern.sub(replacement, result)

    result = _GREEK.sub(lambda m: GREEK_LETTERS[m.group(0)], result)
    result = _SYMBOLS.sub(lambda m: f" {MATH_SYMBOLS[m.group(0)]} ", result)

    result = _COMMAND.sub("", result)
    result = result.replace("$", "")
    result = re.sub(r"[{}]", "", result)
    return re.sub(r"\s+", " ", result).strip()


def sanitize_for_report(text: str) -> str:
    """Replace characters that standard report fonts cannot draw."""
    return "".join(UNSAFE_CHARACTERS.get(ch, ch) for ch in text)


def readable(text: str) -> str:
    """LaTeX flattening followed by character sanitizing."""
    return sanitize_for_report(latex_to_readable(text))
