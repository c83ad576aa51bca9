# Answer checking for submitted text against a canonical answer.

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Optional

from answers import Answer, FractionAnswer, simplify
from generator import Mode

_FRACTION_RE = re.compile(r"^\s*(\d+)\s*/\s*(\d+)\s*$", re.ASCII)
_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)
_RADIX_RE = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$", re.ASCII)

LEN_LIMIT = 100

CORRECT_FEEDBACK = "YES!"
WRONG_FEEDBACK = "OOPS!"
_EMPTY_MSG = "Answer required."
_TOO_LONG_MSG = f"Answer too long (> {LEN_LIMIT})."
_FRACTION_FORMAT_MSG = "Type your answer as a fraction, like 3/4."
_ZERO_DENOMINATOR_MSG = "The bottom number can't be zero."


@dataclass(frozen=True)
class ValidationResult:
    accepted: bool
    is_correct: bool = False
    user_answer_text: Optional[str] = None
    expected_text: Optional[str] = None
    feedback: str = ""


def _rejected(msg: str) -> ValidationResult:
    return ValidationResult(accepted=False, feedback=msg)


def parse_number(text: str) -> float:
    """
    Read a decimal number or a 0x/0o/0b integer literal. Anything else comes
    back as NaN, which never equals an integer answer.
    """
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf
    if _RADIX_RE.fullmatch(text):
        return float(int(text, 0))
    if _DECIMAL_RE.fullmatch(text) is None:
        return math.nan
    return float(text)


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == int(value):
        return str(int(value))
    return repr(value)


def _validate_fraction(text: str, expected: Answer) -> ValidationResult:
    m = _FRACTION_RE.match(text)
    if not m:
        return _rejected(_FRACTION_FORMAT_MSG)
    num, den = int(m.group(1)), int(m.group(2))
    if den == 0:
        return _rejected(_ZERO_DENOMINATOR_MSG)

    user = simplify(num, den)
    if isinstance(expected, FractionAnswer):
        correct = user == simplify(expected.numerator, expected.denominator)
    else:
        correct = user == (expected.value, 1)
    return ValidationResult(
        accepted=True,
        is_correct=correct,
        user_answer_text=f"{num}/{den}",
        expected_text=str(expected),
        feedback=CORRECT_FEEDBACK if correct else WRONG_FEEDBACK,
    )


def _validate_number(text: str, expected: Answer) -> ValidationResult:
    value = parse_number(text)
    if isinstance(expected, FractionAnswer):
        target = expected.numerator / expected.denominator
    else:
        target = expected.value
    correct = value == target
    return ValidationResult(
        accepted=True,
        is_correct=correct,
        user_answer_text=format_number(value),
        expected_text=str(expected),
        feedback=CORRECT_FEEDBACK if correct else WRONG_FEEDBACK,
    )


def validate(mode: Mode, raw_input: Optional[str], expected: Answer) -> ValidationResult:
    text = (raw_input or "").strip()
    if not text:
        return _rejected(_EMPTY_MSG)
    if len(text) > LEN_LIMIT:
        return _rejected(_TOO_LONG_MSG)
    if Mode(mode) is Mode.FRACTIONS:
        return _validate_fraction(text, expected)
    return _validate_number(text, expected)
