# schemas/marking.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, model_validator

from answers import Answer, FractionAnswer, IntegerAnswer
from generator import Mode

# ---------- Validate ----------


class ExpectedIn(BaseModel):
    value: Optional[int] = None
    numerator: Optional[int] = None
    denominator: Optional[int] = None

    @model_validator(mode="after")
    def _one_shape(self) -> "ExpectedIn":
        is_int = self.value is not None
        has_num = self.numerator is not None
        has_den = self.denominator is not None
        is_frac = has_num and has_den
        # exactly one shape, nothing from the other
        if not (is_int and not (has_num or has_den)) and not (is_frac and not is_int):
            raise ValueError("expected needs either value, or numerator and denominator")
        if is_frac and self.denominator == 0:
            raise ValueError("denominator must not be zero")
        return self

    def to_answer(self) -> Answer:
        if self.value is not None:
            return IntegerAnswer(self.value)
        return FractionAnswer.reduced(self.numerator, self.denominator)


class ValidateRequest(BaseModel):
    mode: Mode
    answer: str
    expected: ExpectedIn


class MarkResponse(BaseModel):
    ok: bool
    correct: bool
    feedback: str
    user_answer: Optional[str] = None
    expected_str: Optional[str] = None
