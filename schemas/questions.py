# schemas/questions.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from answers import Answer, FractionAnswer
from generator import Mode, Question


class AnswerOut(BaseModel):
    kind: str  # "integer" | "fraction"
    value: Optional[int] = None
    numerator: Optional[int] = None
    denominator: Optional[int] = None


class QuestionOut(BaseModel):
    mode: Mode
    prompt: str


class GeneratedQuestionOut(QuestionOut):
    # stateless generation hands the answer back so the caller can check it later
    expected: AnswerOut
    expected_str: str


class ModeOut(BaseModel):
    mode: Mode
    default: bool


def question_out(q: Question) -> QuestionOut:
    return QuestionOut(mode=q.mode, prompt=q.display_text)


def answer_out(a: Answer) -> AnswerOut:
    if isinstance(a, FractionAnswer):
        return AnswerOut(kind="fraction", numerator=a.numerator, denominator=a.denominator)
    return AnswerOut(kind="integer", value=a.value)
