# schemas/sessions.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from generator import DEFAULT_MODE, Mode
from schemas.questions import QuestionOut


class SessionCreate(BaseModel):
    mode: Mode = DEFAULT_MODE
    # fixed seed makes the question sequence reproducible
    seed: Optional[int] = None


class ModeChange(BaseModel):
    mode: Mode


class AnswerIn(BaseModel):
    answer: str


class ScoreOut(BaseModel):
    correct: int
    wrong: int


class HistoryEntryOut(BaseModel):
    question: str
    user_answer: str
    expected: str
    correct: bool
    text: str


class SessionOut(BaseModel):
    id: str
    mode: Mode
    question: QuestionOut
    score: ScoreOut
    history: List[HistoryEntryOut]


class SubmitResponse(BaseModel):
    ok: bool
    correct: bool
    feedback: str
    user_answer: Optional[str] = None
    expected_str: Optional[str] = None
    score: ScoreOut
    # question to show once the feedback delay has elapsed (current one if not ok)
    next_question: QuestionOut
    advance_after_ms: int
