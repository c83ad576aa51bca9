# Drill session state and its transitions.

from __future__ import annotations

import logging
import random
import secrets
import threading
from collections import OrderedDict
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

import config
from generator import DEFAULT_MODE, Mode, Question, generate
from validator import ValidationResult, validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Score:
    correct: int = 0
    wrong: int = 0

    def record(self, is_correct: bool) -> "Score":
        if is_correct:
            return replace(self, correct=self.correct + 1)
        return replace(self, wrong=self.wrong + 1)


@dataclass(frozen=True)
class HistoryEntry:
    question_text: str
    user_answer_text: str
    expected_text: str
    correct: bool

    def render(self) -> str:
        if self.correct:
            return f"{self.question_text} = {self.user_answer_text} ✅"
        return f"{self.question_text} = {self.user_answer_text} ❌ (Should be {self.expected_text})"


@dataclass(frozen=True)
class SessionState:
    mode: Mode
    question: Question
    score: Score = field(default_factory=Score)
    # most recent first
    history: Tuple[HistoryEntry, ...] = ()


def start_session(mode: Mode = DEFAULT_MODE, rng: Optional[random.Random] = None) -> SessionState:
    mode = Mode(mode)
    return SessionState(mode=mode, question=generate(mode, rng))


def submit_answer(
    state: SessionState, raw_input: Optional[str], rng: Optional[random.Random] = None
) -> Tuple[SessionState, ValidationResult]:
    """
    Check an answer against the current question.
    A rejected answer leaves the state untouched. An accepted one is scored,
    prepended to the history and replaced by a fresh question in the same mode.
    """
    result = validate(state.mode, raw_input, state.question.canonical_answer)
    if not result.accepted:
        return state, result

    entry = HistoryEntry(
        question_text=state.question.display_text,
        user_answer_text=result.user_answer_text or "",
        expected_text=result.expected_text or "",
        correct=result.is_correct,
    )
    new_state = replace(
        state,
        question=generate(state.mode, rng),
        score=state.score.record(result.is_correct),
        history=(entry,) + state.history,
    )
    return new_state, result


def switch_mode(
    state: SessionState, mode: Mode, rng: Optional[random.Random] = None
) -> SessionState:
    mode = Mode(mode)
    return replace(state, mode=mode, question=generate(mode, rng))


# --- In-memory store --------------------------------------------------------------


class SessionNotFound(KeyError):
    pass


class SessionStore:
    """
    In-memory sessions, each with its own random source.
    Holds at most `max_sessions`; the least recently used one is evicted first.
    """

    def __init__(self, max_sessions: Optional[int] = None) -> None:
        self._sessions: OrderedDict[str, Tuple[SessionState, random.Random]] = OrderedDict()
        self._lock = threading.Lock()
        self.max_sessions = max(1, config.MAX_SESSIONS if max_sessions is None else max_sessions)

    def create(self, mode: Mode = DEFAULT_MODE, seed: Optional[int] = None) -> Tuple[str, SessionState]:
        rng = random.Random(seed)
        state = start_session(mode, rng)
        sid = secrets.token_urlsafe(12)
        with self._lock:
            self._sessions[sid] = (state, rng)
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("session %s evicted", evicted)
        logger.info("session %s started in %s mode", sid, state.mode.value)
        return sid, state

    def get(self, sid: str) -> SessionState:
        with self._lock:
            return self._entry(sid)[0]

    def submit(self, sid: str, raw_input: Optional[str]) -> Tuple[SessionState, ValidationResult]:
        with self._lock:
            state, rng = self._entry(sid)
            new_state, result = submit_answer(state, raw_input, rng)
            self._sessions[sid] = (new_state, rng)
        return new_state, result

    def switch_mode(self, sid: str, mode: Mode) -> SessionState:
        with self._lock:
            state, rng = self._entry(sid)
            new_state = switch_mode(state, mode, rng)
            self._sessions[sid] = (new_state, rng)
        logger.info("session %s switched to %s mode", sid, new_state.mode.value)
        return new_state

    def delete(self, sid: str) -> None:
        with self._lock:
            if self._sessions.pop(sid, None) is None:
                raise SessionNotFound(sid)
        logger.info("session %s ended", sid)

    def _entry(self, sid: str) -> Tuple[SessionState, random.Random]:
        try:
            entry = self._sessions[sid]
        except KeyError:
            raise SessionNotFound(sid) from None
        self._sessions.move_to_end(sid)
        return entry

    def count(self) -> int:
        with self._lock:
            return len(self._sessions)


store = SessionStore()
