from __future__ import annotations

from typing import Annotated, List

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException

import config
from analytics import track_mode_selected
from deps.session import get_store, require_session
from generator import GenerationError
from schemas.questions import question_out
from schemas.sessions import (
    AnswerIn,
    HistoryEntryOut,
    ModeChange,
    SessionCreate,
    SessionOut,
    SubmitResponse,
)
from session import HistoryEntry, SessionNotFound, SessionState, SessionStore

router = APIRouter(prefix="/sessions", tags=["sessions"])

Store = Annotated[SessionStore, Depends(get_store)]


def _history_out(e: HistoryEntry) -> HistoryEntryOut:
    return HistoryEntryOut(
        question=e.question_text,
        user_answer=e.user_answer_text,
        expected=e.expected_text,
        correct=e.correct,
        text=e.render(),
    )


def _session_out(sid: str, state: SessionState) -> SessionOut:
    return SessionOut(
        id=sid,
        mode=state.mode,
        question=question_out(state.question),
        score={"correct": state.score.correct, "wrong": state.score.wrong},
        history=[_history_out(e) for e in state.history],
    )


@router.post("", response_model=SessionOut, status_code=201)
def create_session(sessions: Store, body: SessionCreate | None = None):
    body = body or SessionCreate()
    try:
        sid, state = sessions.create(body.mode, body.seed)
    except GenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return _session_out(sid, state)


@router.get("/{session_id}", response_model=SessionOut)
def get_session(session_id: str, state: Annotated[SessionState, Depends(require_session)]):
    return _session_out(session_id, state)


@router.get("/{session_id}/history", response_model=List[HistoryEntryOut])
def get_history(state: Annotated[SessionState, Depends(require_session)]):
    return [_history_out(e) for e in state.history]


@router.post("/{session_id}/answer", response_model=SubmitResponse)
def submit(session_id: str, body: AnswerIn, sessions: Store):
    try:
        state, res = sessions.submit(session_id, body.answer)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")
    except GenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "ok": res.accepted,
        "correct": res.is_correct,
        "feedback": res.feedback,
        "user_answer": res.user_answer_text,
        "expected_str": res.expected_text,
        "score": {"correct": state.score.correct, "wrong": state.score.wrong},
        "next_question": question_out(state.question),
        # rejected input keeps the same question on screen, no overlay
        "advance_after_ms": config.FEEDBACK_DELAY_MS if res.accepted else 0,
    }


@router.put("/{session_id}/mode", response_model=SessionOut)
def change_mode(session_id: str, body: ModeChange, sessions: Store, background: BackgroundTasks):
    try:
        state = sessions.switch_mode(session_id, body.mode)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")
    except GenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    background.add_task(track_mode_selected, state.mode.value)
    return _session_out(session_id, state)


@router.delete("/{session_id}", status_code=204)
def end_session(session_id: str, sessions: Store):
    try:
        sessions.delete(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")
