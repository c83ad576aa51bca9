from typing import Annotated

from fastapi import Depends, HTTPException, Path

from session import SessionNotFound, SessionState, SessionStore, store


def get_store() -> SessionStore:
    return store


def require_session(
    session_id: Annotated[str, Path()],
    sessions: Annotated[SessionStore, Depends(get_store)],
) -> SessionState:
    """
    Resolve the {session_id} path parameter to its current state, or 404.
    """
    try:
        return sessions.get(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")
