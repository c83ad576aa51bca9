from __future__ import annotations

from fastapi import APIRouter

from schemas.marking import MarkResponse, ValidateRequest
from validator import validate

router = APIRouter(tags=["marking"])


@router.post("/validate", response_model=MarkResponse)
def validate_answer(req: ValidateRequest):
    """
    Stateless check of one answer against a known canonical answer.
    Nothing is scored or recorded.
    """
    res = validate(req.mode, req.answer, req.expected.to_answer())
    return {
        "ok": res.accepted,
        "correct": res.is_correct,
        "feedback": res.feedback,
        "user_answer": res.user_answer_text,
        "expected_str": res.expected_text,
    }
