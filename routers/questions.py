from __future__ import annotations

import random as _rnd
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from generator import DEFAULT_MODE, GenerationError, Mode, generate
from schemas.questions import GeneratedQuestionOut, ModeOut, answer_out

router = APIRouter(tags=["questions"])


@router.get("/modes", response_model=List[ModeOut])
def list_modes():
    return [{"mode": m, "default": m is DEFAULT_MODE} for m in Mode]


@router.get("/questions", response_model=List[GeneratedQuestionOut])
def generate_questions(
    mode: Mode = DEFAULT_MODE,
    limit: int = Query(default=1, ge=1, le=100),
    seed: Optional[int] = Query(default=None, description="Fix the random source for repeatable sets"),
):
    rng = _rnd.Random(seed)
    try:
        qs = [generate(mode, rng) for _ in range(limit)]
    except GenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return [
        {
            "mode": q.mode,
            "prompt": q.display_text,
            "expected": answer_out(q.canonical_answer),
            "expected_str": str(q.canonical_answer),
        }
        for q in qs
    ]
