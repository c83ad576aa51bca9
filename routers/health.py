from fastapi import APIRouter

from generator import Mode, generate
from session import store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
def health():
    return {"ok": True, "sessions": store.count()}


@router.get("/generators")
def health_generators():
    # one sample per mode; a failing generator shows up by name
    results = {}
    for mode in Mode:
        try:
            results[mode.value] = generate(mode).display_text
        except Exception as e:
            results[mode.value] = f"error: {type(e).__name__}: {e}"
    ok = not any(v.startswith("error:") for v in results.values())
    return {"ok": ok, "samples": results}
