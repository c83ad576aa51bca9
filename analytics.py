# Fire-and-forget usage events (mode selection).

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Deque, Dict, List, Tuple

import config

logger = logging.getLogger(__name__)

SELECT_MODE_EVENT = "select_math_mode"


class Analytics:
    """
    Default sink: logs each event and keeps the most recent ones in memory.
    track() never raises; a failing sink must not affect the drill.
    """

    def __init__(self, buffer_size: int = config.ANALYTICS_BUFFER):
        self._recent: Deque[Tuple[str, Dict[str, Any]]] = deque(maxlen=buffer_size)

    def track(self, event: str, params: Dict[str, Any]) -> None:
        try:
            self._emit(event, dict(params))
        except Exception:
            logger.exception("analytics event %s dropped", event)

    def _emit(self, event: str, params: Dict[str, Any]) -> None:
        logger.info("analytics event=%s params=%s", event, params)
        self._recent.append((event, params))

    def recent(self) -> List[Tuple[str, Dict[str, Any]]]:
        return list(self._recent)

    def clear(self) -> None:
        self._recent.clear()


analytics = Analytics()


def track_mode_selected(mode: str) -> None:
    analytics.track(SELECT_MODE_EVENT, {"math_mode": mode})
