import os

# Order-of-operations questions are regenerated while |answer| exceeds this.
ORDER_ANSWER_LIMIT = int(os.getenv("DRILL_ORDER_ANSWER_LIMIT", "500"))

# Upper bound on redraws for any rejection-sampled question.
REGENERATE_CAP = int(os.getenv("DRILL_REGENERATE_CAP", "10000"))

# How long the front end shows YES!/OOPS! before rendering the next question.
FEEDBACK_DELAY_MS = int(os.getenv("DRILL_FEEDBACK_DELAY_MS", "800"))

ANALYTICS_BUFFER = int(os.getenv("DRILL_ANALYTICS_BUFFER", "100"))

LOG_LEVEL = os.getenv("DRILL_LOG_LEVEL", "INFO").upper()

_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"
ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("DRILL_ALLOWED_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()
]

# Oldest idle sessions are evicted once the store holds this many.
MAX_SESSIONS = int(os.getenv("DRILL_MAX_SESSIONS", "10000"))
