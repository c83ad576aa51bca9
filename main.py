import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config

# Routers
from routers.health import router as health_router
from routers.marking import router as marking_router
from routers.questions import router as questions_router
from routers.sessions import router as sessions_router

logger = logging.getLogger("arithmetic-drill")
logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))

app = FastAPI(title="Arithmetic Drill API")

# Allow calls from the browser front end
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(sessions_router)  # /sessions/...
app.include_router(questions_router)  # /modes, /questions
app.include_router(marking_router)  # /validate
app.include_router(health_router)  # /health/...

logger.info("drill API ready; order answers capped at %d", config.ORDER_ANSWER_LIMIT)
