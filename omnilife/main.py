"""
OmniLife - Main Application
Stateless HTTP surface over the habit consistency & streak engine.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from omnilife import __version__
from omnilife.api.stats import router as stats_router
from omnilife.config import settings

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("omnilife")

app = FastAPI(
    title="OmniLife",
    description="Habit consistency, streaks, grades and monthly/yearly rollups.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(stats_router)


@app.get("/health")
def health_check():
    return {"status": "ok"}


logger.info("app_ready", extra={"env": settings.env})
