# questionfeed/routers/health.py
import time

from fastapi import APIRouter

import questionfeed
from questionfeed.schemas import HealthOut
from questionfeed.services.lifecycle import iso, utcnow

router = APIRouter(prefix="/api/health", tags=["health"])


def uptime() -> float:
    return time.monotonic() - questionfeed.STARTED_AT


@router.get("", response_model=HealthOut)
def health():
    return {"status": "OK", "timestamp": iso(utcnow()), "uptime": uptime()}
