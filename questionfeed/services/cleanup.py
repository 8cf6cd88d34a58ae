# questionfeed/services/cleanup.py
import asyncio
import logging
from datetime import datetime, timedelta
from typing import Dict, Optional

from questionfeed.services.lifecycle import CAPACITY, RETENTION, utcnow

logger = logging.getLogger(__name__)


async def run_cleanup(
    repo,
    capacity: int = CAPACITY,
    retention: timedelta = RETENTION,
    now: Optional[datetime] = None,
) -> Dict[str, int]:
    """
    One sweep over the feed:
      1. drop everything created before now - retention
      2. if still above capacity, drop exactly the oldest excess
    Safe to run repeatedly; a second run right after the first removes nothing.
    """
    logger.info("Running cleanup task...")
    now = now or utcnow()

    expired = await repo.delete_expired(now, retention)
    if expired > 0:
        logger.info("Removed %d expired questions", expired)

    ids = await repo.excess_ids(capacity)
    trimmed = 0
    if ids:
        trimmed = await repo.delete_ids(ids)
        logger.info("Removed %d excess questions to maintain %d limit", trimmed, capacity)

    return {
        "expired_removed": expired,
        "excess_removed": trimmed,
        "remaining": await repo.count(),
    }


async def run_cleanup_loop(
    repo,
    interval_seconds: float = 3600,
    capacity: int = CAPACITY,
    retention: timedelta = RETENTION,
):
    logger.info("Cleanup loop started (every %ss)", interval_seconds)
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            await run_cleanup(repo, capacity=capacity, retention=retention)
        except Exception:
            # next tick retries; the process keeps serving
            logger.exception("Error during cleanup task")
