# One-off sweep, same as the hourly task
import asyncio
from datetime import timedelta

from questionfeed.core.config import settings
from questionfeed.core.logging import setup_logging
from questionfeed.deps import build_repo
from questionfeed.services.cleanup import run_cleanup


async def main():
    setup_logging(settings.log_level)
    repo = build_repo()
    report = await run_cleanup(
        repo,
        capacity=settings.capacity,
        retention=timedelta(hours=settings.retention_hours),
    )
    print("Cleanup:", report)
    await repo.close()

if __name__ == "__main__":
    asyncio.run(main())
