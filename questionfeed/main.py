# questionfeed/main.py
import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from questionfeed import __version__
from questionfeed.core.config import settings
from questionfeed.core.errors import install_error_handlers
from questionfeed.core.logging import setup_logging
from questionfeed.deps import get_repo
from questionfeed.routers import health as health_router
from questionfeed.routers import questions as questions_router
from questionfeed.routers import stats as stats_router
from questionfeed.services.cleanup import run_cleanup_loop

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Resolve through dependency_overrides so tests and the job share one store
    repo = app.dependency_overrides.get(get_repo, get_repo)()
    await repo.ensure_indexes()

    task = None
    if settings.cleanup_enabled:
        task = asyncio.create_task(
            run_cleanup_loop(
                repo,
                interval_seconds=settings.cleanup_interval_seconds,
                capacity=settings.capacity,
                retention=timedelta(hours=settings.retention_hours),
            )
        )
    app.state.cleanup_task = task
    logger.info("%s started (store=%s)", settings.app_name, settings.store)

    yield

    if task is not None:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
    await repo.close()


app = FastAPI(lifespan=lifespan, title=settings.app_name, version=__version__)
install_error_handlers(app)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_allow_origins.split(",")],
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------- Include routers ----------------
app.include_router(questions_router.router)   # /api/questions
app.include_router(stats_router.router)       # /api/stats
app.include_router(health_router.router)      # /api/health
