# tests/conftest.py
import os

os.environ.setdefault("QF_STORE", "memory")
os.environ.setdefault("QF_CLEANUP_ENABLED", "false")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from asgi_lifespan import LifespanManager  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from questionfeed.deps import get_repo  # noqa: E402
from questionfeed.main import app  # noqa: E402
from questionfeed.repos.inmemory import InMemoryQuestionRepo  # noqa: E402

NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


def make_doc(created_at: datetime, _id: str = None, donation: float = 1.0, question: str = "q?"):
    doc = {
        "question": question,
        "email": "someone@example.com",
        "donation": donation,
        "createdAt": created_at,
        "expiresAt": created_at + timedelta(hours=24),
    }
    if _id is not None:
        doc["_id"] = _id
    return doc


def seed(repo: InMemoryQuestionRepo, created_ats):
    """Put docs straight into the store; ids sort the same way as their timestamps."""
    for i, ts in enumerate(created_ats):
        _id = f"{i:06d}"
        repo.questions[_id] = {**make_doc(ts), "_id": _id}


@pytest.fixture
def anyio_backend():
    # keep AnyIO on asyncio
    return "asyncio"


@pytest.fixture
def repo():
    return InMemoryQuestionRepo()


@pytest.fixture
async def test_client(repo):
    app.dependency_overrides[get_repo] = lambda: repo
    async with LifespanManager(app):
        transport = ASGITransport(app=app, raise_app_exceptions=True)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    app.dependency_overrides.clear()
