from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from conftest import seed

pytestmark = pytest.mark.anyio

VALID = {"question": "What is a monad?", "email": "Ada@Example.com ", "donation": "3.25"}


async def test_submit_then_list(test_client: AsyncClient, repo):
    before = datetime.now(timezone.utc)
    r = await test_client.post("/api/questions", json=VALID)
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["message"] == "Question submitted successfully"
    created = body["question"]
    assert set(created) == {"_id", "question", "donation", "createdAt"}
    assert created["question"] == "What is a monad?"
    assert created["donation"] == 3.25

    stored = repo.questions[created["_id"]]
    assert stored["email"] == "ada@example.com"
    assert before - timedelta(seconds=1) <= stored["createdAt"] <= datetime.now(timezone.utc)
    assert stored["expiresAt"] - stored["createdAt"] == timedelta(hours=24)

    listed = (await test_client.get("/api/questions")).json()
    assert listed == [
        {
            "_id": created["_id"],
            "question": "What is a monad?",
            "email": "ada@example.com",
            "donation": 3.25,
            "createdAt": created["createdAt"],
        }
    ]
    assert created["createdAt"].endswith("Z")


@pytest.mark.parametrize(
    "payload,error",
    [
        ({**VALID, "question": ""}, "All fields are required"),
        ({"question": "hi", "email": "a@b.co"}, "All fields are required"),
        ({**VALID, "question": "   "}, "Question cannot be empty"),
        ({**VALID, "question": "x" * 1001}, "Question is too long (max 1000 characters)"),
        ({**VALID, "email": "a@b"}, "Invalid email format"),
        ({**VALID, "donation": 0}, "Invalid donation amount"),
        ({**VALID, "donation": -5}, "Invalid donation amount"),
        ({**VALID, "donation": "abc"}, "Invalid donation amount"),
    ],
)
async def test_rejected_submissions_store_nothing(test_client: AsyncClient, repo, payload, error):
    r = await test_client.post("/api/questions", json=payload)
    assert r.status_code == 400
    assert r.json() == {"error": error}
    assert await repo.count() == 0


async def test_malformed_body_is_400(test_client: AsyncClient, repo):
    r = await test_client.post("/api/questions", content=b"not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert "error" in r.json()
    r = await test_client.post("/api/questions", json=["a", "b"])
    assert r.status_code == 400
    assert await repo.count() == 0


async def test_list_is_newest_first(test_client: AsyncClient, repo):
    now = datetime.now(timezone.utc)
    seed(repo, [now - timedelta(minutes=3), now - timedelta(minutes=2), now - timedelta(minutes=1)])
    ids = [q["_id"] for q in (await test_client.get("/api/questions")).json()]
    assert ids == ["000002", "000001", "000000"]


async def test_list_empty_store(test_client: AsyncClient):
    r = await test_client.get("/api/questions")
    assert r.status_code == 200
    assert r.json() == []


async def test_submit_at_capacity_evicts_oldest(test_client: AsyncClient, repo):
    now = datetime.now(timezone.utc)
    seed(repo, [now - timedelta(hours=2) + timedelta(milliseconds=i) for i in range(10_000)])
    assert await repo.count() == 10_000

    r = await test_client.post("/api/questions", json=VALID)
    assert r.status_code == 201
    assert await repo.count() == 10_000
    assert "000000" not in repo.questions
    assert "000001" in repo.questions
    assert r.json()["question"]["_id"] in repo.questions


async def test_unknown_route_uses_error_shape(test_client: AsyncClient):
    r = await test_client.get("/api/nope")
    assert r.status_code == 404
    assert r.json() == {"error": "Not Found"}


async def test_oversized_numeric_donation_is_400(test_client: AsyncClient, repo):
    raw = '{"question": "q", "email": "a@b.co", "donation": 1' + "0" * 400 + "}"
    r = await test_client.post("/api/questions", content=raw.encode(), headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid donation amount"}
    assert await repo.count() == 0


async def test_underscored_donation_string_is_400(test_client: AsyncClient, repo):
    r = await test_client.post("/api/questions", json={**VALID, "donation": "1_000"})
    assert r.status_code == 400
    assert r.json() == {"error": "Invalid donation amount"}
    assert await repo.count() == 0
