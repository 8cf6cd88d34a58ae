# questionfeed/repos/inmemory.py
import uuid
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from questionfeed.services.lifecycle import RETENTION, oldest_first, select_excess, select_expired


def _id() -> str:
    return uuid.uuid4().hex


class InMemoryQuestionRepo:
    def __init__(self):
        self.questions: Dict[str, dict] = {}

    async def ensure_indexes(self):
        return None

    # Reads
    async def count(self) -> int:
        return len(self.questions)

    async def count_since(self, since: datetime) -> int:
        return sum(1 for q in self.questions.values() if q["createdAt"] >= since)

    async def sum_donations(self) -> float:
        return sum(q["donation"] for q in self.questions.values())

    async def list_recent(self, limit: int) -> List[dict]:
        newest = list(reversed(oldest_first(self.questions.values())))[:limit]
        return [
            {k: q[k] for k in ("_id", "question", "email", "donation", "createdAt")}
            for q in newest
        ]

    async def excess_ids(self, capacity: int) -> List[str]:
        return [q["_id"] for q in select_excess(self.questions.values(), capacity)]

    # Writes
    async def insert(self, doc: dict) -> dict:
        doc = dict(doc)
        doc.setdefault("_id", _id())
        self.questions[doc["_id"]] = doc
        return dict(doc)

    async def delete_oldest(self) -> Optional[dict]:
        if not self.questions:
            return None
        oldest = oldest_first(self.questions.values())[0]
        return self.questions.pop(oldest["_id"])

    async def delete_expired(self, now: datetime, retention: timedelta = RETENTION) -> int:
        stale = select_expired(self.questions.values(), now, retention)
        for q in stale:
            del self.questions[q["_id"]]
        return len(stale)

    async def delete_ids(self, ids: List[str]) -> int:
        removed = 0
        for qid in ids:
            if self.questions.pop(qid, None) is not None:
                removed += 1
        return removed

    async def close(self):
        return None
