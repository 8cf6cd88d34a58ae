# questionfeed/repos/mongo.py
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from pymongo import ASCENDING, DESCENDING

from questionfeed.core.indexes import ensure_indexes
from questionfeed.services.lifecycle import RETENTION, excess_count, expiry_cutoff

LIST_FIELDS = {"_id": 1, "question": 1, "email": 1, "donation": 1, "createdAt": 1}


class MongoQuestionRepo:
    def __init__(self, db, ttl_index: bool = False):
        self.col = db["questions"]
        self.ttl_index = ttl_index

    async def ensure_indexes(self):
        await ensure_indexes(self.col, ttl=self.ttl_index)

    # Reads
    async def count(self) -> int:
        return await self.col.count_documents({})

    async def count_since(self, since: datetime) -> int:
        return await self.col.count_documents({"createdAt": {"$gte": since}})

    async def sum_donations(self) -> float:
        agg = self.col.aggregate([{"$group": {"_id": None, "total": {"$sum": "$donation"}}}])
        async for row in agg:
            return row.get("total") or 0
        return 0

    async def list_recent(self, limit: int) -> List[Dict]:
        cur = self.col.find({}, LIST_FIELDS).sort("createdAt", DESCENDING).limit(limit)
        return [d async for d in cur]

    async def excess_ids(self, capacity: int) -> List:
        n = excess_count(await self.count(), capacity)
        if n <= 0:
            return []
        cur = self.col.find({}, {"_id": 1}).sort([("createdAt", ASCENDING), ("_id", ASCENDING)]).limit(n)
        return [d["_id"] async for d in cur]

    # Writes
    async def insert(self, doc: Dict) -> Dict:
        doc = dict(doc)
        res = await self.col.insert_one(doc)
        doc["_id"] = res.inserted_id
        return doc

    async def delete_oldest(self) -> Optional[Dict]:
        return await self.col.find_one_and_delete({}, sort=[("createdAt", ASCENDING), ("_id", ASCENDING)])

    async def delete_expired(self, now: datetime, retention: timedelta = RETENTION) -> int:
        res = await self.col.delete_many({"createdAt": {"$lt": expiry_cutoff(now, retention)}})
        return res.deleted_count

    async def delete_ids(self, ids: List) -> int:
        if not ids:
            return 0
        res = await self.col.delete_many({"_id": {"$in": list(ids)}})
        return res.deleted_count

    async def close(self):
        self.col.database.client.close()
