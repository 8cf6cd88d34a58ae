# questionfeed/core/indexes.py
from pymongo import ASCENDING


async def ensure_index(col, keys, name: str, **kwargs):
    existing = [ix["name"] async for ix in col.list_indexes()]
    if name in existing:
        return
    await col.create_index(keys, name=name, **kwargs)


async def ensure_indexes(col, ttl: bool = False):
    # Ordered range queries for eviction, sweeps and the feed
    await ensure_index(col, [("createdAt", ASCENDING)], "createdAt_1")
    if ttl:
        await ensure_index(col, [("expiresAt", ASCENDING)], "expiresAt_ttl", expireAfterSeconds=0)
