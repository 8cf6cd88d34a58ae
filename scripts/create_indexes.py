import asyncio

from questionfeed.core.config import settings
from questionfeed.core.db import get_db
from questionfeed.repos.mongo import MongoQuestionRepo


async def main():
    repo = MongoQuestionRepo(get_db(), ttl_index=settings.ttl_index)
    await repo.ensure_indexes()
    print("✅ Indexes ensured on", settings.mongodb_db + ".questions")
    await repo.close()

if __name__ == "__main__":
    asyncio.run(main())
