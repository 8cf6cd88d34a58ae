# questionfeed/deps.py
from questionfeed.core.config import settings

_repo_singleton = None


def build_repo():
    if settings.store == "memory":
        from questionfeed.repos.inmemory import InMemoryQuestionRepo
        return InMemoryQuestionRepo()
    from questionfeed.core.db import get_db
    from questionfeed.repos.mongo import MongoQuestionRepo
    return MongoQuestionRepo(get_db(), ttl_index=settings.ttl_index)


def get_repo():
    global _repo_singleton
    if _repo_singleton is None:
        _repo_singleton = build_repo()
    return _repo_singleton
