# questionfeed/routers/stats.py
from fastapi import APIRouter, Depends

from questionfeed.deps import get_repo
from questionfeed.schemas import StatsOut
from questionfeed.services.questions import question_stats

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsOut)
async def overview(repo=Depends(get_repo)):
    return await question_stats(repo)
