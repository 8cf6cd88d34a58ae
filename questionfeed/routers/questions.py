# questionfeed/routers/questions.py
from datetime import timedelta
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status

from questionfeed.core.config import settings
from questionfeed.deps import get_repo
from questionfeed.schemas import QuestionOut, SubmitOut
from questionfeed.services.questions import created_out, list_questions, submit_question

router = APIRouter(prefix="/api/questions", tags=["questions"])


@router.get("", response_model=List[QuestionOut])
async def list_all(repo=Depends(get_repo)):
    return await list_questions(repo, limit=settings.capacity)


@router.post("", response_model=SubmitOut, status_code=status.HTTP_201_CREATED)
async def submit(payload: Dict[str, Any] = Body(...), repo=Depends(get_repo)):
    # raw dict: validation order and messages are ours, not pydantic's
    saved = await submit_question(
        repo,
        payload,
        capacity=settings.capacity,
        retention=timedelta(hours=settings.retention_hours),
    )
    return {"message": "Question submitted successfully", "question": created_out(saved)}
