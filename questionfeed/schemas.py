# questionfeed/schemas.py
from pydantic import BaseModel, ConfigDict, Field


# --------------------------
# Questions
# --------------------------
class CreatedQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    question: str
    donation: float
    createdAt: str


class QuestionOut(CreatedQuestion):
    email: str


class SubmitOut(BaseModel):
    message: str
    question: CreatedQuestion


# --------------------------
# Stats & health
# --------------------------
class StatsOut(BaseModel):
    totalQuestions: int
    questionsToday: int
    totalDonations: float


class HealthOut(BaseModel):
    status: str
    timestamp: str
    uptime: float
