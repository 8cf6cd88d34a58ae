# questionfeed/services/questions.py
import logging
import math
import re
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from questionfeed.core.errors import QuestionValidationError
from questionfeed.services.lifecycle import (
    CAPACITY,
    RETENTION,
    expiry_for,
    iso,
    needs_eviction,
    start_of_day,
    utcnow,
)

logger = logging.getLogger(__name__)

MAX_QUESTION_LENGTH = 1000
MIN_DONATION = 0.01
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

MISSING_FIELDS = "All fields are required"
EMPTY_QUESTION = "Question cannot be empty"
QUESTION_TOO_LONG = f"Question is too long (max {MAX_QUESTION_LENGTH} characters)"
QUESTION_NOT_TEXT = "Question must be text"
INVALID_EMAIL = "Invalid email format"
INVALID_DONATION = "Invalid donation amount"


# --------------------------------------------------
# Validation
# --------------------------------------------------
def _missing(value: Any) -> bool:
    return value is None or value is False or (isinstance(value, str) and value == "")


def _missing_text(value: Any) -> bool:
    # a zero in a text field counts as absent, same as an empty string
    return _missing(value) or (isinstance(value, (int, float)) and value == 0)


def _parse_donation(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not DECIMAL_RE.match(value):
            return None
    elif not isinstance(value, (int, float)):
        return None
    try:
        amount = float(value)
    except (OverflowError, ValueError):
        return None
    if not math.isfinite(amount):
        return None
    return amount


def validate_submission(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a raw submission and return the normalized fields.

    Checks run in a fixed order and the first failure wins:
    presence, question length, email shape, donation amount.
    """
    question = payload.get("question")
    email = payload.get("email")
    donation = payload.get("donation")

    if _missing_text(question) or _missing_text(email) or _missing(donation):
        raise QuestionValidationError(MISSING_FIELDS)

    if not isinstance(question, str):
        raise QuestionValidationError(QUESTION_NOT_TEXT)
    question = question.strip()
    if not question:
        raise QuestionValidationError(EMPTY_QUESTION)
    if len(question) > MAX_QUESTION_LENGTH:
        raise QuestionValidationError(QUESTION_TOO_LONG)

    email = email.strip() if isinstance(email, str) else ""
    if not EMAIL_RE.match(email):
        raise QuestionValidationError(INVALID_EMAIL)

    amount = _parse_donation(donation)
    if amount is None or amount < MIN_DONATION:
        raise QuestionValidationError(INVALID_DONATION)

    return {"question": question, "email": email.lower(), "donation": amount}


# --------------------------------------------------
# Serialization
# --------------------------------------------------
def question_out(doc: Dict) -> Dict:
    return {
        "_id": str(doc["_id"]),
        "question": doc["question"],
        "email": doc["email"],
        "donation": doc["donation"],
        "createdAt": iso(doc["createdAt"]),
    }


def created_out(doc: Dict) -> Dict:
    # email stays out of the public creation response
    return {
        "_id": str(doc["_id"]),
        "question": doc["question"],
        "donation": doc["donation"],
        "createdAt": iso(doc["createdAt"]),
    }


# --------------------------------------------------
# Operations
# --------------------------------------------------
def _now_ms(now: Optional[datetime] = None) -> datetime:
    # the store keeps millisecond precision; match it so the reply equals what was saved
    now = now or utcnow()
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


async def list_questions(repo, limit: int = CAPACITY) -> List[Dict]:
    return [question_out(d) for d in await repo.list_recent(limit)]


async def submit_question(
    repo,
    payload: Dict[str, Any],
    capacity: int = CAPACITY,
    retention: timedelta = RETENTION,
    now: Optional[datetime] = None,
) -> Dict:
    """Validate, make room if the feed is full, then persist. Returns the stored doc."""
    fields = validate_submission(payload)

    if needs_eviction(await repo.count(), capacity):
        evicted = await repo.delete_oldest()
        if evicted is not None:
            logger.info("Feed at capacity (%d); evicted oldest question %s", capacity, evicted["_id"])

    created_at = _now_ms(now)
    doc = {
        **fields,
        "createdAt": created_at,
        "expiresAt": expiry_for(created_at, retention),
    }
    return await repo.insert(doc)


async def question_stats(repo, now: Optional[datetime] = None) -> Dict:
    return {
        "totalQuestions": await repo.count(),
        "questionsToday": await repo.count_since(start_of_day(now)),
        "totalDonations": await repo.sum_donations() or 0,
    }
