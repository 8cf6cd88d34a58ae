# questionfeed/services/lifecycle.py
"""
Bounded-collection policy for the question feed.

Every function here is pure: it works on timestamps, counts or a snapshot of
records and never touches the store. Records are dicts carrying at least
``_id`` and ``createdAt``.
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional

CAPACITY = 10_000
RETENTION = timedelta(hours=24)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def expiry_for(created_at: datetime, retention: timedelta = RETENTION) -> datetime:
    return created_at + retention


def expiry_cutoff(now: datetime, retention: timedelta = RETENTION) -> datetime:
    """Anything created strictly before this instant is expired."""
    return now - retention


def is_expired(created_at: datetime, now: datetime, retention: timedelta = RETENTION) -> bool:
    return created_at < expiry_cutoff(now, retention)


def needs_eviction(count: int, capacity: int = CAPACITY) -> bool:
    return count >= capacity


def excess_count(count: int, capacity: int = CAPACITY) -> int:
    return max(0, count - capacity)


def oldest_first(records: Iterable[Dict]) -> List[Dict]:
    # ties on createdAt fall back to id order so selections are deterministic
    return sorted(records, key=lambda r: (r["createdAt"], str(r["_id"])))


def select_expired(records: Iterable[Dict], now: datetime, retention: timedelta = RETENTION) -> List[Dict]:
    return [r for r in oldest_first(records) if is_expired(r["createdAt"], now, retention)]


def select_excess(records: Iterable[Dict], capacity: int = CAPACITY) -> List[Dict]:
    ordered = oldest_first(records)
    return ordered[: excess_count(len(ordered), capacity)]


def start_of_day(now: Optional[datetime] = None) -> datetime:
    """Server-local midnight of the day containing ``now``, as an aware datetime."""
    local = (now or utcnow()).astimezone()
    return local.replace(hour=0, minute=0, second=0, microsecond=0)


def iso(dt: Optional[datetime]) -> Optional[str]:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
