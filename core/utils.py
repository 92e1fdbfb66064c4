import math
from datetime import datetime, timezone
from typing import Optional


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (72.5 -> 73).

    round() would give banker's rounding (72.5 -> 72).
    """
    return int(math.floor(float(value) + 0.5))


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on read)."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def mean(values) -> float:
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)
