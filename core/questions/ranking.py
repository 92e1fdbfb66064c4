#!/usr/bin/env python3
"""
Question ranking and voting rules for the crowdsourced question database.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence, Tuple

from core.utils import ensure_utc

UP = "up"
DOWN = "down"

RECENCY_BONUS_DAYS = 30


def apply_vote(current: Optional[str], vote_type: str) -> Optional[str]:
    """
    Resolve a user's new vote state.

    Voting the same direction again withdraws the vote; voting the other
    direction switches it.

    Returns:
        The vote to store ("up", "down") or None when the vote is withdrawn.
    """
    if vote_type not in (UP, DOWN):
        raise ValueError(f"Invalid vote type: {vote_type!r}")
    if current == vote_type:
        return None
    return vote_type


def vote_deltas(previous: Optional[str], new: Optional[str]) -> Tuple[int, int]:
    """(upvote delta, downvote delta) for a vote state change."""
    up = (1 if new == UP else 0) - (1 if previous == UP else 0)
    down = (1 if new == DOWN else 0) - (1 if previous == DOWN else 0)
    return up, down


def popularity_score(
    upvotes: int,
    downvotes: int,
    times_asked: int,
    last_asked_date: Optional[datetime],
    now: datetime,
) -> int:
    vote_score = (upvotes or 0) - (downvotes or 0)
    recency_bonus = 0
    if last_asked_date is not None:
        days_since = int((ensure_utc(now) - ensure_utc(last_asked_date)).total_seconds() // 86400)
        recency_bonus = max(0, RECENCY_BONUS_DAYS - days_since)
    return vote_score * 10 + (times_asked or 0) * 5 + recency_bonus


def frequency_distribution(times_asked: Sequence[int]) -> Dict[str, int]:
    return {
        "very_common": sum(1 for t in times_asked if t >= 10),
        "common": sum(1 for t in times_asked if 5 <= t < 10),
        "occasional": sum(1 for t in times_asked if 2 <= t < 5),
        "rare": sum(1 for t in times_asked if t < 2),
    }


def recent_since(questions: Sequence[Any], now: datetime, window_days: int) -> List[Any]:
    cutoff = ensure_utc(now) - timedelta(days=window_days)
    return [
        q for q in questions
        if q.last_asked_date is not None and ensure_utc(q.last_asked_date) >= cutoff
    ]
