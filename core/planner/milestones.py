#!/usr/bin/env python3
"""
Preparation planner - milestones and daily recommendations.

Milestones are a step function of the number of days until the interview;
daily recommendations depend on the days remaining on the day they are
generated. Everything here is pure: callers pass "now" in.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Iterable, List, Optional

from core.utils import round_half_up, ensure_utc

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class MilestonePlan:
    title: str
    description: str
    target_date: datetime


def days_between(start: datetime, end: datetime) -> int:
    """Whole days from start to end, rounded up (partial days count)."""
    delta = ensure_utc(end) - ensure_utc(start)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def _at(now: datetime, days: int) -> datetime:
    return now + timedelta(days=days)


def generate_milestones(days_until: int, target_company: str, now: datetime) -> List[MilestonePlan]:
    """
    Build the preparation milestones for an interview days_until days away.

    Args:
        days_until: Days until the interview (ceil).
        target_company: Company name used in descriptions.
        now: Reference time the offsets are applied to.
    """
    now = ensure_utc(now)
    milestones: List[MilestonePlan] = []

    if days_until >= 30:
        milestones += [
            MilestonePlan("Foundation Building", "Review fundamentals and core concepts", _at(now, 7)),
            MilestonePlan("Practice Phase", "Complete 20+ practice interviews", _at(now, 20)),
            MilestonePlan("Mock Interviews", f"Complete 5 {target_company}-specific mock interviews", _at(now, 25)),
        ]
    elif days_until >= 14:
        milestones += [
            MilestonePlan("Intensive Practice", "Complete 10+ practice interviews", _at(now, 7)),
            MilestonePlan("Company Research", f"Study {target_company} interview patterns", _at(now, 10)),
        ]
    elif days_until >= 7:
        milestones += [
            MilestonePlan("Focused Practice", "Daily practice sessions", _at(now, 3)),
            MilestonePlan("Final Review", "Review common questions and patterns", _at(now, 5)),
        ]
    else:
        milestones.append(
            MilestonePlan("Crash Course", "Focus on most common questions", _at(now, 2))
        )

    milestones.append(
        MilestonePlan("Interview Day Prep", "Rest well and review key concepts", _at(now, days_until - 1))
    )
    return milestones


def daily_recommendations(days_remaining: int, target_company: str) -> List[str]:
    if days_remaining > 14:
        return [
            "Complete 1 practice interview",
            "Study 2 technical concepts",
            "Review 5 behavioral questions",
            "Practice coding for 30 minutes",
        ]
    if days_remaining > 7:
        return [
            "Complete 2 practice interviews",
            f"Review {target_company} interview questions",
            "Practice system design problem",
            "Mock interview with a peer",
        ]
    if days_remaining > 3:
        return [
            "Complete 1 full mock interview",
            "Review your weak areas",
            f"Study {target_company} culture and values",
            "Practice common questions",
        ]
    return [
        "Light practice only",
        "Review key concepts",
        "Rest and stay confident",
        "Prepare questions for interviewer",
    ]


def calculate_progress(milestones: Iterable[Any]) -> int:
    milestones = list(milestones)
    if not milestones:
        return 0
    completed = sum(1 for m in milestones if m.completed)
    return round_half_up(completed / len(milestones) * 100)


def next_milestone(milestones: Iterable[Any]) -> Optional[Any]:
    pending = [m for m in milestones if not m.completed]
    if not pending:
        return None
    return min(pending, key=lambda m: ensure_utc(m.target_date))
