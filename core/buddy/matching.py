#!/usr/bin/env python3
"""
Buddy matching - peer compatibility scoring.

Candidates are users who practised for at least one of the requester's
target companies. Each candidate gets:

    company_score = |common companies| / |target companies| * company_weight
    skill_score   = max(0, skill_weight - |user_avg - candidate_avg|)
    match_score   = round(company_score + skill_score)

Users already in a buddy match with the requester (any status) are never
suggested again.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set

from core.config_loader import BuddyConfig
from core.utils import round_half_up, clamp, mean
from core.fit.models import InterviewSample

logger = logging.getLogger(__name__)

NO_TARGETS_MESSAGE = "Complete some interviews first to find compatible buddies"


@dataclass
class CandidateStats:
    """Grouped interview statistics of one candidate user."""
    user_id: Any
    companies: List[str] = field(default_factory=list)
    interview_count: int = 0
    avg_score: Optional[float] = None


@dataclass
class BuddyCandidate:
    user_id: Any
    common_companies: List[str]
    match_score: int
    interview_count: int
    avg_score: int


@dataclass
class BuddySearchResult:
    total_found: int = 0
    buddies: List[BuddyCandidate] = field(default_factory=list)
    message: Optional[str] = None


def target_companies_from(recent: Iterable[InterviewSample]) -> List[str]:
    """Distinct non-empty target companies, in first-seen order."""
    seen: List[str] = []
    for sample in recent:
        company = sample.target_company
        if company and company not in seen:
            seen.append(company)
    return seen


def user_average(recent: Sequence[InterviewSample]) -> float:
    return mean(float(s.overall_score or 0) for s in recent)


def group_candidates(
    records: Iterable[InterviewSample],
    target_companies: Sequence[str],
    exclude_user_id: Any = None,
) -> List[CandidateStats]:
    """
    Group other users' interviews against the target companies by user.

    The average ignores interviews without a score; a candidate with no
    scored interview has avg_score None.
    """
    targets = set(target_companies)
    grouped: Dict[Any, CandidateStats] = {}
    scores: Dict[Any, List[float]] = {}

    for record in records:
        if record.user_id is None or record.user_id == exclude_user_id:
            continue
        if record.target_company not in targets:
            continue

        stats = grouped.get(record.user_id)
        if stats is None:
            stats = CandidateStats(user_id=record.user_id)
            grouped[record.user_id] = stats
            scores[record.user_id] = []

        if record.target_company not in stats.companies:
            stats.companies.append(record.target_company)
        stats.interview_count += 1
        if record.overall_score is not None:
            scores[record.user_id].append(float(record.overall_score))

    for user_id, stats in grouped.items():
        if scores[user_id]:
            stats.avg_score = mean(scores[user_id])

    return list(grouped.values())


def score_candidate(
    stats: CandidateStats,
    target_companies: Sequence[str],
    user_avg_score: float,
    config: Optional[BuddyConfig] = None,
) -> BuddyCandidate:
    config = config or BuddyConfig()
    common = [c for c in stats.companies if c in target_companies]

    company_score = 0.0
    if target_companies:
        company_score = (len(common) / len(target_companies)) * config.company_weight

    candidate_avg = stats.avg_score if stats.avg_score is not None else 0.0
    skill_score = max(0.0, config.skill_weight - abs(user_avg_score - candidate_avg))

    match_score = round_half_up(clamp(company_score + skill_score, 0.0, 100.0))

    return BuddyCandidate(
        user_id=stats.user_id,
        common_companies=common,
        match_score=match_score,
        interview_count=stats.interview_count,
        avg_score=round_half_up(candidate_avg),
    )


def rank_buddies(
    user_recent: Sequence[InterviewSample],
    candidate_records: Iterable[InterviewSample],
    connected_user_ids: Set[Any],
    user_id: Any = None,
    config: Optional[BuddyConfig] = None,
) -> BuddySearchResult:
    """
    Rank compatible buddies for a user.

    Args:
        user_recent: The user's most recent interviews.
        candidate_records: Other users' interviews against the user's targets.
        connected_user_ids: Users already in a buddy match with the user.
        user_id: The requesting user (never suggested to themself).
        config: Matching configuration.

    Returns:
        BuddySearchResult with at most config.max_results buddies sorted by
        match score, or a message when the user has no target company yet.
    """
    config = config or BuddyConfig()

    targets = target_companies_from(user_recent)
    if not targets:
        return BuddySearchResult(message=NO_TARGETS_MESSAGE)

    user_avg = user_average(user_recent)
    grouped = group_candidates(candidate_records, targets, exclude_user_id=user_id)

    candidates = [
        score_candidate(stats, targets, user_avg, config)
        for stats in grouped
        if stats.user_id not in connected_user_ids
    ]
    candidates.sort(key=lambda c: c.match_score, reverse=True)
    buddies = candidates[:config.max_results]

    logger.debug(f"Ranked {len(candidates)} buddy candidates for targets {targets}")
    return BuddySearchResult(total_found=len(buddies), buddies=buddies)


def pair_key(user_a: Any, user_b: Any) -> str:
    """Order-independent key identifying a user pair."""
    low, high = sorted((str(user_a), str(user_b)))
    return f"{low}:{high}"
