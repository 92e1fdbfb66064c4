#!/usr/bin/env python3
"""
Fit Score (company readiness)

Key behavior:
- Interviews are bucketed by type (technical, behavioral, system-design);
  each bucket is averaged, an empty bucket averages 0.
- Each category is compared against the company's hiring bar; the category
  fit is 100 minus the absolute gap, floored at 0. Over-performing the bar
  reduces fit as well unless penalize_overperformance is disabled.
- The overall fit is the unweighted mean of the three category fits.
- Success probability scales fit by the company's acceptance rate.
- Pure: no I/O, same inputs always give the same FitResult.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional
import logging

from core.config_loader import FitConfig
from core.utils import round_half_up, clamp, mean
from core.fit.models import (
    CATEGORIES,
    CATEGORY_BY_TYPE,
    CompanyProfile,
    FitResult,
    InterviewSample,
    ReadinessLevel,
)

logger = logging.getLogger(__name__)

COMPANY_NOT_AVAILABLE = "Company data not available"


def _score_of(sample: InterviewSample) -> float:
    # A missing score counts as 0.
    try:
        return float(sample.overall_score or 0)
    except (TypeError, ValueError):
        logger.warning("Invalid overall_score=%r; counting as 0", sample.overall_score)
        return 0.0


def partition_by_category(history: Iterable[InterviewSample]) -> Dict[str, List[float]]:
    """Bucket interview scores by category; unknown interview types are ignored."""
    buckets: Dict[str, List[float]] = {category: [] for category in CATEGORIES}
    for sample in history:
        category = CATEGORY_BY_TYPE.get(sample.interview_type)
        if category is None:
            continue
        buckets[category].append(_score_of(sample))
    return buckets


def readiness_for(fit_score: float, config: Optional[FitConfig] = None) -> ReadinessLevel:
    config = config or FitConfig()
    if fit_score >= config.excellent_threshold:
        return ReadinessLevel.EXCELLENT
    if fit_score >= config.good_threshold:
        return ReadinessLevel.GOOD
    if fit_score >= config.moderate_threshold:
        return ReadinessLevel.MODERATE
    if fit_score >= config.needs_work_threshold:
        return ReadinessLevel.NEEDS_WORK
    return ReadinessLevel.NOT_READY


def category_fit(gap: float, penalize_overperformance: bool = True) -> float:
    penalty = abs(gap) if penalize_overperformance else max(0.0, gap)
    return max(0.0, 100.0 - penalty)


def degenerate_fit(company_name: str) -> FitResult:
    return FitResult(
        company=company_name,
        fit_score=0,
        readiness_level=ReadinessLevel.NOT_READY,
        success_probability=0,
        analysis=COMPANY_NOT_AVAILABLE,
    )


def compute_fit(
    interview_history: Iterable[InterviewSample],
    company: Optional[CompanyProfile],
    config: Optional[FitConfig] = None,
    company_name: Optional[str] = None,
) -> FitResult:
    """
    Compute the fit of an interview history against a company's hiring bar.

    Args:
        interview_history: Scored interviews to evaluate.
        company: Company profile, or None when the company is unknown.
        config: Fit thresholds; defaults apply when omitted.
        company_name: Name reported on the degenerate result when company is None.

    Returns:
        FitResult with scores/gaps/readiness filled in. Strengths, weaknesses
        and recommendations are left empty for the aggregator to annotate.
    """
    config = config or FitConfig()

    if company is None:
        return degenerate_fit(company_name or "")

    buckets = partition_by_category(interview_history)
    averages = {category: mean(scores) for category, scores in buckets.items()}
    gaps = {
        category: company.hiring_bar.for_category(category) - averages[category]
        for category in CATEGORIES
    }
    fits = [
        category_fit(gaps[category], config.penalize_overperformance)
        for category in CATEGORIES
    ]

    fit_score = round_half_up(sum(fits) / len(fits))
    fit_score = int(clamp(fit_score, 0, 100))

    acceptance_rate = clamp(float(company.acceptance_rate or 0), 0.0, 100.0)
    success_probability = round_half_up(
        clamp(fit_score * (acceptance_rate / 100.0), 0.0, 100.0)
    )

    return FitResult(
        company=company.name,
        fit_score=fit_score,
        readiness_level=readiness_for(fit_score, config),
        success_probability=success_probability,
        scores={category: round_half_up(averages[category]) for category in CATEGORIES},
        gaps={category: round_half_up(gaps[category]) for category in CATEGORIES},
        hiring_bar=company.hiring_bar.to_dict(),
    )
