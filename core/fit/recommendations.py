#!/usr/bin/env python3
"""
Recommendation aggregation over fit results.

Turns raw FitResults into ranked, annotated company recommendations:
strengths and weaknesses come from the per-category gaps, advice from the
overall fit score. Ranking is a stable sort so ties keep company order.
"""

import math
import logging
from typing import List, Optional, Sequence

from core.config_loader import FitConfig
from core.utils import round_half_up, ensure_utc
from core.fit.fit_score import compute_fit
from core.fit.models import (
    CompanyProfile,
    FitAnalysis,
    FitResult,
    InterviewSample,
    RecommendationSummary,
)

logger = logging.getLogger(__name__)

NO_HISTORY_MESSAGE = "Complete some interviews first to get personalized recommendations"

STRENGTH_TEXT = {
    "technical": "Strong technical skills",
    "behavioral": "Excellent communication",
    "system_design": "Great system design skills",
}

WEAKNESS_TEXT = {
    "technical": "Technical skills need improvement",
    "behavioral": "Behavioral skills need work",
    "system_design": "System design needs practice",
}

ADVICE_TEXT = {
    "technical": "Focus on technical interview preparation",
    "behavioral": "Practice behavioral questions using STAR method",
    "system_design": "Study system design patterns and architectures",
}

DEFAULT_FOCUS_AREAS = ["Maintain current skill level", "Practice regularly"]


def history_for_company(
    history: Sequence[InterviewSample],
    company_name: str,
    config: Optional[FitConfig] = None,
) -> List[InterviewSample]:
    config = config or FitConfig()
    if not config.company_specific_history:
        return list(history)
    return [s for s in history if s.target_company == company_name]


def annotate_fit(fit: FitResult, config: Optional[FitConfig] = None) -> FitResult:
    """Fill strengths, weaknesses and recommendations from gaps and fit score."""
    config = config or FitConfig()
    if fit.analysis is not None:
        return fit

    for category, gap in fit.gaps.items():
        if gap <= config.strength_max_gap:
            fit.strengths.append(STRENGTH_TEXT[category])
        elif gap > config.weakness_min_gap:
            fit.weaknesses.append(WEAKNESS_TEXT[category])

    if fit.fit_score >= config.ready_fit_score:
        fit.recommendations.append(
            f"You're well-prepared for {fit.company}! Keep practicing."
        )
    else:
        for category, gap in fit.gaps.items():
            if gap > config.advice_min_gap:
                fit.recommendations.append(ADVICE_TEXT[category])

    return fit


def calculate_company_fit(
    history: Sequence[InterviewSample],
    company: CompanyProfile,
    config: Optional[FitConfig] = None,
) -> FitResult:
    config = config or FitConfig()
    fit = compute_fit(history_for_company(history, company.name, config), company, config)
    annotate_fit(fit, config)
    fit.company_info = company.info()
    return fit


def rank_fits(fits: List[FitResult], best_fit_count: int = 3) -> RecommendationSummary:
    # sorted() is stable: equal fit scores keep their original order.
    ranked = sorted(fits, key=lambda f: f.fit_score, reverse=True)
    return RecommendationSummary(
        total_companies=len(ranked),
        best_fit=ranked[:best_fit_count],
        all_recommendations=ranked,
    )


def recommend(
    history: Sequence[InterviewSample],
    companies: Sequence[CompanyProfile],
    config: Optional[FitConfig] = None,
) -> RecommendationSummary:
    """
    Score every company against the history and rank the results.

    Args:
        history: The user's recent interviews, newest first.
        companies: All company profiles in store order.
        config: Fit configuration.

    Returns:
        RecommendationSummary; carries a message and no results when the
        history is empty.
    """
    config = config or FitConfig()
    if not history:
        return RecommendationSummary(message=NO_HISTORY_MESSAGE)

    fits = [calculate_company_fit(history, company, config) for company in companies]
    return rank_fits(fits, config.best_fit_count)


def estimate_preparation_time(fit_score: int, config: Optional[FitConfig] = None) -> str:
    config = config or FitConfig()
    if fit_score >= config.ready_fit_score:
        return "Ready now"
    weeks = math.ceil((config.ready_fit_score - fit_score) / config.fit_points_per_week)
    return f"{weeks} weeks"


def analyze_company_fit(
    history: Sequence[InterviewSample],
    company: Optional[CompanyProfile],
    company_name: str,
    config: Optional[FitConfig] = None,
) -> FitAnalysis:
    """
    Detailed fit analysis for one company.

    The history is expected newest first; improvement is the newest score
    for the company minus the oldest one.
    """
    config = config or FitConfig()
    company_history = [s for s in history if s.target_company == company_name]

    if company is None:
        fit = compute_fit([], None, config, company_name=company_name)
    else:
        fit = calculate_company_fit(history, company, config)

    improvement = 0
    if len(company_history) >= 2:
        newest = float(company_history[0].overall_score or 0)
        oldest = float(company_history[-1].overall_score or 0)
        improvement = round_half_up(newest - oldest)

    last_interview_date = ensure_utc(company_history[0].created_at) if company_history else None

    return FitAnalysis(
        fit=fit,
        interview_history=len(company_history),
        improvement=improvement,
        last_interview_date=last_interview_date,
        ready_for_interview=fit.fit_score >= config.ready_fit_score,
        estimated_preparation_time=estimate_preparation_time(fit.fit_score, config),
        key_focus_areas=list(fit.weaknesses) if fit.weaknesses else list(DEFAULT_FOCUS_AREAS),
    )
