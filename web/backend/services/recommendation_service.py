#!/usr/bin/env python3
"""
Recommendation service - company fit recommendations for a user.
"""

import logging
from typing import Any, Optional

from sqlalchemy.orm import Session

from core.config_loader import FitConfig
from core.fit import (
    CompanyProfile,
    FitResult,
    HiringBar,
    InterviewSample,
    analyze_company_fit,
    recommend,
)
from database.models import Company, Interview
from database.repositories import CompanyRepository, InterviewRepository, UserRepository
from ..models.responses import (
    CompanyFitData,
    DetailedAnalysis,
    FitResultModel,
    RecommendationsData,
)
from ..utils import safe_datetime_iso
from ..exceptions import NotFoundException

logger = logging.getLogger(__name__)


def to_sample(interview: Interview) -> InterviewSample:
    return InterviewSample(
        interview_type=interview.interview_type,
        overall_score=interview.overall_score,
        target_company=interview.target_company,
        created_at=interview.created_at,
        user_id=interview.user_id,
    )


def to_profile(company: Company) -> CompanyProfile:
    return CompanyProfile(
        name=company.name,
        hiring_bar=HiringBar(
            technical=company.hiring_bar_technical,
            behavioral=company.hiring_bar_behavioral,
            system_design=company.hiring_bar_system_design,
            overall=company.hiring_bar_overall,
        ),
        acceptance_rate=company.acceptance_rate,
        difficulty_rating=company.difficulty_rating,
        logo=company.logo,
        characteristics={
            "focus_areas": list(company.focus_areas or []),
            "interview_style": company.interview_style,
            "common_topics": list(company.common_topics or []),
        },
    )


class RecommendationService:
    """Service for company recommendations and fit analysis."""

    def __init__(self, db: Session, config: Optional[FitConfig] = None):
        self.db = db
        self.config = config or FitConfig()
        self.users = UserRepository(db)
        self.interviews = InterviewRepository(db)
        self.companies = CompanyRepository(db)

    def _require_user(self, user_id: Any) -> None:
        if self.users.get_by_id(user_id) is None:
            raise NotFoundException(f"User {user_id} not found")

    def get_recommendations(self, user_id: Any) -> RecommendationsData:
        """
        Rank every company by the user's fit.

        Args:
            user_id: The requesting user.

        Returns:
            Ranked recommendations; a message and no results when the user
            has no interviews yet.

        Raises:
            NotFoundException: If the user does not exist.
        """
        self._require_user(user_id)

        history = [
            to_sample(i)
            for i in self.interviews.find_by_user(user_id, limit=self.config.history_limit)
        ]
        profiles = [to_profile(c) for c in self.companies.get_all()]

        summary = recommend(history, profiles, self.config)
        logger.info(
            f"Computed recommendations for user {user_id}: "
            f"{summary.total_companies} companies from {len(history)} interviews"
        )

        return RecommendationsData(
            total_companies=summary.total_companies,
            best_fit=[self._to_fit_model(f) for f in summary.best_fit],
            all_recommendations=[self._to_fit_model(f) for f in summary.all_recommendations],
            message=summary.message,
        )

    def get_company_fit_analysis(self, user_id: Any, company_name: str) -> CompanyFitData:
        """
        Detailed fit analysis against one company, over the user's full history.

        An unknown company yields a zero fit with an explanatory analysis
        message rather than an error.
        """
        self._require_user(user_id)

        history = [to_sample(i) for i in self.interviews.find_by_user(user_id)]
        company = self.companies.get_by_name(company_name)
        profile = to_profile(company) if company is not None else None

        analysis = analyze_company_fit(history, profile, company_name, self.config)
        fit = self._to_fit_model(analysis.fit)

        return CompanyFitData(
            **fit.model_dump(),
            interview_history=analysis.interview_history,
            improvement=analysis.improvement,
            last_interview_date=safe_datetime_iso(analysis.last_interview_date),
            detailed_analysis=DetailedAnalysis(
                ready_for_interview=analysis.ready_for_interview,
                estimated_preparation_time=analysis.estimated_preparation_time,
                key_focus_areas=analysis.key_focus_areas,
            ),
        )

    def _to_fit_model(self, fit: FitResult) -> FitResultModel:
        return FitResultModel(
            company=fit.company,
            fit_score=fit.fit_score,
            readiness_level=fit.readiness_level.value,
            success_probability=fit.success_probability,
            scores=fit.scores,
            gaps=fit.gaps,
            hiring_bar=fit.hiring_bar,
            strengths=fit.strengths,
            weaknesses=fit.weaknesses,
            recommendations=fit.recommendations,
            analysis=fit.analysis,
            company_info=fit.company_info,
        )
