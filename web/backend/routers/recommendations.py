#!/usr/bin/env python3
"""
Recommendation endpoints - company fit for the current user.
"""

import uuid
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..config import get_config
from ..dependencies import get_db, get_current_user_id
from ..services.recommendation_service import RecommendationService
from ..models.responses import RecommendationsResponse, CompanyFitResponse

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.get("", response_model=RecommendationsResponse)
def get_recommendations(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Rank all companies by how well the user's interview history fits
    their hiring bar. The top entries are returned as best_fit.
    """
    service = RecommendationService(db, get_config().fit)
    return RecommendationsResponse(success=True, data=service.get_recommendations(user_id))


@router.get("/{company_name}", response_model=CompanyFitResponse)
def get_company_fit(
    company_name: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Detailed fit analysis for one company, including improvement over time
    and an estimated preparation time.
    """
    service = RecommendationService(db, get_config().fit)
    return CompanyFitResponse(
        success=True,
        data=service.get_company_fit_analysis(user_id, company_name)
    )
