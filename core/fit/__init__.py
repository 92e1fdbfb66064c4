#!/usr/bin/env python3
"""
Company Fit Module.

Public API:
- compute_fit: pure fit score of an interview history against a hiring bar
- recommend: ranked, annotated recommendations over all companies
- analyze_company_fit: detailed single-company analysis

- models.py: Data structures (InterviewSample, CompanyProfile, FitResult, ...)
- fit_score.py: Category partitioning, gaps, readiness and success probability
- recommendations.py: Strengths/weaknesses/advice annotation and ranking
"""

from core.fit.models import (
    InterviewSample,
    HiringBar,
    CompanyProfile,
    FitResult,
    FitAnalysis,
    RecommendationSummary,
    ReadinessLevel,
    InterviewType,
)
from core.fit.fit_score import compute_fit
from core.fit.recommendations import recommend, analyze_company_fit

__all__ = [
    'InterviewSample',
    'HiringBar',
    'CompanyProfile',
    'FitResult',
    'FitAnalysis',
    'RecommendationSummary',
    'ReadinessLevel',
    'InterviewType',
    'compute_fit',
    'recommend',
    'analyze_company_fit',
]
