#!/usr/bin/env python3
"""
Fit Models - Data structures for company-fit scoring.
"""

from datetime import datetime
from enum import Enum
from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field, asdict


class InterviewType(str, Enum):
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    SYSTEM_DESIGN = "system-design"


# Category keys used in scores/gaps/hiring bar dicts, in display order.
CATEGORIES = ("technical", "behavioral", "system_design")

CATEGORY_BY_TYPE = {
    InterviewType.TECHNICAL.value: "technical",
    InterviewType.BEHAVIORAL.value: "behavioral",
    InterviewType.SYSTEM_DESIGN.value: "system_design",
}


class ReadinessLevel(str, Enum):
    NOT_READY = "Not Ready"
    NEEDS_WORK = "Needs Work"
    MODERATE = "Moderate"
    GOOD = "Good"
    EXCELLENT = "Excellent"


@dataclass(frozen=True)
class InterviewSample:
    """A scored interview as seen by the scoring engines."""
    interview_type: str
    overall_score: Optional[float] = None
    target_company: Optional[str] = None
    created_at: Optional[datetime] = None
    user_id: Optional[Any] = None


@dataclass(frozen=True)
class HiringBar:
    technical: float = 70
    behavioral: float = 65
    system_design: float = 75
    overall: float = 70

    def for_category(self, category: str) -> float:
        return float(getattr(self, category))

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class CompanyProfile:
    name: str
    hiring_bar: HiringBar = field(default_factory=HiringBar)
    acceptance_rate: float = 50
    difficulty_rating: int = 5
    logo: Optional[str] = None
    characteristics: Dict[str, Any] = field(default_factory=dict)

    def info(self) -> Dict[str, Any]:
        return {
            "logo": self.logo,
            "difficulty_rating": self.difficulty_rating,
            "acceptance_rate": self.acceptance_rate,
            "characteristics": dict(self.characteristics),
        }


@dataclass
class FitResult:
    """Fit of a user's interview history against one company's hiring bar."""
    company: str
    fit_score: int = 0
    readiness_level: ReadinessLevel = ReadinessLevel.NOT_READY
    success_probability: int = 0

    scores: Dict[str, int] = field(default_factory=dict)
    gaps: Dict[str, int] = field(default_factory=dict)
    hiring_bar: Dict[str, float] = field(default_factory=dict)

    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    # Set only on degenerate results (e.g. unknown company)
    analysis: Optional[str] = None
    company_info: Optional[Dict[str, Any]] = None


@dataclass
class RecommendationSummary:
    total_companies: int = 0
    best_fit: List[FitResult] = field(default_factory=list)
    all_recommendations: List[FitResult] = field(default_factory=list)
    message: Optional[str] = None


@dataclass
class FitAnalysis:
    """Detailed single-company analysis."""
    fit: FitResult
    interview_history: int = 0
    improvement: int = 0
    last_interview_date: Optional[datetime] = None
    ready_for_interview: bool = False
    estimated_preparation_time: str = ""
    key_focus_areas: List[str] = field(default_factory=list)
