#!/usr/bin/env python3
"""
Response models for API endpoints.

Every response carries success=True; failures use the error envelope
produced by the exception handlers.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any


class MessageResponse(BaseModel):
    success: bool = True
    message: str


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

class FitResultModel(BaseModel):
    """Fit of the user's interview history against one company."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "company": "Google",
                "fit_score": 82,
                "readiness_level": "Good",
                "success_probability": 25,
                "scores": {"technical": 78, "behavioral": 70, "system_design": 60},
                "gaps": {"technical": -3, "behavioral": 5, "system_design": 20},
                "hiring_bar": {"technical": 75, "behavioral": 75, "system_design": 80, "overall": 77},
                "strengths": ["Strong technical skills"],
                "weaknesses": ["System design needs practice"],
                "recommendations": ["Study system design patterns and architectures"],
            }
        }
    )

    company: str
    fit_score: int = Field(ge=0, le=100)
    readiness_level: str
    success_probability: int = Field(ge=0, le=100)
    scores: Dict[str, int] = Field(default_factory=dict)
    gaps: Dict[str, int] = Field(default_factory=dict)
    hiring_bar: Dict[str, float] = Field(default_factory=dict)
    strengths: List[str] = Field(default_factory=list)
    weaknesses: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)
    analysis: Optional[str] = None
    company_info: Optional[Dict[str, Any]] = None


class RecommendationsData(BaseModel):
    total_companies: int = 0
    best_fit: List[FitResultModel] = Field(default_factory=list)
    all_recommendations: List[FitResultModel] = Field(default_factory=list)
    message: Optional[str] = None


class RecommendationsResponse(BaseModel):
    success: bool = True
    data: RecommendationsData


class DetailedAnalysis(BaseModel):
    ready_for_interview: bool
    estimated_preparation_time: str
    key_focus_areas: List[str]


class CompanyFitData(FitResultModel):
    interview_history: int = 0
    improvement: int = 0
    last_interview_date: Optional[str] = None
    detailed_analysis: DetailedAnalysis


class CompanyFitResponse(BaseModel):
    success: bool = True
    data: CompanyFitData


# ---------------------------------------------------------------------------
# Buddies and study groups
# ---------------------------------------------------------------------------

class BuddyCandidateModel(BaseModel):
    user_id: str
    name: Optional[str] = None
    common_companies: List[str]
    match_score: int = Field(ge=0, le=100)
    interview_count: int
    avg_score: int


class BuddyMatchesData(BaseModel):
    total_found: int = 0
    buddies: List[BuddyCandidateModel] = Field(default_factory=list)
    message: Optional[str] = None


class BuddyMatchesResponse(BaseModel):
    success: bool = True
    data: BuddyMatchesData


class MockInterviewModel(BaseModel):
    id: str
    scheduled_date: Optional[str]
    duration: int
    interview_type: Optional[str] = None
    completed: bool = False
    feedback: Optional[str] = None
    rating: Optional[int] = None


class BuddyMatchModel(BaseModel):
    match_id: str
    buddy_id: str
    buddy_name: Optional[str] = None
    target_company: Optional[str] = None
    target_role: Optional[str] = None
    match_score: int = 0
    status: str
    initiated_by: Optional[str] = None
    connected_at: Optional[str] = None
    last_interaction: Optional[str] = None
    total_sessions: int = 0
    mock_interviews: List[MockInterviewModel] = Field(default_factory=list)


class ConnectResponse(BaseModel):
    success: bool = True
    message: str
    data: BuddyMatchModel


class BuddyListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[BuddyMatchModel]


class MockInterviewResponse(BaseModel):
    success: bool = True
    message: str
    data: MockInterviewModel


class GroupMemberModel(BaseModel):
    user_id: str
    role: str
    joined_at: Optional[str] = None


class StudyGroupModel(BaseModel):
    group_id: str
    name: str
    description: Optional[str] = None
    target_company: Optional[str] = None
    target_role: Optional[str] = None
    focus_areas: List[str] = Field(default_factory=list)
    creator_id: str
    member_count: int
    max_members: int
    available_slots: int
    is_private: bool
    require_approval: bool
    status: str
    last_activity: Optional[str] = None
    members: List[GroupMemberModel] = Field(default_factory=list)


class StudyGroupResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: StudyGroupModel


class StudyGroupListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[StudyGroupModel]


# ---------------------------------------------------------------------------
# Preparation calendars
# ---------------------------------------------------------------------------

class MilestoneModel(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    target_date: Optional[str]
    completed: bool
    completed_at: Optional[str] = None


class DailyPracticeModel(BaseModel):
    id: str
    date: str
    recommendations: List[str] = Field(default_factory=list)
    completed: bool = False
    practices_done: List[str] = Field(default_factory=list)


class CalendarModel(BaseModel):
    id: str
    user_id: str
    target_company: str
    interview_date: Optional[str]
    role: str
    interview_type: str
    preparation_start_date: Optional[str] = None
    readiness_score: int = Field(ge=0, le=100)
    progress: int = Field(ge=0, le=100)
    days_remaining: int
    status: str
    outcome: str
    notes: Optional[str] = None
    last_updated: Optional[str] = None
    milestones: List[MilestoneModel] = Field(default_factory=list)
    daily_practice: List[DailyPracticeModel] = Field(default_factory=list)


class CalendarResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: CalendarModel


class CalendarListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[CalendarModel]


class TimelineData(BaseModel):
    days_remaining: int
    preparation_days: int
    progress: int
    next_milestone: Optional[MilestoneModel] = None
    milestones: List[MilestoneModel] = Field(default_factory=list)
    daily_practice: List[DailyPracticeModel] = Field(default_factory=list)
    readiness_score: int


class TimelineResponse(BaseModel):
    success: bool = True
    data: TimelineData


class DailyPracticeResponse(BaseModel):
    success: bool = True
    data: DailyPracticeModel


# ---------------------------------------------------------------------------
# Question database
# ---------------------------------------------------------------------------

class QuestionModel(BaseModel):
    id: str
    question: str
    question_type: str
    company: str
    role: str
    level: str
    interview_round: str
    interview_date: Optional[str]
    location: str
    submitted_by: str
    submitted_at: Optional[str] = None
    verified: bool
    verified_at: Optional[str] = None
    upvotes: int
    downvotes: int
    vote_score: int
    times_asked: int
    last_asked_date: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    difficulty: str
    expected_duration: Optional[int] = None
    follow_up_questions: List[str] = Field(default_factory=list)
    hints: List[str] = Field(default_factory=list)
    sample_answer: Optional[str] = None
    notes: Optional[str] = None
    reported: bool = False
    report_count: int = 0
    status: str
    popularity_score: Optional[int] = None


class QuestionResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: QuestionModel


class QuestionListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[QuestionModel]


class VoteData(BaseModel):
    question_id: str
    upvotes: int
    downvotes: int
    vote_score: int
    user_vote: Optional[str] = None
    verified: bool
    status: str


class VoteResponse(BaseModel):
    success: bool = True
    data: VoteData


class RecentTrends(BaseModel):
    count: int
    questions: List[QuestionModel] = Field(default_factory=list)


class FrequencyData(BaseModel):
    company: str
    total_questions: int
    frequency_distribution: Dict[str, int]
    most_asked: List[QuestionModel] = Field(default_factory=list)
    recent_trends: RecentTrends


class FrequencyResponse(BaseModel):
    success: bool = True
    data: FrequencyData


class QuestionStats(BaseModel):
    total: int
    verified: int
    pending: int
    total_upvotes: int


class UserQuestionsData(BaseModel):
    questions: List[QuestionModel]
    stats: QuestionStats


class UserQuestionsResponse(BaseModel):
    success: bool = True
    data: UserQuestionsData
