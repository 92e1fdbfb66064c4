#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

import uuid
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class ConnectRequest(BaseModel):
    """Request to connect with (or accept) a study buddy."""
    buddy_id: uuid.UUID = Field(..., description="User to connect with")
    target_company: Optional[str] = None
    target_role: Optional[str] = None
    match_score: int = Field(default=0, ge=0, le=100)
    notes: Optional[str] = None


class ScheduleMockInterviewRequest(BaseModel):
    """Request to schedule a mock interview with a connected buddy."""
    scheduled_date: datetime
    duration: Optional[int] = Field(None, ge=1, le=480, description="Minutes; defaults to 60")
    interview_type: Optional[str] = None


class StudyGroupCreate(BaseModel):
    """Request to create a study group."""
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    target_company: Optional[str] = None
    target_role: Optional[str] = None
    focus_areas: List[str] = Field(default_factory=list)
    max_members: Optional[int] = Field(None, ge=2, le=100)
    is_private: bool = False
    require_approval: bool = True


class CalendarCreate(BaseModel):
    """Request to create a preparation calendar for an upcoming interview."""
    target_company: str = Field(..., min_length=1)
    interview_date: datetime
    role: str = Field(..., min_length=1)
    interview_type: Literal["technical", "behavioral", "system-design", "mixed"] = "technical"
    notes: Optional[str] = None


class MilestoneUpdate(BaseModel):
    completed: bool


class PracticeUpdate(BaseModel):
    practices_done: List[str] = Field(default_factory=list)


class QuestionCreate(BaseModel):
    """Request to submit a real interview question."""
    question: str = Field(..., min_length=1)
    question_type: Literal["technical", "behavioral", "system-design", "coding", "other"]
    company: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    level: Literal["entry", "mid", "senior", "staff", "principal"] = "mid"
    interview_round: str = "technical-1"
    interview_date: datetime
    location: Literal["onsite", "remote", "hybrid"] = "remote"
    tags: List[str] = Field(default_factory=list)
    difficulty: Literal["easy", "medium", "hard", "expert"] = "medium"
    expected_duration: Optional[int] = Field(None, ge=1)
    follow_up_questions: List[str] = Field(default_factory=list)
    hints: List[str] = Field(default_factory=list)
    sample_answer: Optional[str] = None
    notes: Optional[str] = None


class VoteRequest(BaseModel):
    vote_type: Literal["up", "down"]


class ReportRequest(BaseModel):
    reason: Optional[str] = None
