#!/usr/bin/env python3
"""
Calendar endpoints - interview preparation calendars.
"""

import uuid
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..config import get_config
from ..dependencies import get_db, get_current_user_id
from ..services.calendar_service import CalendarService
from ..models.requests import CalendarCreate, MilestoneUpdate, PracticeUpdate
from ..models.responses import (
    CalendarResponse,
    CalendarListResponse,
    TimelineResponse,
    DailyPracticeResponse,
    MessageResponse,
)
from ..utils import validate_uuid

router = APIRouter(prefix="/api/calendar", tags=["calendar"])


def _service(db: Session) -> CalendarService:
    return CalendarService(db, get_config().calendar)


@router.post("", response_model=CalendarResponse)
def create_calendar(
    body: CalendarCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Create a preparation calendar for an upcoming interview.

    Milestones are planned from the number of days left, and today's
    practice recommendations are generated immediately.
    """
    calendar = _service(db).create_calendar(
        user_id,
        target_company=body.target_company,
        interview_date=body.interview_date,
        role=body.role,
        interview_type=body.interview_type,
        notes=body.notes,
    )
    return CalendarResponse(success=True, message="Preparation calendar created", data=calendar)


@router.get("", response_model=CalendarListResponse)
def list_calendars(
    status: Optional[str] = Query(default="active", description="active, completed, cancelled or all"),
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    calendars = _service(db).list_calendars(user_id, None if status == "all" else status)
    return CalendarListResponse(success=True, count=len(calendars), data=calendars)


@router.get("/{calendar_id}/timeline", response_model=TimelineResponse)
def get_timeline(
    calendar_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    timeline = _service(db).get_timeline(validate_uuid(calendar_id, "calendar_id"), user_id)
    return TimelineResponse(success=True, data=timeline)


@router.put("/{calendar_id}/milestone/{milestone_id}", response_model=CalendarResponse)
def update_milestone(
    calendar_id: str,
    milestone_id: str,
    body: MilestoneUpdate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    calendar = _service(db).update_milestone(
        validate_uuid(calendar_id, "calendar_id"),
        validate_uuid(milestone_id, "milestone_id"),
        body.completed,
        user_id,
    )
    return CalendarResponse(success=True, data=calendar)


@router.put("/{calendar_id}/practice/{practice_id}", response_model=DailyPracticeResponse)
def complete_daily_practice(
    calendar_id: str,
    practice_id: str,
    body: PracticeUpdate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    practice = _service(db).complete_daily_practice(
        validate_uuid(calendar_id, "calendar_id"),
        validate_uuid(practice_id, "practice_id"),
        body.practices_done,
        user_id,
    )
    return DailyPracticeResponse(success=True, data=practice)


@router.delete("/{calendar_id}", response_model=MessageResponse)
def delete_calendar(
    calendar_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    _service(db).delete_calendar(validate_uuid(calendar_id, "calendar_id"), user_id)
    return MessageResponse(success=True, message="Calendar deleted")
