#!/usr/bin/env python3
"""
Buddy endpoints - study buddy matching, connections, mock interviews and study groups.
"""

import uuid
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from ..config import get_config
from ..dependencies import get_db, get_current_user_id
from ..rate_limit import limiter
from ..services.buddy_service import BuddyService
from ..services.study_group_service import StudyGroupService
from ..models.requests import ConnectRequest, ScheduleMockInterviewRequest, StudyGroupCreate
from ..models.responses import (
    BuddyMatchesResponse,
    ConnectResponse,
    BuddyListResponse,
    MockInterviewResponse,
    StudyGroupResponse,
    StudyGroupListResponse,
)
from ..utils import validate_uuid

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/buddy", tags=["buddy"])


def _buddy_service(db: Session) -> BuddyService:
    config = get_config()
    return BuddyService(db, config.buddy, config.gamification)


def _group_service(db: Session) -> StudyGroupService:
    config = get_config()
    return StudyGroupService(db, config.buddy, config.gamification)


@router.get("/matches", response_model=BuddyMatchesResponse)
def find_buddies(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Suggest study buddies who practised for the same companies with a
    similar score level. Users already matched with you are excluded.
    """
    return BuddyMatchesResponse(success=True, data=_buddy_service(db).find_buddies(user_id))


@router.post("/connect", response_model=ConnectResponse)
@limiter.limit("20/minute")
def connect_with_buddy(
    request: Request,
    body: ConnectRequest,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Send a buddy request, or accept a pending request between the two users.
    """
    match, message = _buddy_service(db).connect(
        user_id,
        body.buddy_id,
        target_company=body.target_company,
        target_role=body.target_role,
        match_score=body.match_score,
        notes=body.notes,
    )
    return ConnectResponse(success=True, message=message, data=match)


@router.get("/my", response_model=BuddyListResponse)
def get_my_buddies(
    status: Optional[str] = Query(default="accepted", description="pending, accepted, rejected, blocked or all"),
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    buddies = _buddy_service(db).get_user_buddies(user_id, None if status == "all" else status)
    return BuddyListResponse(success=True, count=len(buddies), data=buddies)


@router.post("/{match_id}/schedule", response_model=MockInterviewResponse)
def schedule_mock_interview(
    match_id: str,
    body: ScheduleMockInterviewRequest,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Schedule a mock interview with an accepted buddy."""
    mock = _buddy_service(db).schedule_mock_interview(
        validate_uuid(match_id, "match_id"),
        user_id,
        body.scheduled_date,
        duration=body.duration,
        interview_type=body.interview_type,
    )
    return MockInterviewResponse(success=True, message="Mock interview scheduled", data=mock)


@router.post("/groups", response_model=StudyGroupResponse)
@limiter.limit("10/minute")
def create_study_group(
    request: Request,
    body: StudyGroupCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    group = _group_service(db).create_group(user_id, **body.model_dump())
    return StudyGroupResponse(success=True, message="Study group created", data=group)


@router.get("/groups", response_model=StudyGroupListResponse)
def find_study_groups(
    target_company: Optional[str] = Query(default=None),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    only_available: bool = Query(default=False, description="Hide full groups"),
    db: Session = Depends(get_db)
):
    groups = _group_service(db).find_groups(
        target_company=target_company,
        limit=limit,
        only_available=only_available,
    )
    return StudyGroupListResponse(success=True, count=len(groups), data=groups)


@router.get("/groups/my", response_model=StudyGroupListResponse)
def get_my_study_groups(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    groups = _group_service(db).get_user_groups(user_id)
    return StudyGroupListResponse(success=True, count=len(groups), data=groups)


@router.post("/groups/{group_id}/join", response_model=StudyGroupResponse)
@limiter.limit("20/minute")
def join_study_group(
    request: Request,
    group_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    group = _group_service(db).join_group(validate_uuid(group_id, "group_id"), user_id)
    return StudyGroupResponse(success=True, message="Joined study group", data=group)
