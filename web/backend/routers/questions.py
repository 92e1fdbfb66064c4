#!/usr/bin/env python3
"""
Question endpoints - crowdsourced real interview questions.
"""

import uuid
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from ..config import get_config
from ..dependencies import get_db, get_current_user_id
from ..rate_limit import limiter
from ..services.question_service import QuestionService
from ..models.requests import QuestionCreate, VoteRequest, ReportRequest
from ..models.responses import (
    QuestionResponse,
    QuestionListResponse,
    VoteResponse,
    FrequencyResponse,
    UserQuestionsResponse,
)
from ..utils import validate_uuid

router = APIRouter(prefix="/api/questions", tags=["questions"])


def _service(db: Session) -> QuestionService:
    config = get_config()
    return QuestionService(db, config.questions, config.gamification)


@router.get("/trending", response_model=QuestionListResponse)
def get_trending_questions(
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    db: Session = Depends(get_db)
):
    """Active questions ranked by votes, how often they are asked and recency."""
    questions = _service(db).get_trending(limit)
    return QuestionListResponse(success=True, count=len(questions), data=questions)


@router.get("/search", response_model=QuestionListResponse)
def search_questions(
    q: str = Query(..., min_length=1, description="Text to search for"),
    company: Optional[str] = Query(default=None),
    question_type: Optional[str] = Query(default=None),
    limit: Optional[int] = Query(default=None, ge=1, le=100),
    db: Session = Depends(get_db)
):
    questions = _service(db).search(q, company=company, question_type=question_type, limit=limit)
    return QuestionListResponse(success=True, count=len(questions), data=questions)


@router.get("/my", response_model=UserQuestionsResponse)
def get_my_questions(
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return UserQuestionsResponse(success=True, data=_service(db).get_user_questions(user_id))


@router.get("/company/{company}", response_model=QuestionListResponse)
def get_company_questions(
    company: str,
    question_type: Optional[str] = Query(default=None),
    difficulty: Optional[str] = Query(default=None),
    role: Optional[str] = Query(default=None),
    verified: Optional[bool] = Query(default=None),
    limit: Optional[int] = Query(default=None, ge=1, le=200),
    db: Session = Depends(get_db)
):
    filters = {
        "question_type": question_type,
        "difficulty": difficulty,
        "role": role,
        "verified": verified,
    }
    questions = _service(db).get_questions_by_company(company, filters, limit)
    return QuestionListResponse(success=True, count=len(questions), data=questions)


@router.get("/company/{company}/frequency", response_model=FrequencyResponse)
def get_question_frequency(
    company: str,
    db: Session = Depends(get_db)
):
    return FrequencyResponse(success=True, data=_service(db).get_frequency(company))


@router.post("", response_model=QuestionResponse)
@limiter.limit("10/minute")
def submit_question(
    request: Request,
    body: QuestionCreate,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Submit a question you were asked. It is reviewed before it becomes public."""
    question = _service(db).submit_question(user_id, body.model_dump())
    return QuestionResponse(success=True, message="Question submitted for review", data=question)


@router.post("/{question_id}/vote", response_model=VoteResponse)
def vote_on_question(
    question_id: str,
    body: VoteRequest,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    data = _service(db).vote(validate_uuid(question_id, "question_id"), user_id, body.vote_type)
    return VoteResponse(success=True, data=data)


@router.post("/{question_id}/report", response_model=QuestionResponse)
def report_question(
    question_id: str,
    body: Optional[ReportRequest] = None,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    question = _service(db).report(validate_uuid(question_id, "question_id"), user_id, body.reason if body else None)
    return QuestionResponse(success=True, message="Question reported", data=question)


@router.post("/{question_id}/verify", response_model=QuestionResponse)
def verify_question(
    question_id: str,
    user_id: uuid.UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    question = _service(db).verify(validate_uuid(question_id, "question_id"), user_id)
    return QuestionResponse(success=True, message="Question verified", data=question)
