#!/usr/bin/env python3
"""
Question service - crowdsourced real interview questions.

Submissions start pending. A question becomes active when an admin verifies
it or when it collects enough upvotes; enough reports send it back to
pending for review.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.config_loader import GamificationConfig, QuestionConfig
from core.gamification import XpAwarder
from core.questions import (
    apply_vote,
    frequency_distribution,
    popularity_score,
    recent_since,
    vote_deltas,
)
from core.utils import utcnow
from database.models import RealQuestion
from database.repositories import QuestionRepository, UserRepository
from ..models.responses import (
    FrequencyData,
    QuestionModel,
    QuestionStats,
    RecentTrends,
    UserQuestionsData,
    VoteData,
)
from ..utils import safe_int, safe_str, safe_datetime_iso
from ..exceptions import InvalidStateException, NotFoundException, UnauthorizedException

logger = logging.getLogger(__name__)


class QuestionService:
    """Service for the real interview question database."""

    def __init__(
        self,
        db: Session,
        config: Optional[QuestionConfig] = None,
        gamification: Optional[GamificationConfig] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.config = config or QuestionConfig()
        self.gamification = gamification or GamificationConfig()
        self.clock = clock
        self.users = UserRepository(db)
        self.questions = QuestionRepository(db)
        self.xp = XpAwarder(db, self.gamification)

    def _get_question(self, question_id: Any) -> RealQuestion:
        question = self.questions.get_by_id(question_id)
        if question is None:
            raise NotFoundException(f"Question {question_id} not found")
        return question

    def submit_question(self, user_id: Any, data: Dict[str, Any]) -> QuestionModel:
        """
        Record a question the user was asked. It stays pending until verified.

        Raises:
            NotFoundException: If the user does not exist.
        """
        if self.users.get_by_id(user_id) is None:
            raise NotFoundException(f"User {user_id} not found")

        now = self.clock()
        question = self.questions.create(
            user_id,
            question=data['question'],
            question_type=data['question_type'],
            company=data['company'],
            role=data['role'],
            level=data.get('level') or 'mid',
            interview_round=data.get('interview_round') or 'technical-1',
            interview_date=data['interview_date'],
            location=data.get('location') or 'remote',
            tags=list(data.get('tags') or []),
            difficulty=data.get('difficulty') or 'medium',
            expected_duration=data.get('expected_duration'),
            follow_up_questions=list(data.get('follow_up_questions') or []),
            hints=list(data.get('hints') or []),
            sample_answer=data.get('sample_answer'),
            notes=data.get('notes'),
            submitted_at=now,
            last_asked_date=now,
            status='pending',
        )
        self.db.commit()

        logger.info(f"User {user_id} submitted question {question.id} for {question.company}")
        self.xp.award(user_id, self.gamification.submit_question_xp, "question submission")
        return self.to_model(question)

    def vote(self, question_id: Any, user_id: Any, vote_type: str) -> VoteData:
        """
        Up- or downvote a question.

        Repeating a vote withdraws it; voting the other way switches it.
        Reaching the auto-verify upvote count verifies and activates the
        question.
        """
        question = self._get_question(question_id)
        existing = self.questions.get_vote(question.id, user_id)
        previous = existing.vote_type if existing is not None else None

        try:
            new = apply_vote(previous, vote_type)
        except ValueError as e:
            raise InvalidStateException(str(e))

        try:
            if existing is not None and new is None:
                self.questions.remove_vote(existing)
            elif existing is not None:
                existing.vote_type = new
                existing.voted_at = self.clock()
            else:
                self.questions.add_vote(question.id, user_id, new)
        except IntegrityError:
            self.db.rollback()
            raise InvalidStateException("Vote already recorded")

        up, down = vote_deltas(previous, new)
        question.upvote_count = max(0, (question.upvote_count or 0) + up)
        question.downvote_count = max(0, (question.downvote_count or 0) + down)

        if question.upvote_count >= self.config.auto_verify_upvotes and not question.verified:
            question.verified = True
            question.verified_at = self.clock()
            question.status = 'active'
            logger.info(f"Question {question.id} auto-verified at {question.upvote_count} upvotes")

        self.db.commit()
        logger.info(f"User {user_id} vote on question {question.id}: {previous} -> {new}")

        return VoteData(
            question_id=safe_str(question.id),
            upvotes=question.upvote_count,
            downvotes=question.downvote_count,
            vote_score=question.vote_score,
            user_vote=new,
            verified=bool(question.verified),
            status=question.status,
        )

    def get_questions_by_company(
        self,
        company: str,
        filters: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> List[QuestionModel]:
        questions = self.questions.find_by_company(
            company,
            filters=filters,
            limit=limit or self.config.company_limit,
        )
        return [self.to_model(q) for q in questions]

    def get_trending(self, limit: Optional[int] = None) -> List[QuestionModel]:
        """Active questions by popularity (votes, times asked and recency)."""
        now = self.clock()
        scored = [
            (q, popularity_score(q.upvote_count, q.downvote_count, q.times_asked, q.last_asked_date, now))
            for q in self.questions.find_active()
        ]
        scored.sort(key=lambda pair: pair[1], reverse=True)
        scored = scored[:limit or self.config.trending_limit]
        return [self.to_model(q, popularity=score) for q, score in scored]

    def get_frequency(self, company: str) -> FrequencyData:
        questions = sorted(
            self.questions.find_verified_for_company(company),
            key=lambda q: q.times_asked or 0,
            reverse=True,
        )
        recent = recent_since(questions, self.clock(), self.config.recent_window_days)

        return FrequencyData(
            company=company,
            total_questions=len(questions),
            frequency_distribution=frequency_distribution([q.times_asked or 0 for q in questions]),
            most_asked=[self.to_model(q) for q in questions[:self.config.most_asked_count]],
            recent_trends=RecentTrends(
                count=len(recent),
                questions=[self.to_model(q) for q in recent[:self.config.most_asked_count]],
            ),
        )

    def report(self, question_id: Any, user_id: Any, reason: Optional[str] = None) -> QuestionModel:
        question = self._get_question(question_id)
        question.reported = True
        question.report_count = (question.report_count or 0) + 1
        if question.report_count >= self.config.report_threshold:
            question.status = 'pending'
        self.db.commit()

        logger.info(
            f"Question {question.id} reported by user {user_id} "
            f"({question.report_count} reports): {reason or 'no reason given'}"
        )
        return self.to_model(question)

    def verify(self, question_id: Any, admin_id: Any) -> QuestionModel:
        """
        Verify a question as an admin and reward its submitter.

        Raises:
            UnauthorizedException: If the acting user is not an admin.
            NotFoundException: If the question does not exist.
        """
        admin = self.users.get_by_id(admin_id)
        if admin is None or not admin.is_admin:
            raise UnauthorizedException("Only admins can verify questions")

        question = self._get_question(question_id)
        question.verified = True
        question.verified_by = admin.id
        question.verified_at = self.clock()
        question.status = 'active'
        self.db.commit()

        logger.info(f"Question {question.id} verified by admin {admin_id}")
        self.xp.award(question.submitted_by, self.gamification.verified_question_xp, "verified question")
        return self.to_model(question)

    def search(
        self,
        term: str,
        company: Optional[str] = None,
        question_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[QuestionModel]:
        questions = self.questions.search(
            term,
            company=company,
            question_type=question_type,
            limit=limit or self.config.search_limit,
        )
        return [self.to_model(q) for q in questions]

    def get_user_questions(self, user_id: Any) -> UserQuestionsData:
        questions = self.questions.find_by_submitter(user_id)
        return UserQuestionsData(
            questions=[self.to_model(q) for q in questions],
            stats=QuestionStats(
                total=len(questions),
                verified=sum(1 for q in questions if q.verified),
                pending=sum(1 for q in questions if q.status == 'pending'),
                total_upvotes=sum(q.upvote_count or 0 for q in questions),
            ),
        )

    def to_model(self, question: RealQuestion, popularity: Optional[int] = None) -> QuestionModel:
        return QuestionModel(
            id=safe_str(question.id),
            question=question.question,
            question_type=question.question_type,
            company=question.company,
            role=question.role,
            level=question.level,
            interview_round=question.interview_round,
            interview_date=safe_datetime_iso(question.interview_date),
            location=question.location,
            submitted_by=safe_str(question.submitted_by),
            submitted_at=safe_datetime_iso(question.submitted_at),
            verified=bool(question.verified),
            verified_at=safe_datetime_iso(question.verified_at),
            upvotes=safe_int(question.upvote_count),
            downvotes=safe_int(question.downvote_count),
            vote_score=question.vote_score,
            times_asked=safe_int(question.times_asked, 1),
            last_asked_date=safe_datetime_iso(question.last_asked_date),
            tags=list(question.tags or []),
            difficulty=question.difficulty,
            expected_duration=question.expected_duration,
            follow_up_questions=list(question.follow_up_questions or []),
            hints=list(question.hints or []),
            sample_answer=question.sample_answer,
            notes=question.notes,
            reported=bool(question.reported),
            report_count=safe_int(question.report_count),
            status=question.status,
            popularity_score=popularity,
        )
