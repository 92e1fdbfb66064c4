#!/usr/bin/env python3
"""
Buddy service - buddy discovery, connections and mock interview scheduling.
"""

import logging
from datetime import datetime, timezone
from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.buddy import BuddyCandidate, rank_buddies
from core.buddy.matching import target_companies_from
from core.config_loader import BuddyConfig, GamificationConfig
from core.gamification import XpAwarder
from core.utils import utcnow, ensure_utc
from database.models import BuddyMatch, BuddyMockInterview
from database.repositories import BuddyMatchRepository, InterviewRepository, UserRepository
from .recommendation_service import to_sample
from ..models.responses import (
    BuddyCandidateModel,
    BuddyMatchModel,
    BuddyMatchesData,
    MockInterviewModel,
)
from ..utils import safe_int, safe_str, safe_datetime_iso
from ..exceptions import (
    AlreadyConnectedException,
    InvalidStateException,
    NotFoundException,
    UnauthorizedException,
)

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class BuddyService:
    """Service for study buddy matching and connections."""

    def __init__(
        self,
        db: Session,
        config: Optional[BuddyConfig] = None,
        gamification: Optional[GamificationConfig] = None,
    ):
        self.db = db
        self.config = config or BuddyConfig()
        self.gamification = gamification or GamificationConfig()
        self.users = UserRepository(db)
        self.interviews = InterviewRepository(db)
        self.matches = BuddyMatchRepository(db)
        self.xp = XpAwarder(db, self.gamification)

    def _require_user(self, user_id: Any):
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundException(f"User {user_id} not found")
        return user

    def find_buddies(self, user_id: Any) -> BuddyMatchesData:
        """
        Suggest study buddies preparing for the same companies.

        Raises:
            NotFoundException: If the user does not exist.
        """
        self._require_user(user_id)

        recent = [
            to_sample(i)
            for i in self.interviews.find_by_user(user_id, limit=self.config.recent_interview_limit)
        ]
        targets = target_companies_from(recent)
        candidate_records = []
        if targets:
            candidate_records = [
                to_sample(i)
                for i in self.interviews.find_by_companies(targets, exclude_user_id=user_id)
            ]
        connected = self.matches.connected_user_ids(user_id)

        result = rank_buddies(recent, candidate_records, connected, user_id=user_id, config=self.config)
        logger.info(f"Found {result.total_found} buddy candidates for user {user_id}")

        return BuddyMatchesData(
            total_found=result.total_found,
            buddies=[self._to_candidate_model(c) for c in result.buddies],
            message=result.message,
        )

    def connect(
        self,
        user_id: Any,
        buddy_id: Any,
        target_company: Optional[str] = None,
        target_role: Optional[str] = None,
        match_score: int = 0,
        notes: Optional[str] = None,
    ) -> tuple:
        """
        Request a buddy connection, or accept a pending one for the pair.

        Returns:
            (BuddyMatchModel, message)

        Raises:
            InvalidStateException: If the user tries to connect with themself.
            NotFoundException: If either user does not exist.
            AlreadyConnectedException: If the pair already has a non-pending match.
        """
        if user_id == buddy_id:
            raise InvalidStateException("Cannot connect with yourself")

        self._require_user(user_id)
        self._require_user(buddy_id)

        existing = self.matches.find_between(user_id, buddy_id)
        if existing is not None:
            if existing.status != 'pending':
                raise AlreadyConnectedException("Already connected with this user")

            # Either user connecting to a pending match accepts it, the initiator included.
            now = utcnow()
            existing.status = 'accepted'
            existing.connected_at = now
            existing.last_interaction = now
            self.db.commit()
            logger.info(f"Buddy match {existing.id} accepted by user {user_id}")
            return self._to_match_model(existing, user_id), "Buddy connection accepted"

        try:
            match = self.matches.create(
                user_id,
                buddy_id,
                target_company=target_company,
                target_role=target_role,
                match_score=match_score or 0,
                notes=notes,
                initiated_by=user_id,
                status='pending',
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Concurrent buddy request between {user_id} and {buddy_id}")
            raise AlreadyConnectedException("Already connected with this user")

        logger.info(f"Buddy request {match.id} from user {user_id} to {buddy_id}")
        self.xp.award(user_id, self.gamification.connect_xp, "buddy connection")

        return self._to_match_model(match, user_id), "Buddy request sent"

    def get_user_buddies(self, user_id: Any, status: Optional[str] = 'accepted') -> List[BuddyMatchModel]:
        """A user's buddy matches, most recently connected first."""
        matches = self.matches.find_for_user(user_id, status=status)
        matches = sorted(
            matches,
            key=lambda m: ensure_utc(m.connected_at) or _EPOCH,
            reverse=True,
        )
        return [self._to_match_model(m, user_id) for m in matches]

    def schedule_mock_interview(
        self,
        match_id: Any,
        user_id: Any,
        scheduled_date: datetime,
        duration: Optional[int] = None,
        interview_type: Optional[str] = None,
    ) -> MockInterviewModel:
        """
        Schedule a mock interview between two connected buddies.

        Raises:
            NotFoundException: If the match does not exist.
            UnauthorizedException: If the user is not part of the match.
            InvalidStateException: If the match has not been accepted.
        """
        match = self.matches.get_by_id(match_id)
        if match is None:
            raise NotFoundException(f"Buddy match {match_id} not found")
        if not match.involves(user_id):
            raise UnauthorizedException("Not authorized to schedule for this buddy match")
        if match.status != 'accepted':
            raise InvalidStateException("Buddy connection must be accepted first")

        mock = self.matches.add_mock_interview(
            match,
            scheduled_date=scheduled_date,
            duration=duration or self.config.default_mock_duration,
            interview_type=interview_type,
            completed=False,
        )
        match.last_interaction = utcnow()
        self.db.commit()

        logger.info(f"Scheduled mock interview {mock.id} for buddy match {match.id}")
        return self._to_mock_model(mock)

    def _to_candidate_model(self, candidate: BuddyCandidate) -> BuddyCandidateModel:
        user = self.users.get_by_id(candidate.user_id)
        return BuddyCandidateModel(
            user_id=safe_str(candidate.user_id),
            name=user.display_name if user is not None else None,
            common_companies=candidate.common_companies,
            match_score=candidate.match_score,
            interview_count=candidate.interview_count,
            avg_score=candidate.avg_score,
        )

    def _to_mock_model(self, mock: BuddyMockInterview) -> MockInterviewModel:
        return MockInterviewModel(
            id=safe_str(mock.id),
            scheduled_date=safe_datetime_iso(mock.scheduled_date),
            duration=safe_int(mock.duration, self.config.default_mock_duration),
            interview_type=mock.interview_type,
            completed=bool(mock.completed),
            feedback=mock.feedback,
            rating=mock.rating,
        )

    def _to_match_model(self, match: BuddyMatch, user_id: Any) -> BuddyMatchModel:
        buddy_id = match.other_user_id(user_id)
        buddy = self.users.get_by_id(buddy_id)
        return BuddyMatchModel(
            match_id=safe_str(match.id),
            buddy_id=safe_str(buddy_id),
            buddy_name=buddy.display_name if buddy is not None else None,
            target_company=match.target_company,
            target_role=match.target_role,
            match_score=safe_int(match.match_score),
            status=match.status,
            initiated_by=safe_str(match.initiated_by) if match.initiated_by else None,
            connected_at=safe_datetime_iso(match.connected_at),
            last_interaction=safe_datetime_iso(match.last_interaction),
            total_sessions=safe_int(match.total_sessions),
            mock_interviews=[self._to_mock_model(m) for m in match.mock_interviews],
        )
