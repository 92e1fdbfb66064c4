import logging
from typing import Any, List, Optional, Set

from sqlalchemy import select, or_

from core.buddy import pair_key
from database.models import BuddyMatch, BuddyMockInterview
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class BuddyMatchRepository(BaseRepository):
    model = BuddyMatch

    def find_between(self, user_a: Any, user_b: Any) -> Optional[BuddyMatch]:
        """The match for an unordered user pair, if any."""
        stmt = select(BuddyMatch).where(BuddyMatch.pair_key == pair_key(user_a, user_b))
        return self.db.execute(stmt).scalar_one_or_none()

    def connected_user_ids(self, user_id: Any) -> Set[Any]:
        """Users in any match with user_id, whatever its status."""
        stmt = select(BuddyMatch.user1_id, BuddyMatch.user2_id).where(
            or_(BuddyMatch.user1_id == user_id, BuddyMatch.user2_id == user_id)
        )
        connected = set()
        for user1_id, user2_id in self.db.execute(stmt).all():
            connected.add(user2_id if user1_id == user_id else user1_id)
        return connected

    def find_for_user(self, user_id: Any, status: Optional[str] = 'accepted') -> List[BuddyMatch]:
        stmt = select(BuddyMatch).where(
            or_(BuddyMatch.user1_id == user_id, BuddyMatch.user2_id == user_id)
        )
        if status is not None:
            stmt = stmt.where(BuddyMatch.status == status)
        return self.db.execute(stmt).scalars().all()

    def create(self, user1_id: Any, user2_id: Any, **fields) -> BuddyMatch:
        match = BuddyMatch(
            user1_id=user1_id,
            user2_id=user2_id,
            pair_key=pair_key(user1_id, user2_id),
            **fields,
        )
        return self.add(match)

    def add_mock_interview(self, match: BuddyMatch, **fields) -> BuddyMockInterview:
        mock = BuddyMockInterview(**fields)
        match.mock_interviews.append(mock)
        self.db.flush()
        return mock
