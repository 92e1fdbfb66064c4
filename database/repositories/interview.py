from typing import Any, List, Optional, Sequence

from sqlalchemy import select

from database.models import Interview
from database.repositories.base import BaseRepository


class InterviewRepository(BaseRepository):
    model = Interview

    def find_by_user(self, user_id: Any, limit: Optional[int] = None) -> List[Interview]:
        """A user's interviews, newest first."""
        stmt = (
            select(Interview)
            .where(Interview.user_id == user_id)
            .order_by(Interview.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return self.db.execute(stmt).scalars().all()

    def find_by_companies(
        self,
        companies: Sequence[str],
        exclude_user_id: Any = None,
    ) -> List[Interview]:
        if not companies:
            return []
        stmt = select(Interview).where(Interview.target_company.in_(list(companies)))
        if exclude_user_id is not None:
            stmt = stmt.where(Interview.user_id != exclude_user_id)
        stmt = stmt.order_by(Interview.created_at)
        return self.db.execute(stmt).scalars().all()

    def create(self, user_id: Any, interview_type: str, **fields) -> Interview:
        interview = Interview(user_id=user_id, interview_type=interview_type, **fields)
        return self.add(interview)
