from typing import Any, Dict, List, Optional

from sqlalchemy import select

from database.models import RealQuestion, QuestionVote
from database.repositories.base import BaseRepository


class QuestionRepository(BaseRepository):
    model = RealQuestion

    def create(self, submitted_by: Any, **fields) -> RealQuestion:
        question = RealQuestion(submitted_by=submitted_by, **fields)
        return self.add(question)

    def get_vote(self, question_id: Any, user_id: Any) -> Optional[QuestionVote]:
        stmt = select(QuestionVote).where(
            QuestionVote.question_id == question_id,
            QuestionVote.user_id == user_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def add_vote(self, question_id: Any, user_id: Any, vote_type: str) -> QuestionVote:
        vote = QuestionVote(question_id=question_id, user_id=user_id, vote_type=vote_type)
        return self.add(vote)

    def remove_vote(self, vote: QuestionVote) -> None:
        self.db.delete(vote)
        self.db.flush()

    def find_by_company(
        self,
        company: str,
        filters: Optional[Dict[str, Any]] = None,
        limit: Optional[int] = None,
    ) -> List[RealQuestion]:
        """Active questions for a company, most upvoted then most asked first."""
        filters = filters or {}
        stmt = select(RealQuestion).where(
            RealQuestion.company == company,
            RealQuestion.status == 'active',
        )
        if filters.get('question_type'):
            stmt = stmt.where(RealQuestion.question_type == filters['question_type'])
        if filters.get('difficulty'):
            stmt = stmt.where(RealQuestion.difficulty == filters['difficulty'])
        if filters.get('role'):
            stmt = stmt.where(RealQuestion.role == filters['role'])
        if filters.get('verified') is not None:
            stmt = stmt.where(RealQuestion.verified.is_(bool(filters['verified'])))
        stmt = stmt.order_by(RealQuestion.upvote_count.desc(), RealQuestion.times_asked.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return self.db.execute(stmt).scalars().all()

    def find_active(self) -> List[RealQuestion]:
        stmt = select(RealQuestion).where(RealQuestion.status == 'active')
        return self.db.execute(stmt).scalars().all()

    def find_verified_for_company(self, company: str) -> List[RealQuestion]:
        stmt = select(RealQuestion).where(
            RealQuestion.company == company,
            RealQuestion.verified.is_(True),
            RealQuestion.status == 'active',
        )
        return self.db.execute(stmt).scalars().all()

    def search(
        self,
        term: str,
        company: Optional[str] = None,
        question_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[RealQuestion]:
        stmt = select(RealQuestion).where(
            RealQuestion.status == 'active',
            RealQuestion.question.ilike(f"%{term}%"),
        )
        if company:
            stmt = stmt.where(RealQuestion.company == company)
        if question_type:
            stmt = stmt.where(RealQuestion.question_type == question_type)
        stmt = stmt.order_by(RealQuestion.upvote_count.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return self.db.execute(stmt).scalars().all()

    def find_by_submitter(self, user_id: Any) -> List[RealQuestion]:
        stmt = (
            select(RealQuestion)
            .where(RealQuestion.submitted_by == user_id)
            .order_by(RealQuestion.submitted_at.desc())
        )
        return self.db.execute(stmt).scalars().all()
