from typing import Any, List, Optional

from sqlalchemy import select

from database.models import StudyGroup, StudyGroupMember
from database.repositories.base import BaseRepository


class StudyGroupRepository(BaseRepository):
    model = StudyGroup

    def create(self, creator_id: Any, name: str, **fields) -> StudyGroup:
        group = StudyGroup(creator_id=creator_id, name=name, **fields)
        return self.add(group)

    def add_member(self, group: StudyGroup, user_id: Any, role: str = 'member') -> StudyGroupMember:
        member = StudyGroupMember(user_id=user_id, role=role)
        group.members.append(member)
        self.db.flush()
        return member

    def find_public_active(
        self,
        target_company: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[StudyGroup]:
        """Active public groups, most recently active first."""
        stmt = select(StudyGroup).where(
            StudyGroup.status == 'active',
            StudyGroup.is_private.is_(False),
        )
        if target_company:
            stmt = stmt.where(StudyGroup.target_company == target_company)
        stmt = stmt.order_by(StudyGroup.last_activity.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        return self.db.execute(stmt).scalars().all()

    def find_for_user(self, user_id: Any) -> List[StudyGroup]:
        stmt = (
            select(StudyGroup)
            .join(StudyGroupMember, StudyGroupMember.group_id == StudyGroup.id)
            .where(StudyGroupMember.user_id == user_id, StudyGroup.status == 'active')
            .order_by(StudyGroup.last_activity.desc())
        )
        return self.db.execute(stmt).scalars().all()
