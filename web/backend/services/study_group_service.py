#!/usr/bin/env python3
"""
Study group service - create, discover and join study groups.
"""

import logging
from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.config_loader import BuddyConfig, GamificationConfig
from core.gamification import XpAwarder
from core.utils import utcnow
from database.models import StudyGroup
from database.repositories import StudyGroupRepository, UserRepository
from ..models.responses import GroupMemberModel, StudyGroupModel
from ..utils import safe_str, safe_datetime_iso
from ..exceptions import InvalidStateException, NotFoundException

logger = logging.getLogger(__name__)


class StudyGroupService:
    """Service for study groups."""

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
        self.groups = StudyGroupRepository(db)
        self.xp = XpAwarder(db, self.gamification)

    def create_group(
        self,
        user_id: Any,
        name: str,
        description: Optional[str] = None,
        target_company: Optional[str] = None,
        target_role: Optional[str] = None,
        focus_areas: Optional[List[str]] = None,
        max_members: Optional[int] = None,
        is_private: bool = False,
        require_approval: bool = True,
    ) -> StudyGroupModel:
        """Create a group; the creator joins it as admin."""
        if self.users.get_by_id(user_id) is None:
            raise NotFoundException(f"User {user_id} not found")

        group = self.groups.create(
            user_id,
            name,
            description=description,
            target_company=target_company,
            target_role=target_role,
            focus_areas=list(focus_areas or []),
            max_members=max_members or self.config.default_group_size,
            is_private=is_private,
            require_approval=require_approval,
        )
        self.groups.add_member(group, user_id, role='admin')
        self.db.commit()

        logger.info(f"User {user_id} created study group {group.id} ({name})")
        self.xp.award(user_id, self.gamification.create_group_xp, "study group creation")
        return self.to_model(group)

    def find_groups(
        self,
        target_company: Optional[str] = None,
        limit: Optional[int] = None,
        only_available: bool = False,
    ) -> List[StudyGroupModel]:
        """Active public groups, most recently active first."""
        groups = self.groups.find_public_active(
            target_company=target_company,
            limit=limit or self.config.group_search_limit,
        )
        if only_available:
            groups = [g for g in groups if g.member_count < g.max_members]
        return [self.to_model(g) for g in groups]

    def join_group(self, group_id: Any, user_id: Any) -> StudyGroupModel:
        """
        Join a study group as a member.

        Raises:
            NotFoundException: If the group does not exist.
            InvalidStateException: If the user is already a member or the group is full.
        """
        group = self.groups.get_by_id(group_id)
        if group is None:
            raise NotFoundException(f"Study group {group_id} not found")
        if group.is_member(user_id):
            raise InvalidStateException("Already a member of this group")
        if group.member_count >= group.max_members:
            raise InvalidStateException("Group is full")

        try:
            self.groups.add_member(group, user_id)
            group.last_activity = utcnow()
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise InvalidStateException("Already a member of this group")

        logger.info(f"User {user_id} joined study group {group.id}")
        self.xp.award(user_id, self.gamification.join_group_xp, "joining a study group")
        return self.to_model(group)

    def get_user_groups(self, user_id: Any) -> List[StudyGroupModel]:
        return [self.to_model(g) for g in self.groups.find_for_user(user_id)]

    def to_model(self, group: StudyGroup) -> StudyGroupModel:
        return StudyGroupModel(
            group_id=safe_str(group.id),
            name=group.name,
            description=group.description,
            target_company=group.target_company,
            target_role=group.target_role,
            focus_areas=list(group.focus_areas or []),
            creator_id=safe_str(group.creator_id),
            member_count=group.member_count,
            max_members=group.max_members,
            available_slots=max(0, group.available_slots),
            is_private=bool(group.is_private),
            require_approval=bool(group.require_approval),
            status=group.status,
            last_activity=safe_datetime_iso(group.last_activity),
            members=[
                GroupMemberModel(
                    user_id=safe_str(m.user_id),
                    role=m.role,
                    joined_at=safe_datetime_iso(m.joined_at),
                )
                for m in group.members
            ],
        )
