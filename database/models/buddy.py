import uuid

from sqlalchemy import (
    Column, Text, Integer, Boolean, TIMESTAMP, ForeignKey, JSON, Uuid,
    UniqueConstraint, Index,
)
from sqlalchemy.orm import relationship

from core.utils import utcnow
from .base import Base


class BuddyMatch(Base):
    """
    Peer connection between two users preparing for interviews.

    user1 is the initiator. pair_key identifies the unordered pair so that at
    most one match exists per pair whichever side connects first.
    """
    __tablename__ = 'buddy_matches'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user1_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    user2_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    pair_key = Column(Text, nullable=False)

    target_company = Column(Text)
    target_role = Column(Text)
    match_score = Column(Integer, nullable=False, default=0)

    status = Column(Text, nullable=False, default='pending')  # pending|accepted|rejected|blocked
    initiated_by = Column(Uuid, ForeignKey('users.id'), nullable=True)
    connected_at = Column(TIMESTAMP(timezone=True))

    last_interaction = Column(TIMESTAMP(timezone=True), default=utcnow)
    total_sessions = Column(Integer, nullable=False, default=0)
    notes = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    user1 = relationship("User", foreign_keys=[user1_id])
    user2 = relationship("User", foreign_keys=[user2_id])
    mock_interviews = relationship(
        "BuddyMockInterview",
        back_populates="match",
        cascade="all, delete-orphan",
        order_by="BuddyMockInterview.scheduled_date",
    )

    __table_args__ = (
        UniqueConstraint('pair_key', name='uq_buddy_match_pair'),
        Index('idx_buddy_match_user1', 'user1_id'),
        Index('idx_buddy_match_user2', 'user2_id'),
        Index('idx_buddy_match_status', 'status'),
        Index('idx_buddy_match_company', 'target_company'),
    )

    def other_user_id(self, user_id):
        return self.user2_id if self.user1_id == user_id else self.user1_id

    def involves(self, user_id) -> bool:
        return user_id in (self.user1_id, self.user2_id)


class BuddyMockInterview(Base):
    """A mock interview scheduled between two connected buddies."""
    __tablename__ = 'buddy_mock_interviews'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    match_id = Column(Uuid, ForeignKey('buddy_matches.id', ondelete='CASCADE'), nullable=False)

    scheduled_date = Column(TIMESTAMP(timezone=True), nullable=False)
    duration = Column(Integer, nullable=False, default=60)  # minutes
    interview_type = Column(Text)
    completed = Column(Boolean, nullable=False, default=False)
    feedback = Column(Text)
    rating = Column(Integer)

    match = relationship("BuddyMatch", back_populates="mock_interviews")


class StudyGroup(Base):
    """Group of users studying for the same company or role."""
    __tablename__ = 'study_groups'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False)
    description = Column(Text)

    target_company = Column(Text)
    target_role = Column(Text)
    focus_areas = Column(JSON, default=list)

    creator_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    max_members = Column(Integer, nullable=False, default=10)

    is_private = Column(Boolean, nullable=False, default=False)
    require_approval = Column(Boolean, nullable=False, default=True)

    status = Column(Text, nullable=False, default='active')  # active|inactive|archived
    last_activity = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    creator = relationship("User")
    members = relationship(
        "StudyGroupMember",
        back_populates="group",
        cascade="all, delete-orphan",
        order_by="StudyGroupMember.joined_at",
    )

    __table_args__ = (
        Index('idx_study_group_company_status', 'target_company', 'status'),
        Index('idx_study_group_creator', 'creator_id'),
    )

    @property
    def member_count(self) -> int:
        return len(self.members)

    @property
    def available_slots(self) -> int:
        return self.max_members - len(self.members)

    def is_member(self, user_id) -> bool:
        return any(m.user_id == user_id for m in self.members)


class StudyGroupMember(Base):
    __tablename__ = 'study_group_members'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    group_id = Column(Uuid, ForeignKey('study_groups.id', ondelete='CASCADE'), nullable=False)
    user_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    role = Column(Text, nullable=False, default='member')  # admin|member
    joined_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    group = relationship("StudyGroup", back_populates="members")
    user = relationship("User")

    __table_args__ = (
        UniqueConstraint('group_id', 'user_id', name='uq_study_group_member'),
        Index('idx_study_group_member_user', 'user_id'),
    )
