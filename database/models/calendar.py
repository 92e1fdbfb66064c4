import uuid

from sqlalchemy import (
    Column, Text, Integer, Boolean, Date, TIMESTAMP, ForeignKey, JSON, Uuid,
    UniqueConstraint, Index,
)
from sqlalchemy.orm import relationship

from core.utils import utcnow
from .base import Base


class PreparationCalendar(Base):
    """
    Preparation plan for one scheduled interview.

    Milestones are generated once at creation; daily practice entries are
    appended lazily, at most one per calendar day.
    """
    __tablename__ = 'preparation_calendars'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    target_company = Column(Text, nullable=False)
    interview_date = Column(TIMESTAMP(timezone=True), nullable=False)
    role = Column(Text, nullable=False)
    interview_type = Column(Text, nullable=False, default='technical')  # technical|behavioral|system-design|mixed

    preparation_start_date = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
    readiness_score = Column(Integer, nullable=False, default=0)  # 0-100
    last_updated = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    status = Column(Text, nullable=False, default='active')  # active|completed|cancelled
    outcome = Column(Text, nullable=False, default='pending')  # pending|passed|failed|no-show
    notes = Column(Text)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    milestones = relationship(
        "CalendarMilestone",
        back_populates="calendar",
        cascade="all, delete-orphan",
        order_by="CalendarMilestone.position",
    )
    daily_practice = relationship(
        "DailyPractice",
        back_populates="calendar",
        cascade="all, delete-orphan",
        order_by="DailyPractice.practice_date",
    )

    __table_args__ = (
        Index('idx_calendar_user_status', 'user_id', 'status'),
        Index('idx_calendar_interview_date', 'interview_date'),
        Index('idx_calendar_company', 'target_company'),
    )


class CalendarMilestone(Base):
    __tablename__ = 'calendar_milestones'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    calendar_id = Column(Uuid, ForeignKey('preparation_calendars.id', ondelete='CASCADE'), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    title = Column(Text, nullable=False)
    description = Column(Text)
    target_date = Column(TIMESTAMP(timezone=True), nullable=False)
    completed = Column(Boolean, nullable=False, default=False)
    completed_at = Column(TIMESTAMP(timezone=True))

    calendar = relationship("PreparationCalendar", back_populates="milestones")


class DailyPractice(Base):
    __tablename__ = 'calendar_daily_practice'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    calendar_id = Column(Uuid, ForeignKey('preparation_calendars.id', ondelete='CASCADE'), nullable=False)

    practice_date = Column(Date, nullable=False)
    recommendations = Column(JSON, default=list)
    completed = Column(Boolean, nullable=False, default=False)
    practices_done = Column(JSON, default=list)

    calendar = relationship("PreparationCalendar", back_populates="daily_practice")

    __table_args__ = (
        UniqueConstraint('calendar_id', 'practice_date', name='uq_daily_practice_day'),
    )
