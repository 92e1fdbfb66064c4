import uuid

from sqlalchemy import (
    Column, Text, Integer, Boolean, TIMESTAMP, ForeignKey, JSON, Uuid,
    UniqueConstraint, Index,
)
from sqlalchemy.orm import relationship

from core.utils import utcnow
from .base import Base


class RealQuestion(Base):
    """
    Interview question reported by a user who was asked it.

    Starts pending; becomes active once verified by an admin or by enough
    upvotes. Vote counters mirror the rows in question_votes.
    """
    __tablename__ = 'real_questions'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    question = Column(Text, nullable=False)
    question_type = Column(Text, nullable=False)  # technical|behavioral|system-design|coding|other

    company = Column(Text, nullable=False)
    role = Column(Text, nullable=False)
    level = Column(Text, nullable=False, default='mid')

    interview_round = Column(Text, nullable=False, default='technical-1')
    interview_date = Column(TIMESTAMP(timezone=True), nullable=False)
    location = Column(Text, nullable=False, default='remote')

    submitted_by = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    submitted_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    verified = Column(Boolean, nullable=False, default=False)
    verified_by = Column(Uuid, ForeignKey('users.id'), nullable=True)
    verified_at = Column(TIMESTAMP(timezone=True))

    upvote_count = Column(Integer, nullable=False, default=0)
    downvote_count = Column(Integer, nullable=False, default=0)

    times_asked = Column(Integer, nullable=False, default=1)
    last_asked_date = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    tags = Column(JSON, default=list)
    difficulty = Column(Text, nullable=False, default='medium')  # easy|medium|hard|expert
    expected_duration = Column(Integer)  # minutes
    follow_up_questions = Column(JSON, default=list)
    hints = Column(JSON, default=list)
    sample_answer = Column(Text)
    notes = Column(Text)

    reported = Column(Boolean, nullable=False, default=False)
    report_count = Column(Integer, nullable=False, default=0)
    status = Column(Text, nullable=False, default='pending')  # active|pending|rejected|archived

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    submitter = relationship("User", foreign_keys=[submitted_by])
    votes = relationship("QuestionVote", back_populates="question", cascade="all, delete-orphan")

    __table_args__ = (
        Index('idx_question_company_status', 'company', 'status'),
        Index('idx_question_type_company', 'question_type', 'company'),
        Index('idx_question_verified_status', 'verified', 'status'),
        Index('idx_question_submitter', 'submitted_by'),
    )

    @property
    def vote_score(self) -> int:
        return (self.upvote_count or 0) - (self.downvote_count or 0)


class QuestionVote(Base):
    __tablename__ = 'question_votes'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    question_id = Column(Uuid, ForeignKey('real_questions.id', ondelete='CASCADE'), nullable=False)
    user_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    vote_type = Column(Text, nullable=False)  # up|down
    voted_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    question = relationship("RealQuestion", back_populates="votes")

    __table_args__ = (
        UniqueConstraint('question_id', 'user_id', name='uq_question_vote_user'),
    )
