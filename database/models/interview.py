import uuid

from sqlalchemy import Column, Text, Float, TIMESTAMP, ForeignKey, Uuid, Index
from sqlalchemy.orm import relationship

from core.utils import utcnow
from .base import Base


class Interview(Base):
    """
    A completed mock interview and its score.

    Written once when the interview is scored; read by the fit scoring and
    buddy matching engines.
    """
    __tablename__ = 'interviews'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    target_company = Column(Text, nullable=True)
    target_role = Column(Text, nullable=True)
    interview_type = Column(Text, nullable=False)  # technical|behavioral|system-design

    overall_score = Column(Float, nullable=True)  # 0-100

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    user = relationship("User")

    __table_args__ = (
        Index('idx_interviews_user_created', 'user_id', 'created_at'),
        Index('idx_interviews_company', 'target_company'),
    )
