import uuid

from sqlalchemy import Column, Text, Integer, Float, TIMESTAMP, JSON, Uuid

from core.utils import utcnow
from .base import Base


class Company(Base):
    """
    Company profile with its hiring bar. Read-only input to fit scoring.
    """
    __tablename__ = 'companies'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(Text, nullable=False, unique=True)
    logo = Column(Text)

    # Hiring bar - minimum expected score per category
    hiring_bar_technical = Column(Integer, nullable=False, default=70)
    hiring_bar_behavioral = Column(Integer, nullable=False, default=65)
    hiring_bar_system_design = Column(Integer, nullable=False, default=75)
    hiring_bar_overall = Column(Integer, nullable=False, default=70)

    acceptance_rate = Column(Float, nullable=False, default=50)  # 0-100
    difficulty_rating = Column(Integer, nullable=False, default=5)  # 1-10

    # Interview characteristics
    focus_areas = Column(JSON, default=list)
    interview_style = Column(Text)
    common_topics = Column(JSON, default=list)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)
