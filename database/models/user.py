import uuid

from sqlalchemy import Column, Text, Boolean, Integer, TIMESTAMP, Uuid, Index

from core.utils import utcnow
from .base import Base


class User(Base):
    """
    Platform user. Only the profile fields the preparation engine reads,
    plus the gamification XP counter it increments.
    """
    __tablename__ = 'users'

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(Text, nullable=False, unique=True)
    first_name = Column(Text)
    last_name = Column(Text)

    is_admin = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)

    # Gamification
    xp = Column(Integer, nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), nullable=False, default=utcnow)

    __table_args__ = (
        Index('idx_users_email', 'email'),
    )

    @property
    def display_name(self) -> str:
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or self.email
