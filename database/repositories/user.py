import logging
from typing import Any

from sqlalchemy import update

from database.models import User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    model = User

    def create(self, email: str, **fields) -> User:
        user = User(email=email, **fields)
        return self.add(user)

    def increment_xp(self, user_id: Any, amount: int) -> int:
        """Add XP with a single UPDATE; returns the number of rows touched."""
        stmt = (
            update(User)
            .where(User.id == user_id)
            .values(xp=User.xp + amount)
            .execution_options(synchronize_session="fetch")
        )
        return self.db.execute(stmt).rowcount
