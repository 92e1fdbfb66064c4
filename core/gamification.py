"""
Best-effort XP awards for community actions.

Awards run after the primary operation has committed. A failed award is
rolled back and logged; it never fails the caller.
"""

import logging
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.config_loader import GamificationConfig
from database.repositories.user import UserRepository

logger = logging.getLogger(__name__)


class XpAwarder:
    def __init__(self, db: Session, config: Optional[GamificationConfig] = None):
        self.db = db
        self.config = config or GamificationConfig()
        self.users = UserRepository(db)

    def award(self, user_id: Any, amount: int, reason: str) -> bool:
        """
        Add XP to a user and commit.

        Returns:
            True if the XP was recorded, False if awards are disabled, the
            user is unknown or the write failed.
        """
        if not self.config.enabled or amount <= 0:
            return False

        try:
            updated = self.users.increment_xp(user_id, amount)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning(f"Failed to award {amount} XP to user {user_id} for {reason}: {e}")
            return False

        if not updated:
            logger.warning(f"Cannot award XP for {reason}: user {user_id} not found")
            return False

        logger.info(f"Awarded {amount} XP to user {user_id} for {reason}")
        return True
