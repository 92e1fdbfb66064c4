from typing import Any, List, Optional

from sqlalchemy import select

from database.models import PreparationCalendar, CalendarMilestone, DailyPractice
from database.repositories.base import BaseRepository


class CalendarRepository(BaseRepository):
    model = PreparationCalendar

    def create(self, user_id: Any, **fields) -> PreparationCalendar:
        calendar = PreparationCalendar(user_id=user_id, **fields)
        return self.add(calendar)

    def find_by_user(self, user_id: Any, status: Optional[str] = 'active') -> List[PreparationCalendar]:
        """A user's calendars, soonest interview first."""
        stmt = select(PreparationCalendar).where(PreparationCalendar.user_id == user_id)
        if status is not None:
            stmt = stmt.where(PreparationCalendar.status == status)
        stmt = stmt.order_by(PreparationCalendar.interview_date)
        return self.db.execute(stmt).scalars().all()

    def get_milestone(self, calendar_id: Any, milestone_id: Any) -> Optional[CalendarMilestone]:
        stmt = select(CalendarMilestone).where(
            CalendarMilestone.id == milestone_id,
            CalendarMilestone.calendar_id == calendar_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def get_practice(self, calendar_id: Any, practice_id: Any) -> Optional[DailyPractice]:
        stmt = select(DailyPractice).where(
            DailyPractice.id == practice_id,
            DailyPractice.calendar_id == calendar_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def delete(self, calendar: PreparationCalendar) -> None:
        self.db.delete(calendar)
        self.db.flush()
