#!/usr/bin/env python3
"""
Calendar service - interview preparation calendars, milestones and daily practice.
"""

import logging
from datetime import datetime
from typing import Any, Callable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.config_loader import CalendarConfig
from core.planner import (
    calculate_progress,
    daily_recommendations,
    days_between,
    generate_milestones,
    next_milestone,
)
from core.utils import utcnow, ensure_utc
from database.models import (
    CalendarMilestone,
    DailyPractice,
    PreparationCalendar,
)
from database.repositories import CalendarRepository, UserRepository
from ..models.responses import (
    CalendarModel,
    DailyPracticeModel,
    MilestoneModel,
    TimelineData,
)
from ..utils import safe_str, safe_datetime_iso
from ..exceptions import InvalidStateException, NotFoundException, UnauthorizedException

logger = logging.getLogger(__name__)


class CalendarService:
    """Service for interview preparation calendars."""

    def __init__(
        self,
        db: Session,
        config: Optional[CalendarConfig] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.db = db
        self.config = config or CalendarConfig()
        self.clock = clock
        self.users = UserRepository(db)
        self.calendars = CalendarRepository(db)

    def _owned_calendar(self, calendar_id: Any, user_id: Any) -> PreparationCalendar:
        calendar = self.calendars.get_by_id(calendar_id)
        if calendar is None:
            raise NotFoundException(f"Calendar {calendar_id} not found")
        if calendar.user_id != user_id:
            raise UnauthorizedException("Not authorized to access this calendar")
        return calendar

    def create_calendar(
        self,
        user_id: Any,
        target_company: str,
        interview_date: datetime,
        role: str,
        interview_type: str = 'technical',
        notes: Optional[str] = None,
    ) -> CalendarModel:
        """
        Create a preparation calendar with generated milestones.

        Today's practice recommendations are generated right away.

        Raises:
            NotFoundException: If the user does not exist.
            InvalidStateException: If the interview date is not in the future.
        """
        if self.users.get_by_id(user_id) is None:
            raise NotFoundException(f"User {user_id} not found")

        now = self.clock()
        interview_date = ensure_utc(interview_date)
        if interview_date <= now:
            raise InvalidStateException("Interview date must be in the future")

        days_until = days_between(now, interview_date)
        calendar = self.calendars.create(
            user_id,
            target_company=target_company,
            interview_date=interview_date,
            role=role,
            interview_type=interview_type,
            notes=notes,
            preparation_start_date=now,
            last_updated=now,
        )
        for position, plan in enumerate(generate_milestones(days_until, target_company, now)):
            calendar.milestones.append(CalendarMilestone(
                position=position,
                title=plan.title,
                description=plan.description,
                target_date=plan.target_date,
            ))
        self.generate_daily_recommendations(calendar)
        self.db.commit()

        logger.info(
            f"Created calendar {calendar.id} for user {user_id}: {target_company} "
            f"in {days_until} days, {len(calendar.milestones)} milestones"
        )
        return self.to_model(calendar)

    def generate_daily_recommendations(self, calendar: PreparationCalendar) -> Optional[DailyPractice]:
        """
        Add today's practice entry unless one already exists.

        Days are UTC calendar days. The caller commits.
        """
        now = self.clock()
        today = ensure_utc(now).date()
        if any(p.practice_date == today for p in calendar.daily_practice):
            return None

        days_remaining = days_between(now, calendar.interview_date)
        practice = DailyPractice(
            practice_date=today,
            recommendations=daily_recommendations(days_remaining, calendar.target_company),
            completed=False,
            practices_done=[],
        )
        calendar.daily_practice.append(practice)
        self.db.flush()
        return practice

    def list_calendars(self, user_id: Any, status: Optional[str] = 'active') -> List[CalendarModel]:
        """A user's calendars, soonest interview first; active ones get today's practice."""
        calendars = self.calendars.find_by_user(user_id, status=status)

        try:
            generated = [
                self.generate_daily_recommendations(c)
                for c in calendars
                if c.status == 'active'
            ]
            if any(generated):
                self.db.commit()
        except IntegrityError:
            # Another request generated today's entry first.
            self.db.rollback()
            logger.warning(f"Daily practice already generated for user {user_id}")
            calendars = self.calendars.find_by_user(user_id, status=status)

        return [self.to_model(c) for c in calendars]

    def update_milestone(
        self,
        calendar_id: Any,
        milestone_id: Any,
        completed: bool,
        user_id: Any,
    ) -> CalendarModel:
        """
        Mark a milestone complete or incomplete and refresh the readiness score.

        Raises:
            NotFoundException: If the calendar or milestone does not exist.
            UnauthorizedException: If the user does not own the calendar.
        """
        calendar = self._owned_calendar(calendar_id, user_id)
        milestone = self.calendars.get_milestone(calendar.id, milestone_id)
        if milestone is None:
            raise NotFoundException(f"Milestone {milestone_id} not found")

        now = self.clock()
        milestone.completed = completed
        milestone.completed_at = now if completed else None
        calendar.readiness_score = calculate_progress(calendar.milestones)
        calendar.last_updated = now
        self.db.commit()

        logger.info(
            f"Milestone {milestone.id} of calendar {calendar.id} set completed={completed}; "
            f"readiness {calendar.readiness_score}"
        )
        return self.to_model(calendar)

    def complete_daily_practice(
        self,
        calendar_id: Any,
        practice_id: Any,
        practices_done: List[str],
        user_id: Any,
    ) -> DailyPracticeModel:
        calendar = self._owned_calendar(calendar_id, user_id)
        practice = self.calendars.get_practice(calendar.id, practice_id)
        if practice is None:
            raise NotFoundException(f"Daily practice {practice_id} not found")

        practice.completed = True
        practice.practices_done = list(practices_done or [])
        calendar.last_updated = self.clock()
        self.db.commit()

        logger.info(f"Daily practice {practice.id} of calendar {calendar.id} completed")
        return self._to_practice_model(practice)

    def get_timeline(self, calendar_id: Any, user_id: Any) -> TimelineData:
        calendar = self._owned_calendar(calendar_id, user_id)
        now = self.clock()
        upcoming = next_milestone(calendar.milestones)
        recent_practice = list(calendar.daily_practice)[-self.config.timeline_practice_days:]

        return TimelineData(
            days_remaining=days_between(now, calendar.interview_date),
            preparation_days=days_between(calendar.preparation_start_date, calendar.interview_date),
            progress=calculate_progress(calendar.milestones),
            next_milestone=self._to_milestone_model(upcoming) if upcoming is not None else None,
            milestones=[self._to_milestone_model(m) for m in calendar.milestones],
            daily_practice=[self._to_practice_model(p) for p in recent_practice],
            readiness_score=calendar.readiness_score or 0,
        )

    def delete_calendar(self, calendar_id: Any, user_id: Any) -> None:
        calendar = self._owned_calendar(calendar_id, user_id)
        self.calendars.delete(calendar)
        self.db.commit()
        logger.info(f"Deleted calendar {calendar_id} of user {user_id}")

    def to_model(self, calendar: PreparationCalendar) -> CalendarModel:
        return CalendarModel(
            id=safe_str(calendar.id),
            user_id=safe_str(calendar.user_id),
            target_company=calendar.target_company,
            interview_date=safe_datetime_iso(calendar.interview_date),
            role=calendar.role,
            interview_type=calendar.interview_type,
            preparation_start_date=safe_datetime_iso(calendar.preparation_start_date),
            readiness_score=calendar.readiness_score or 0,
            progress=calculate_progress(calendar.milestones),
            days_remaining=days_between(self.clock(), calendar.interview_date),
            status=calendar.status,
            outcome=calendar.outcome,
            notes=calendar.notes,
            last_updated=safe_datetime_iso(calendar.last_updated),
            milestones=[self._to_milestone_model(m) for m in calendar.milestones],
            daily_practice=[self._to_practice_model(p) for p in calendar.daily_practice],
        )

    def _to_milestone_model(self, milestone: CalendarMilestone) -> MilestoneModel:
        return MilestoneModel(
            id=safe_str(milestone.id),
            title=milestone.title,
            description=milestone.description,
            target_date=safe_datetime_iso(milestone.target_date),
            completed=bool(milestone.completed),
            completed_at=safe_datetime_iso(milestone.completed_at),
        )

    def _to_practice_model(self, practice: DailyPractice) -> DailyPracticeModel:
        return DailyPracticeModel(
            id=safe_str(practice.id),
            date=practice.practice_date.isoformat(),
            recommendations=list(practice.recommendations or []),
            completed=bool(practice.completed),
            practices_done=list(practice.practices_done or []),
        )
