#!/usr/bin/env python3
"""
Tests for CalendarService with a fixed clock.
"""

import uuid
from datetime import date, datetime, timedelta, timezone

import pytest

from database.models import DailyPractice
from web.backend.exceptions import InvalidStateException, NotFoundException, UnauthorizedException
from web.backend.services.calendar_service import CalendarService
from tests.fixtures.records import make_user

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
INTERVIEW = NOW + timedelta(days=40)


def service_at(db_session, now=NOW):
    return CalendarService(db_session, clock=lambda: now)


@pytest.fixture
def owner(db_session):
    return make_user(db_session)


@pytest.fixture
def calendar(db_session, owner):
    return service_at(db_session).create_calendar(owner.id, "Google", INTERVIEW, "Software Engineer")


@pytest.mark.db
class TestCreateCalendar:

    def test_milestones_and_first_practice(self, calendar, owner):
        assert calendar.user_id == str(owner.id)
        assert calendar.interview_type == "technical"
        assert calendar.days_remaining == 40
        assert calendar.readiness_score == 0
        assert calendar.progress == 0
        assert [m.title for m in calendar.milestones] == [
            "Foundation Building",
            "Practice Phase",
            "Mock Interviews",
            "Interview Day Prep",
        ]
        assert calendar.milestones[2].description == "Complete 5 Google-specific mock interviews"
        assert calendar.milestones[3].target_date.startswith("2026-04-09")

        assert len(calendar.daily_practice) == 1
        practice = calendar.daily_practice[0]
        assert practice.date == "2026-03-01"
        assert practice.recommendations[0] == "Complete 1 practice interview"

    def test_short_notice(self, db_session, owner):
        calendar = service_at(db_session).create_calendar(
            owner.id, "Stripe", NOW + timedelta(days=10), "Backend Engineer", interview_type="mixed"
        )

        assert [m.title for m in calendar.milestones] == ["Focused Practice", "Final Review", "Interview Day Prep"]
        assert calendar.daily_practice[0].recommendations[1] == "Review Stripe interview questions"

    def test_past_interview_date(self, db_session, owner):
        with pytest.raises(InvalidStateException) as exc_info:
            service_at(db_session).create_calendar(owner.id, "Google", NOW - timedelta(days=1), "SWE")
        assert str(exc_info.value) == "Interview date must be in the future"

    def test_unknown_user(self, db_session):
        with pytest.raises(NotFoundException):
            service_at(db_session).create_calendar(uuid.uuid4(), "Google", INTERVIEW, "SWE")


@pytest.mark.db
class TestListCalendars:

    def test_same_day_adds_no_practice(self, db_session, owner, calendar):
        calendars = service_at(db_session).list_calendars(owner.id)

        assert len(calendars) == 1
        assert len(calendars[0].daily_practice) == 1

    def test_next_day_adds_practice(self, db_session, owner, calendar):
        calendars = service_at(db_session, NOW + timedelta(days=1)).list_calendars(owner.id)

        practice = calendars[0].daily_practice
        assert [p.date for p in practice] == ["2026-03-01", "2026-03-02"]
        assert calendars[0].days_remaining == 39

    def test_soonest_interview_first(self, db_session, owner, calendar):
        service_at(db_session).create_calendar(owner.id, "Amazon", NOW + timedelta(days=5), "SDE")

        calendars = service_at(db_session).list_calendars(owner.id)
        assert [c.target_company for c in calendars] == ["Amazon", "Google"]

    def test_practice_generated_concurrently(self, db_session, session_factory, owner, calendar):
        service = service_at(db_session, NOW + timedelta(days=1))
        load_calendars = service.calendars.find_by_user
        calls = []

        def load_then_race(*args, **kwargs):
            calendars = load_calendars(*args, **kwargs)
            if not calls:
                for c in calendars:
                    list(c.daily_practice)
                other = session_factory()
                try:
                    other.add(DailyPractice(
                        calendar_id=uuid.UUID(calendar.id),
                        practice_date=date(2026, 3, 2),
                        recommendations=["Complete 1 practice interview"],
                    ))
                    other.commit()
                finally:
                    other.close()
            calls.append(calendars)
            return calendars

        service.calendars.find_by_user = load_then_race
        calendars = service.list_calendars(owner.id)

        assert len(calls) == 2
        assert [p.date for p in calendars[0].daily_practice] == ["2026-03-01", "2026-03-02"]
        assert db_session.query(DailyPractice).count() == 2

    def test_other_users_calendars_hidden(self, db_session, calendar):
        stranger = make_user(db_session)
        assert service_at(db_session).list_calendars(stranger.id) == []


@pytest.mark.db
class TestMilestonesAndPractice:

    def test_complete_and_reopen_milestone(self, db_session, owner, calendar):
        service = service_at(db_session)
        calendar_id = uuid.UUID(calendar.id)
        milestone_id = uuid.UUID(calendar.milestones[0].id)

        updated = service.update_milestone(calendar_id, milestone_id, True, owner.id)
        assert updated.readiness_score == 25
        assert updated.progress == 25
        assert updated.milestones[0].completed is True
        assert updated.milestones[0].completed_at.startswith("2026-03-01T12:00")

        reopened = service.update_milestone(calendar_id, milestone_id, False, owner.id)
        assert reopened.readiness_score == 0
        assert reopened.milestones[0].completed_at is None

    def test_milestone_of_another_calendar(self, db_session, owner, calendar):
        other = service_at(db_session).create_calendar(owner.id, "Amazon", INTERVIEW, "SDE")

        with pytest.raises(NotFoundException):
            service_at(db_session).update_milestone(
                uuid.UUID(calendar.id), uuid.UUID(other.milestones[0].id), True, owner.id
            )

    def test_only_owner_can_update(self, db_session, calendar):
        stranger = make_user(db_session)

        with pytest.raises(UnauthorizedException):
            service_at(db_session).update_milestone(
                uuid.UUID(calendar.id), uuid.UUID(calendar.milestones[0].id), True, stranger.id
            )

    def test_complete_daily_practice(self, db_session, owner, calendar):
        practice = service_at(db_session).complete_daily_practice(
            uuid.UUID(calendar.id),
            uuid.UUID(calendar.daily_practice[0].id),
            ["Complete 1 practice interview"],
            owner.id,
        )

        assert practice.completed is True
        assert practice.practices_done == ["Complete 1 practice interview"]


@pytest.mark.db
class TestTimelineAndDelete:

    def test_timeline(self, db_session, owner, calendar):
        service = service_at(db_session, NOW + timedelta(days=2))
        calendar_id = uuid.UUID(calendar.id)
        service.update_milestone(calendar_id, uuid.UUID(calendar.milestones[0].id), True, owner.id)

        timeline = service.get_timeline(calendar_id, owner.id)

        assert timeline.days_remaining == 38
        assert timeline.preparation_days == 40
        assert timeline.progress == 25
        assert timeline.readiness_score == 25
        assert timeline.next_milestone.title == "Practice Phase"
        assert len(timeline.milestones) == 4
        assert len(timeline.daily_practice) == 1

    def test_timeline_requires_owner(self, db_session, calendar):
        stranger = make_user(db_session)
        with pytest.raises(UnauthorizedException):
            service_at(db_session).get_timeline(uuid.UUID(calendar.id), stranger.id)

    def test_delete(self, db_session, owner, calendar):
        service = service_at(db_session)
        calendar_id = uuid.UUID(calendar.id)

        service.delete_calendar(calendar_id, owner.id)

        assert service.list_calendars(owner.id) == []
        with pytest.raises(NotFoundException):
            service.get_timeline(calendar_id, owner.id)
