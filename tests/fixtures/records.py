"""
Record factories for database-backed tests.

Timestamps are handed out from a fixed clock that advances one minute per
record, so insertion order and "newest first" ordering are deterministic.
"""

import itertools
import uuid
from datetime import datetime, timedelta, timezone

from database.models import Company, Interview, User

BASE_TIME = datetime(2026, 1, 1, 9, 0, tzinfo=timezone.utc)

_ticks = itertools.count(1)


def next_timestamp() -> datetime:
    return BASE_TIME + timedelta(minutes=next(_ticks))


def make_user(session, email=None, **fields) -> User:
    user = User(
        email=email or f"user-{uuid.uuid4().hex[:8]}@example.com",
        first_name=fields.pop("first_name", "Test"),
        last_name=fields.pop("last_name", "User"),
        **fields,
    )
    session.add(user)
    session.commit()
    return user


def make_company(session, name, **fields) -> Company:
    fields.setdefault("created_at", next_timestamp())
    company = Company(name=name, **fields)
    session.add(company)
    session.commit()
    return company


def make_interview(session, user, target_company, interview_type="technical", overall_score=None, **fields) -> Interview:
    fields.setdefault("created_at", next_timestamp())
    interview = Interview(
        user_id=user.id,
        target_company=target_company,
        interview_type=interview_type,
        overall_score=overall_score,
        **fields,
    )
    session.add(interview)
    session.commit()
    return interview
