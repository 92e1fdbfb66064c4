#!/usr/bin/env python3
"""
Tests for interview, company, user and buddy match repositories.

These tests run against the in-memory SQLite database - marked with @pytest.mark.db
"""

import pytest
from sqlalchemy.exc import IntegrityError

from database.repositories import (
    BuddyMatchRepository,
    CompanyRepository,
    InterviewRepository,
    UserRepository,
)
from tests.fixtures.records import make_company, make_interview, make_user


@pytest.mark.db
class TestInterviewRepository:

    def test_find_by_user_newest_first_with_limit(self, db_session):
        user = make_user(db_session)
        first = make_interview(db_session, user, "Google", overall_score=60)
        second = make_interview(db_session, user, "Google", overall_score=70)
        third = make_interview(db_session, user, "Amazon", overall_score=80)

        repo = InterviewRepository(db_session)
        assert [i.id for i in repo.find_by_user(user.id)] == [third.id, second.id, first.id]
        assert [i.id for i in repo.find_by_user(user.id, limit=2)] == [third.id, second.id]

    def test_find_by_companies_excludes_user(self, db_session):
        me = make_user(db_session)
        other = make_user(db_session)
        make_interview(db_session, me, "Google", overall_score=60)
        theirs = make_interview(db_session, other, "Google", overall_score=70)
        make_interview(db_session, other, "Stripe", overall_score=70)

        repo = InterviewRepository(db_session)
        found = repo.find_by_companies(["Google", "Amazon"], exclude_user_id=me.id)
        assert [i.id for i in found] == [theirs.id]
        assert repo.find_by_companies([], exclude_user_id=me.id) == []


@pytest.mark.db
class TestCompanyRepository:

    def test_get_all_in_insertion_order(self, db_session):
        make_company(db_session, "Stripe")
        make_company(db_session, "Amazon")
        make_company(db_session, "Google")

        names = [c.name for c in CompanyRepository(db_session).get_all()]
        assert names == ["Stripe", "Amazon", "Google"]

    def test_upsert(self, db_session):
        repo = CompanyRepository(db_session)
        created = repo.upsert("Google", {"hiring_bar_technical": 80})
        db_session.commit()
        assert created.hiring_bar_behavioral == 65

        updated = repo.upsert("Google", {"acceptance_rate": 20})
        db_session.commit()
        assert updated.id == created.id
        assert updated.hiring_bar_technical == 80
        assert updated.acceptance_rate == 20
        assert repo.get_by_name("Unknown") is None


@pytest.mark.db
class TestUserRepository:

    def test_lookup_and_xp(self, db_session):
        repo = UserRepository(db_session)
        user = repo.create("ada@example.com", first_name="Ada", last_name="Lovelace")
        db_session.commit()

        assert repo.get_by_id(user.id) is user
        assert user.display_name == "Ada Lovelace"
        assert repo.increment_xp(user.id, 7) == 1
        db_session.commit()
        db_session.refresh(user)
        assert user.xp == 7


@pytest.mark.db
class TestBuddyMatchRepository:

    def test_find_between_either_order(self, db_session):
        a = make_user(db_session)
        b = make_user(db_session)
        repo = BuddyMatchRepository(db_session)
        match = repo.create(a.id, b.id, initiated_by=a.id)
        db_session.commit()

        assert repo.find_between(b.id, a.id).id == match.id
        assert repo.connected_user_ids(b.id) == {a.id}

    def test_one_match_per_unordered_pair(self, db_session):
        a = make_user(db_session)
        b = make_user(db_session)
        repo = BuddyMatchRepository(db_session)
        repo.create(a.id, b.id)
        db_session.commit()

        with pytest.raises(IntegrityError):
            repo.create(b.id, a.id)
        db_session.rollback()

    def test_find_for_user_by_status(self, db_session):
        a = make_user(db_session)
        b = make_user(db_session)
        c = make_user(db_session)
        repo = BuddyMatchRepository(db_session)
        repo.create(a.id, b.id, status='accepted')
        repo.create(c.id, a.id, status='pending')
        db_session.commit()

        assert len(repo.find_for_user(a.id, status='accepted')) == 1
        assert len(repo.find_for_user(a.id, status=None)) == 2
        assert repo.connected_user_ids(a.id) == {b.id, c.id}
