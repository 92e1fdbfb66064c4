#!/usr/bin/env python3
"""
Tests for StudyGroupService against the SQLite test database.
"""

import uuid

import pytest

from core.config_loader import BuddyConfig
from web.backend.exceptions import InvalidStateException, NotFoundException
from web.backend.services.study_group_service import StudyGroupService
from tests.fixtures.records import make_user


@pytest.mark.db
class TestCreateGroup:

    def test_creator_is_admin(self, db_session):
        creator = make_user(db_session)
        group = StudyGroupService(db_session).create_group(
            creator.id, "Google Prep", target_company="Google", focus_areas=["graphs", "system design"]
        )

        assert group.creator_id == str(creator.id)
        assert group.member_count == 1
        assert group.max_members == 10
        assert group.available_slots == 9
        assert group.require_approval is True
        assert group.focus_areas == ["graphs", "system design"]
        assert [(m.user_id, m.role) for m in group.members] == [(str(creator.id), "admin")]

    def test_creation_awards_xp(self, db_session):
        creator = make_user(db_session)
        StudyGroupService(db_session).create_group(creator.id, "Amazon LPs")

        db_session.refresh(creator)
        assert creator.xp == 15

    def test_unknown_creator(self, db_session):
        with pytest.raises(NotFoundException):
            StudyGroupService(db_session).create_group(uuid.uuid4(), "Ghost Group")


@pytest.mark.db
class TestJoinGroup:

    def test_join(self, db_session):
        creator = make_user(db_session)
        member = make_user(db_session)
        service = StudyGroupService(db_session)
        group = service.create_group(creator.id, "Stripe Prep", target_company="Stripe")

        joined = service.join_group(uuid.UUID(group.group_id), member.id)

        assert joined.member_count == 2
        roles = {m.user_id: m.role for m in joined.members}
        assert roles[str(member.id)] == "member"
        db_session.refresh(member)
        assert member.xp == 5

    def test_join_twice(self, db_session):
        creator = make_user(db_session)
        member = make_user(db_session)
        service = StudyGroupService(db_session)
        group_id = uuid.UUID(service.create_group(creator.id, "Stripe Prep").group_id)
        service.join_group(group_id, member.id)

        with pytest.raises(InvalidStateException) as exc_info:
            service.join_group(group_id, member.id)
        assert str(exc_info.value) == "Already a member of this group"

    def test_group_full(self, db_session):
        creator = make_user(db_session)
        service = StudyGroupService(db_session)
        group_id = uuid.UUID(service.create_group(creator.id, "Pair", max_members=2).group_id)
        service.join_group(group_id, make_user(db_session).id)

        with pytest.raises(InvalidStateException) as exc_info:
            service.join_group(group_id, make_user(db_session).id)
        assert str(exc_info.value) == "Group is full"

    def test_unknown_group(self, db_session):
        member = make_user(db_session)
        missing = uuid.uuid4()
        with pytest.raises(NotFoundException) as exc_info:
            StudyGroupService(db_session).join_group(missing, member.id)
        assert str(exc_info.value) == f"Study group {missing} not found"


@pytest.mark.db
class TestFindGroups:

    def test_public_groups_only(self, db_session):
        creator = make_user(db_session)
        service = StudyGroupService(db_session)
        service.create_group(creator.id, "Open Google", target_company="Google")
        service.create_group(creator.id, "Secret Google", target_company="Google", is_private=True)
        service.create_group(creator.id, "Open Amazon", target_company="Amazon")

        google = service.find_groups(target_company="Google")
        assert [g.name for g in google] == ["Open Google"]
        assert len(service.find_groups()) == 2

    def test_only_available(self, db_session):
        creator = make_user(db_session)
        service = StudyGroupService(db_session)
        service.create_group(creator.id, "Solo", max_members=1)
        service.create_group(creator.id, "Roomy", max_members=5)

        available = service.find_groups(only_available=True)
        assert [g.name for g in available] == ["Roomy"]

    def test_limit_from_config(self, db_session):
        creator = make_user(db_session)
        service = StudyGroupService(db_session, config=BuddyConfig(group_search_limit=1))
        service.create_group(creator.id, "First")
        service.create_group(creator.id, "Second")

        assert len(service.find_groups()) == 1
        assert len(service.find_groups(limit=5)) == 2

    def test_user_groups(self, db_session):
        creator = make_user(db_session)
        member = make_user(db_session)
        service = StudyGroupService(db_session)
        joined = service.create_group(creator.id, "Joined")
        service.create_group(creator.id, "Not Joined")
        service.join_group(uuid.UUID(joined.group_id), member.id)

        assert [g.name for g in service.get_user_groups(member.id)] == ["Joined"]
        assert len(service.get_user_groups(creator.id)) == 2
