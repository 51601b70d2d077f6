"""Domain Types - verifies identity wrappers, closed enums and record projections.

Tests:
    - NewType wrappers exist and are callable
    - RoleName and GroupType are closed sets serializing to strings
    - UserView has no password_hash attribute
    - Requester.from_record copies role and group
"""

from dataclasses import fields, FrozenInstanceError
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from neighborhood.core.domain_types import (
    GroupId, GroupType, GroupView, Requester, RoleId, RoleName, RoleView,
    UserId, UserRecord, UserView,
)


def _record() -> UserRecord:
    return UserRecord(
        id=UserId(uuid4()),
        email="ani@example.com",
        full_name="Ani",
        password_hash="$2b$04$hash",
        phone=None,
        address=None,
        is_active=True,
        created_at=datetime.now(timezone.utc),
        role=RoleView(RoleId(uuid4()), RoleName.TREASURER),
        group=GroupView(GroupId(uuid4()), "RT 01", GroupType.RT),
    )


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert UserId(uid) == uid
    assert GroupId(uid) == uid


def test_role_names_are_a_closed_set():
    assert {r.value for r in RoleName} == {
        "ADMIN", "LEADER", "TREASURER", "SECRETARY", "MEMBER",
    }
    with pytest.raises(ValueError):
        RoleName("SUPERUSER")


def test_group_types_serialize_as_strings():
    assert GroupType.RT == "RT"
    assert GroupType("RW") is GroupType.RW


def test_user_view_has_no_password_field():
    assert "password_hash" not in {f.name for f in fields(UserView)}


def test_records_are_frozen():
    record = _record()
    with pytest.raises(FrozenInstanceError):
        record.email = "other@example.com"


def test_requester_from_record_copies_role_and_group():
    record = _record()
    requester = Requester.from_record(record)
    assert requester.id == record.id
    assert requester.role is RoleName.TREASURER
    assert requester.group_id == record.group.id
