"""Tests for request bodies and the outward identity shape."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from neighborhood.core.domain_types import (
    GroupId, GroupType, GroupView, RoleId, RoleName, RoleView, UserId, UserView,
    WalletId, WalletView,
)
from neighborhood.schemas.group import GroupCreate, GroupUpdate
from neighborhood.schemas.user import (
    LoginRequest, PasswordChange, ProfileUpdate, UserCreate, serialize_group,
    serialize_user,
)


def _view(wallet: WalletView | None) -> UserView:
    group = GroupView(id=GroupId(uuid4()), name="RT 01", type=GroupType.RT, wallet=wallet)
    return UserView(
        id=UserId(uuid4()),
        email="ulfa@rt01.id",
        full_name="Maria Ulfa",
        phone=None,
        address=None,
        is_active=True,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        role=RoleView(id=RoleId(uuid4()), name=RoleName.MEMBER),
        group=group,
    )


class TestUserCreate:
    def test_accepts_camel_case_keys(self):
        group_id = uuid4()
        body = UserCreate.model_validate({
            "email": "warga@rt01.id",
            "fullName": "Warga",
            "roleType": "MEMBER",
            "communityGroupId": str(group_id),
        })
        assert body.full_name == "Warga"
        assert body.role_type == "MEMBER"
        assert body.community_group_id == group_id
        assert body.password is None

    def test_email_is_lowercased_and_stripped(self):
        body = UserCreate(email="  Warga@RT01.ID ", full_name="Warga", role_type="MEMBER")
        assert body.email == "warga@rt01.id"

    def test_rejects_malformed_email(self):
        with pytest.raises(ValidationError):
            UserCreate(email="not-an-email", full_name="Warga", role_type="MEMBER")

    def test_rejects_short_password(self):
        with pytest.raises(ValidationError):
            UserCreate(
                email="warga@rt01.id", full_name="Warga", role_type="MEMBER", password="123",
            )

    def test_rejects_whitespace_full_name(self):
        with pytest.raises(ValidationError):
            UserCreate(email="warga@rt01.id", full_name="   ", role_type="MEMBER")

    def test_role_type_is_not_checked_here(self):
        body = UserCreate(email="warga@rt01.id", full_name="Warga", role_type="MAYOR")
        assert body.role_type == "MAYOR"

    def test_password_limit_counts_utf8_bytes(self):
        body = UserCreate(
            email="warga@rt01.id", full_name="Warga", role_type="MEMBER", password="é" * 36,
        )
        assert len(body.password.encode("utf-8")) == 72
        with pytest.raises(ValidationError):
            UserCreate(
                email="warga@rt01.id", full_name="Warga", role_type="MEMBER",
                password="é" * 40,
            )


class TestProfileAndPassword:
    def test_profile_update_all_optional(self):
        body = ProfileUpdate.model_validate({})
        assert body.model_dump(exclude_none=True) == {}

    def test_password_change_aliases(self):
        body = PasswordChange.model_validate(
            {"currentPassword": "lama", "newPassword": "barubaru"},
        )
        assert body.current_password == "lama"
        assert body.new_password == "barubaru"

    def test_new_password_limit_counts_utf8_bytes(self):
        with pytest.raises(ValidationError):
            PasswordChange(current_password="lama", new_password="é" * 40)

    def test_profile_and_login_emails_are_normalized(self):
        assert ProfileUpdate(email=" Ulfa@RT01.id ").email == "ulfa@rt01.id"
        assert LoginRequest(email=" Ulfa@RT01.id", password="x").email == "ulfa@rt01.id"


class TestGroupSchemas:
    def test_group_create_parses_type(self):
        body = GroupCreate(name=" RT 03 ", type="RW")
        assert body.name == "RT 03"
        assert body.type is GroupType.RW

    def test_group_create_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            GroupCreate(name="RT 03", type="KELURAHAN")

    def test_group_create_rejects_blank_name(self):
        with pytest.raises(ValidationError):
            GroupCreate(name="  ", type="RT")

    def test_group_update_partial(self):
        assert GroupUpdate(name="RT 04").type is None


class TestSerialization:
    def test_serialize_user_has_no_password(self):
        data = serialize_user(_view(None))
        assert "password" not in data
        assert data["fullName"] == "Maria Ulfa"
        assert data["role"]["name"] == "MEMBER"

    def test_redacted_wallet_key_is_omitted(self):
        assert "wallet" not in serialize_group(_view(None).group)

    def test_visible_wallet_is_serialized(self):
        wallet = WalletView(id=WalletId(uuid4()), balance=Decimal("150000"))
        group = serialize_group(_view(wallet).group)
        assert group["wallet"]["balance"] == Decimal("150000")
