"""User Schemas - request bodies for identity endpoints and the outward identity shape.

Invariants:
    - roleType is a free string here; the closed-set check happens in core/provisioning
    - Emails are trimmed and lowercased before the pattern check runs
    - New passwords fit bcrypt's 72-byte input limit once UTF-8 encoded
    - serialize_user never emits a password field (UserView has none)
    - group.wallet key is omitted entirely when redacted, never sent as null
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from neighborhood.core.domain_types import GroupView, UserView
from neighborhood.core.pagination import PageMeta

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
MAX_SECRET_BYTES = 72


def _normalize_email(v):
    return v.strip().lower() if isinstance(v, str) else v


def _check_secret_bytes(v: str | None) -> str | None:
    if v is not None and len(v.encode("utf-8")) > MAX_SECRET_BYTES:
        raise ValueError(f"password must be at most {MAX_SECRET_BYTES} bytes")
    return v


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserCreate(CamelModel):
    """Identity creation by an ADMIN or LEADER."""
    email: str = Field(pattern=EMAIL_PATTERN, max_length=255)
    full_name: str = Field(min_length=1, max_length=150)
    role_type: str = Field(min_length=1, max_length=20)
    password: str | None = Field(None, min_length=6, max_length=72)
    phone: str | None = Field(None, max_length=30)
    address: str | None = Field(None, max_length=1000)
    community_group_id: UUID | None = None

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v)

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, v: str | None) -> str | None:
        return _check_secret_bytes(v)

    @field_validator("full_name")
    @classmethod
    def strip_full_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("fullName cannot be empty or whitespace")
        return v


class ProfileUpdate(CamelModel):
    """Self-service profile edit; absent fields stay unchanged."""
    full_name: str | None = Field(None, min_length=1, max_length=150)
    email: str | None = Field(None, pattern=EMAIL_PATTERN, max_length=255)
    phone: str | None = Field(None, max_length=30)
    address: str | None = Field(None, max_length=1000)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v)


class PasswordChange(CamelModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6, max_length=72)

    @field_validator("new_password")
    @classmethod
    def check_password_bytes(cls, v: str) -> str:
        return _check_secret_bytes(v)


class LoginRequest(CamelModel):
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=1)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v)


# --- Outward representation ---------------------------------------------------

def serialize_group(group: GroupView) -> dict:
    data = {"id": group.id, "name": group.name, "type": group.type.value}
    if group.wallet is not None:
        data["wallet"] = {"id": group.wallet.id, "balance": group.wallet.balance}
    return data


def serialize_user(user: UserView) -> dict:
    return {
        "id": user.id,
        "email": user.email,
        "fullName": user.full_name,
        "phone": user.phone,
        "address": user.address,
        "role": {"id": user.role.id, "name": user.role.name.value},
        "group": serialize_group(user.group),
        "isActive": user.is_active,
        "createdAt": user.created_at,
    }


def serialize_page(users: list[UserView], meta: PageMeta) -> dict:
    return {"data": [serialize_user(u) for u in users], "meta": meta.to_dict()}
