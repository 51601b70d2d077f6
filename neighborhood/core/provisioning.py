"""Provisioning Rules - pure cross-field decisions taken before any identity write.

Invariants:
    - PURE: the service does the store lookups and hashing around these calls
    - Target group comes from the requester's scope strategy (ADMIN forced to own group,
      LEADER must name one)
    - Role names are parsed against the closed RoleName set; unknown -> ValidationError
    - Email uniqueness covers active AND inactive identities; on update the
      identity itself is excluded
    - An omitted password falls back to the configured default secret
"""

from dataclasses import dataclass

from neighborhood.core.domain_types import GroupId, RoleName, Requester, UserId
from neighborhood.core.errors import ConflictError, ValidationError
from neighborhood.core.scope_resolver import resolve_target_group


@dataclass(frozen=True)
class NewUserDraft:
    """Caller-supplied fields for a new identity (shape already validated)."""
    email: str
    full_name: str
    role_name: str
    password: str | None = None
    phone: str | None = None
    address: str | None = None
    community_group_id: GroupId | None = None


@dataclass(frozen=True)
class UserPlan:
    """Everything needed for the single atomic insert, except the hash."""
    email: str
    full_name: str
    phone: str | None
    address: str | None
    role_name: RoleName
    group_id: GroupId
    secret: str
    created_by_id: UserId

    def __repr__(self) -> str:
        return f"UserPlan(email={self.email!r}, role={self.role_name.value}, group={self.group_id})"


def parse_role_name(raw: str) -> RoleName:
    try:
        return RoleName(raw)
    except ValueError:
        raise ValidationError(f"Role type '{raw}' is not valid", field="roleType")


def choose_secret(password: str | None, default_password: str) -> str:
    return password if password else default_password


def ensure_email_available(
    email: str, existing_id: UserId | None, self_id: UserId | None = None,
) -> None:
    """Raise ConflictError when the email belongs to another identity."""
    if existing_id is not None and existing_id != self_id:
        raise ConflictError(f"Email '{email}' is already registered")


def plan_user_creation(
    requester: Requester, draft: NewUserDraft, default_password: str,
) -> UserPlan:
    """Resolve group, role and secret for a new identity."""
    group_id = resolve_target_group(
        requester.role, requester.group_id, draft.community_group_id,
    )
    return UserPlan(
        email=draft.email,
        full_name=draft.full_name,
        phone=draft.phone,
        address=draft.address,
        role_name=parse_role_name(draft.role_name),
        group_id=group_id,
        secret=choose_secret(draft.password, default_password),
        created_by_id=requester.id,
    )
