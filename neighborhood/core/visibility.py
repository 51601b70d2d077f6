"""Visibility Redactor - builds the public view of an identity for a given viewer.

Invariants:
    - PURE: inputs are never mutated; every result is a new frozen object
    - password_hash never appears in a UserView (the type has no such field)
    - Wallet under the target's group is kept only if the viewer is a LEADER
      or shares the target's group; otherwise the group is kept without it
    - redact is idempotent: redact(v, redact(v, r)) == redact(v, r)

Design Decisions:
    - Projection types instead of deleting keys from a cloned dict: a cached or
      shared record can't be altered by a redaction
"""

from dataclasses import replace

from neighborhood.core.domain_types import (
    GroupId, GroupView, RoleName, Requester, UserRecord, UserView,
)


def can_view_wallet(viewer: Requester, target_group_id: GroupId) -> bool:
    return viewer.role == RoleName.LEADER or viewer.group_id == target_group_id


def redact_group(viewer: Requester, group: GroupView) -> GroupView:
    """Group as the viewer may see it."""
    if group.wallet is None or can_view_wallet(viewer, group.id):
        return group
    return replace(group, wallet=None)


def to_public_view(record: UserRecord | UserView) -> UserView:
    """Strip the secret. Unconditional, independent of viewer."""
    return UserView(
        id=record.id,
        email=record.email,
        full_name=record.full_name,
        phone=record.phone,
        address=record.address,
        is_active=record.is_active,
        created_at=record.created_at,
        role=record.role,
        group=record.group,
    )


def redact(viewer: Requester, record: UserRecord | UserView) -> UserView:
    """Public, wallet-filtered view of one identity for this viewer."""
    view = to_public_view(record)
    group = redact_group(viewer, view.group)
    if group is view.group:
        return view
    return replace(view, group=group)


def redact_all(viewer: Requester, records) -> list[UserView]:
    return [redact(viewer, r) for r in records]
