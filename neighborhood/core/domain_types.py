"""Domain Types - identity types, closed enumerations and immutable records.

Invariants:
    - UserId, GroupId, RoleId, WalletId wrap UUIDs; never use bare UUID in domain logic
    - RoleName and GroupType are closed sets; unknown strings never become members
    - UserRecord is the only type that carries password_hash; it never leaves the core
    - All records are frozen dataclasses (no in-place mutation after the store read)

Design Decisions:
    - NewType over wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Frozen dataclasses as the store/core contract: the ORM stays in infrastructure/
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
GroupId = NewType("GroupId", UUID)
RoleId = NewType("RoleId", UUID)
WalletId = NewType("WalletId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class RoleName(str, Enum):
    """System roles. ADMIN is confined to one group, LEADER sees all groups."""
    ADMIN = "ADMIN"
    LEADER = "LEADER"
    TREASURER = "TREASURER"
    SECRETARY = "SECRETARY"
    MEMBER = "MEMBER"


class GroupType(str, Enum):
    """Group tier. RT is the sub-level unit nested under an RW."""
    RT = "RT"
    RW = "RW"
    OTHER = "OTHER"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class WalletView:
    id: WalletId
    balance: Decimal


@dataclass(frozen=True)
class GroupView:
    """Group as seen from outside; wallet is None when redacted or not loaded."""
    id: GroupId
    name: str
    type: GroupType
    wallet: WalletView | None = None


@dataclass(frozen=True)
class RoleView:
    id: RoleId
    name: RoleName


@dataclass(frozen=True)
class UserRecord:
    """Full identity row as read from the store, including the secret hash."""
    id: UserId
    email: str
    full_name: str
    password_hash: str
    phone: str | None
    address: str | None
    is_active: bool
    created_at: datetime
    role: RoleView
    group: GroupView
    created_by_id: UserId | None = None

    @property
    def group_id(self) -> GroupId:
        return self.group.id


@dataclass(frozen=True)
class UserView:
    """Public projection of an identity. Has no password_hash field at all."""
    id: UserId
    email: str
    full_name: str
    phone: str | None
    address: str | None
    is_active: bool
    created_at: datetime
    role: RoleView
    group: GroupView

    @property
    def group_id(self) -> GroupId:
        return self.group.id


@dataclass(frozen=True)
class Requester:
    """The authenticated caller on whose behalf a request runs."""
    id: UserId
    role: RoleName
    group_id: GroupId

    @classmethod
    def from_record(cls, record: UserRecord) -> "Requester":
        return cls(id=record.id, role=record.role.name, group_id=record.group_id)
