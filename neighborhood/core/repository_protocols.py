"""Boundary Protocols - contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Multi-row writes (group + wallet) are atomic inside the implementation

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, but the core functions that
      feed them are never async; services orchestrate the awaits
"""

from typing import Protocol

from neighborhood.core.domain_types import (
    GroupId, GroupType, GroupView, RoleId, RoleName, RoleView, UserId, UserRecord,
)
from neighborhood.core.filter_composer import ComposedQuery


class CredentialVerifier(Protocol):
    """One-way secret hashing. Verification is re-hash-and-compare."""
    def hash(self, secret: str) -> str: ...
    def verify(self, secret: str, hashed: str) -> bool: ...


class RoleRepository(Protocol):
    """Read-only reference data."""
    async def find_by_name(self, name: RoleName) -> RoleView | None: ...


class UserRepository(Protocol):
    """Contract for identity persistence - implemented by shell."""
    async def find_by_id(self, user_id: UserId) -> UserRecord | None: ...
    async def find_by_email(self, email: str) -> UserRecord | None: ...
    async def find_many(
        self, query: ComposedQuery,
    ) -> tuple[list[UserRecord], int]: ...
    async def create(
        self,
        fields: dict,
        role_id: RoleId,
        group_id: GroupId,
        created_by_id: UserId | None,
    ) -> UserRecord: ...
    async def update(self, user_id: UserId, fields: dict) -> UserRecord: ...
    async def count(self, query: ComposedQuery) -> int: ...


class GroupRepository(Protocol):
    """Contract for group + wallet persistence - implemented by shell."""
    async def create_with_wallet(
        self, name: str, group_type: GroupType,
    ) -> GroupView: ...
    async def find_by_id(self, group_id: GroupId) -> GroupView | None: ...
    async def find_all(self, group_type: GroupType | None = None) -> list[GroupView]: ...
    async def update(self, group_id: GroupId, fields: dict) -> GroupView: ...
    async def delete(self, group_id: GroupId) -> None: ...
    async def exists(self, group_id: GroupId) -> bool: ...
    async def count_members(self, group_id: GroupId) -> int: ...
