"""Group Service - group lifecycle, wallet visibility and member assignment.

Invariants:
    - create() delegates to the store's single-transaction group + wallet write
    - Group reads pass through redact_group: the wallet is visible to LEADERs
      and to members of that group only
    - A group with members can't be deleted (ConflictError); its wallet goes with it
    - update/delete only touch groups inside the requester's scope; anything
      else reads as not found
    - assign_member() lands the identity in the requester's permitted target group,
      and only identities inside the requester's scope can be moved
"""

import logging

from neighborhood.core.domain_types import (
    GroupId, GroupType, GroupView, Requester, UserId, UserView,
)
from neighborhood.core.errors import ConflictError, ResourceNotFoundError
from neighborhood.core.repository_protocols import GroupRepository, UserRepository
from neighborhood.core.scope_resolver import resolve_scope, resolve_target_group
from neighborhood.core.visibility import redact, redact_group

logger = logging.getLogger(__name__)


class GroupService:
    def __init__(self, groups: GroupRepository, users: UserRepository):
        self.groups = groups
        self.users = users

    async def create(self, name: str, group_type: GroupType) -> GroupView:
        group = await self.groups.create_with_wallet(name, group_type)
        logger.info("Group created with wallet", extra={"group_id": group.id})
        return group

    async def list(
        self, requester: Requester, group_type: GroupType | None = None,
    ) -> list[GroupView]:
        groups = await self.groups.find_all(group_type)
        return [redact_group(requester, g) for g in groups]

    async def get(self, requester: Requester, group_id: GroupId) -> GroupView:
        group = await self.groups.find_by_id(group_id)
        if group is None:
            raise ResourceNotFoundError("CommunityGroup", str(group_id))
        return redact_group(requester, group)

    def _ensure_in_reach(self, requester: Requester, group_id: GroupId) -> None:
        scope = resolve_scope(requester.role, requester.group_id)
        if not scope.is_unconstrained and group_id != scope.group_id:
            raise ResourceNotFoundError("CommunityGroup", str(group_id))

    async def update(
        self,
        requester: Requester,
        group_id: GroupId,
        name: str | None = None,
        group_type: GroupType | None = None,
    ) -> GroupView:
        self._ensure_in_reach(requester, group_id)
        group = await self.groups.update(group_id, {"name": name, "type": group_type})
        if group is None:
            raise ResourceNotFoundError("CommunityGroup", str(group_id))
        return redact_group(requester, group)

    async def delete(self, requester: Requester, group_id: GroupId) -> None:
        self._ensure_in_reach(requester, group_id)
        if not await self.groups.exists(group_id):
            raise ResourceNotFoundError("CommunityGroup", str(group_id))
        members = await self.groups.count_members(group_id)
        if members:
            raise ConflictError(
                f"Community group still has {members} member(s); move them first",
            )
        await self.groups.delete(group_id)
        logger.info("Group deleted", extra={"group_id": group_id})

    async def assign_member(
        self, requester: Requester, group_id: GroupId, user_id: UserId,
    ) -> UserView:
        """Move an identity into a group within the requester's reach."""
        target = resolve_target_group(requester.role, requester.group_id, group_id)
        if not await self.groups.exists(target):
            raise ResourceNotFoundError("CommunityGroup", str(target))

        scope = resolve_scope(requester.role, requester.group_id)
        record = await self.users.find_by_id(user_id)
        if record is None or (
            not scope.is_unconstrained and record.group_id != scope.group_id
        ):
            raise ResourceNotFoundError("User", str(user_id))

        updated = await self.users.update(user_id, {"community_group_id": target})
        logger.info(
            "Member assigned",
            extra={"user_id": user_id, "group_id": target, "requester_id": requester.id},
        )
        return redact(requester, updated)
