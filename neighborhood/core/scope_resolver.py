"""Scope Resolver - derives the group-visibility constraint a requester may query with.

Invariants:
    - PURE: no IO, no async, no side effects
    - ADMIN scope is always exactly the requester's own group, whatever group was asked for
    - LEADER scope is the asked-for group, or unconstrained when none was asked for
    - Any role without an explicit strategy falls back to the self-group strategy
    - The same strategy decides which group a new or moved identity lands in

Design Decisions:
    - Closed registry of strategy objects keyed by RoleName instead of if/elif chains:
      a new role is one registry entry
    - GroupScope.group_id None means "all groups"; there is no always-false scope
"""

from dataclasses import dataclass
from typing import Protocol

from neighborhood.core.domain_types import GroupId, RoleName
from neighborhood.core.errors import ValidationError


@dataclass(frozen=True)
class GroupScope:
    """Effective group constraint. None = unconstrained."""
    group_id: GroupId | None = None

    @property
    def is_unconstrained(self) -> bool:
        return self.group_id is None


class ScopeStrategy(Protocol):
    """Policy variant for one family of roles."""

    def scope(
        self, requester_group_id: GroupId, requested_group_id: GroupId | None,
    ) -> GroupScope: ...

    def target_group(
        self, requester_group_id: GroupId, requested_group_id: GroupId | None,
    ) -> GroupId: ...


class SelfGroupScope:
    """Requester is confined to its own group. Caller input is ignored."""

    def scope(
        self, requester_group_id: GroupId, requested_group_id: GroupId | None,
    ) -> GroupScope:
        return GroupScope(requester_group_id)

    def target_group(
        self, requester_group_id: GroupId, requested_group_id: GroupId | None,
    ) -> GroupId:
        return requester_group_id


class CrossGroupScope:
    """Requester sees every group, optionally narrowed to one."""

    def scope(
        self, requester_group_id: GroupId, requested_group_id: GroupId | None,
    ) -> GroupScope:
        return GroupScope(requested_group_id)

    def target_group(
        self, requester_group_id: GroupId, requested_group_id: GroupId | None,
    ) -> GroupId:
        # no implicit default group for cross-group roles
        if requested_group_id is None:
            raise ValidationError(
                "communityGroupId is required for LEADER requests",
                field="communityGroupId",
            )
        return requested_group_id


SELF_GROUP = SelfGroupScope()
CROSS_GROUP = CrossGroupScope()

SCOPE_STRATEGIES: dict[RoleName, ScopeStrategy] = {
    RoleName.ADMIN: SELF_GROUP,
    RoleName.LEADER: CROSS_GROUP,
}


def strategy_for(role: RoleName) -> ScopeStrategy:
    """Strategy for a role; unknown roles get the most restrictive one."""
    return SCOPE_STRATEGIES.get(role, SELF_GROUP)


def resolve_scope(
    requester_role: RoleName,
    requester_group_id: GroupId,
    requested_group_id: GroupId | None = None,
) -> GroupScope:
    """Effective group constraint for a list query."""
    return strategy_for(requester_role).scope(requester_group_id, requested_group_id)


def resolve_target_group(
    requester_role: RoleName,
    requester_group_id: GroupId,
    requested_group_id: GroupId | None = None,
) -> GroupId:
    """Group a write on the requester's behalf lands in. Raises ValidationError."""
    return strategy_for(requester_role).target_group(
        requester_group_id, requested_group_id,
    )
