"""Scope Resolver - tests for the pure group-scope decision.

Tests cover:
    - ADMIN scope is always its own group, whatever was asked for
    - LEADER scope is the asked-for group, or unconstrained
    - Roles without a strategy fall back to self-group scope
    - resolve_target_group forces ADMIN and requires a group from LEADER
"""

from uuid import uuid4

import pytest

from neighborhood.core.domain_types import GroupId, RoleName
from neighborhood.core.errors import ValidationError
from neighborhood.core.scope_resolver import (
    GroupScope, resolve_scope, resolve_target_group, strategy_for, SELF_GROUP,
)

OWN = GroupId(uuid4())
OTHER = GroupId(uuid4())


# ─── resolve_scope ───────────────────────────────────────────────

@pytest.mark.parametrize("requested", [None, OWN, OTHER])
def test_admin_scope_is_forced_to_own_group(requested):
    assert resolve_scope(RoleName.ADMIN, OWN, requested) == GroupScope(OWN)


def test_leader_without_filter_is_unconstrained():
    scope = resolve_scope(RoleName.LEADER, OWN, None)
    assert scope.is_unconstrained
    assert scope.group_id is None


def test_leader_with_filter_gets_exactly_that_group():
    assert resolve_scope(RoleName.LEADER, OWN, OTHER) == GroupScope(OTHER)


@pytest.mark.parametrize(
    "role", [RoleName.TREASURER, RoleName.SECRETARY, RoleName.MEMBER],
)
def test_other_roles_default_to_self_group(role):
    assert strategy_for(role) is SELF_GROUP
    assert resolve_scope(role, OWN, OTHER) == GroupScope(OWN)
    assert resolve_scope(role, OWN, None) == GroupScope(OWN)


# ─── resolve_target_group ────────────────────────────────────────

@pytest.mark.parametrize("requested", [None, OWN, OTHER])
def test_admin_target_group_ignores_caller_input(requested):
    assert resolve_target_group(RoleName.ADMIN, OWN, requested) == OWN


def test_leader_target_group_requires_explicit_group():
    with pytest.raises(ValidationError) as exc:
        resolve_target_group(RoleName.LEADER, OWN, None)
    assert exc.value.field == "communityGroupId"
    assert exc.value.http_status == 400


def test_leader_target_group_uses_supplied_group():
    assert resolve_target_group(RoleName.LEADER, OWN, OTHER) == OTHER
