"""Group Service - wallet visibility, deletion rules and member assignment."""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from neighborhood.core.domain_types import GroupId, GroupType, UserId
from neighborhood.core.errors import ConflictError, ResourceNotFoundError
from neighborhood.models import CommunityGroup, Wallet


async def test_list_hides_other_groups_wallets_from_admin(group_service, requesters, groups):
    listed = {g.id: g for g in await group_service.list(requesters.admin_a)}
    assert listed[groups.a.id].wallet is not None
    assert listed[groups.b.id].wallet is None
    assert listed[groups.rw.id].wallet is None


async def test_list_shows_every_wallet_to_leader(group_service, requesters):
    listed = await group_service.list(requesters.leader)
    assert len(listed) == 3
    assert all(g.wallet is not None for g in listed)


async def test_get_unknown_group_is_not_found(group_service, requesters):
    with pytest.raises(ResourceNotFoundError):
        await group_service.get(requesters.leader, GroupId(uuid4()))


async def test_update_unknown_group_is_not_found(group_service, requesters):
    with pytest.raises(ResourceNotFoundError):
        await group_service.update(requesters.leader, GroupId(uuid4()), name="X")


async def test_delete_group_with_members_conflicts(group_service, requesters, groups):
    with pytest.raises(ConflictError):
        await group_service.delete(requesters.leader, GroupId(groups.a.id))


async def test_delete_empty_group_removes_wallet_too(group_service, requesters, test_db):
    group = await group_service.create("Seksi Keamanan", GroupType.OTHER)
    await group_service.delete(requesters.leader, group.id)

    assert await test_db.scalar(
        select(func.count()).select_from(CommunityGroup).where(CommunityGroup.id == group.id),
    ) == 0
    assert await test_db.scalar(
        select(func.count()).select_from(Wallet).where(Wallet.group_id == group.id),
    ) == 0


async def test_admin_cannot_rename_other_group(group_service, group_store, requesters, groups):
    with pytest.raises(ResourceNotFoundError):
        await group_service.update(requesters.admin_a, GroupId(groups.b.id), name="Diambil alih")
    assert (await group_store.find_by_id(GroupId(groups.b.id))).name == "RT 02"


async def test_admin_renames_own_group(group_service, requesters, groups):
    updated = await group_service.update(
        requesters.admin_a, GroupId(groups.a.id), name="RT 01 Baru",
    )
    assert updated.name == "RT 01 Baru"
    assert updated.wallet is not None


async def test_admin_cannot_delete_other_empty_group(group_service, group_store, requesters):
    outside = await group_service.create("Seksi Kebersihan", GroupType.OTHER)
    with pytest.raises(ResourceNotFoundError):
        await group_service.delete(requesters.admin_a, outside.id)
    assert await group_store.exists(outside.id)


async def test_leader_moves_member_between_groups(group_service, requesters, people, groups):
    moved = await group_service.assign_member(
        requesters.leader, GroupId(groups.a.id), UserId(people.maria_b.id),
    )
    assert moved.group.id == groups.a.id


async def test_admin_cannot_reach_member_of_other_group(group_service, requesters, people, groups):
    with pytest.raises(ResourceNotFoundError):
        await group_service.assign_member(
            requesters.admin_a, GroupId(groups.a.id), UserId(people.maria_b.id),
        )


async def test_admin_target_group_is_forced_to_own(group_service, requesters, people, groups):
    member = await group_service.assign_member(
        requesters.admin_a, GroupId(groups.b.id), UserId(people.maria_a.id),
    )
    assert member.group.id == groups.a.id
