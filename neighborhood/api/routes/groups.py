"""Group Routes - community group CRUD and member assignment.

Invariants:
    - POST creates group + wallet atomically (service -> store transaction)
    - Wallets in responses follow the viewer rule (LEADER or same group)
    - DELETE of a group with members -> 409
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from neighborhood.api.dependencies import get_group_service, get_requester
from neighborhood.core.domain_types import GroupId, GroupType, Requester, UserId
from neighborhood.core.visibility import redact_group
from neighborhood.schemas.group import GroupCreate, GroupUpdate
from neighborhood.schemas.user import serialize_group, serialize_user
from neighborhood.services.group_service import GroupService

router = APIRouter(prefix="/api/v1/groups", tags=["groups"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_group(
    body: GroupCreate,
    requester: Requester = Depends(get_requester),
    service: GroupService = Depends(get_group_service),
):
    group = await service.create(body.name, body.type)
    return serialize_group(redact_group(requester, group))


@router.get("")
async def list_groups(
    group_type: GroupType | None = Query(None, alias="type"),
    requester: Requester = Depends(get_requester),
    service: GroupService = Depends(get_group_service),
):
    groups = await service.list(requester, group_type)
    return {"data": [serialize_group(g) for g in groups]}


@router.get("/{group_id}")
async def get_group(
    group_id: UUID,
    requester: Requester = Depends(get_requester),
    service: GroupService = Depends(get_group_service),
):
    return serialize_group(await service.get(requester, GroupId(group_id)))


@router.put("/{group_id}")
async def update_group(
    group_id: UUID,
    body: GroupUpdate,
    requester: Requester = Depends(get_requester),
    service: GroupService = Depends(get_group_service),
):
    group = await service.update(
        requester, GroupId(group_id), name=body.name, group_type=body.type,
    )
    return serialize_group(group)


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_group(
    group_id: UUID,
    requester: Requester = Depends(get_requester),
    service: GroupService = Depends(get_group_service),
):
    await service.delete(requester, GroupId(group_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{group_id}/members/{user_id}")
async def assign_member(
    group_id: UUID,
    user_id: UUID,
    requester: Requester = Depends(get_requester),
    service: GroupService = Depends(get_group_service),
):
    member = await service.assign_member(requester, GroupId(group_id), UserId(user_id))
    return serialize_user(member)
