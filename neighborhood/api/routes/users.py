"""User Routes - identity provisioning, scoped listing and self-service profile.

Invariants:
    - Handlers only translate HTTP <-> service calls; no scoping logic here
    - Listing query params never cause a 4xx: bad page/limit fall back to defaults
    - Every identity in a response went through serialize_user (no password field)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from neighborhood.api.dependencies import get_requester, get_user_service
from neighborhood.core.domain_types import GroupId, Requester, UserId
from neighborhood.core.provisioning import NewUserDraft
from neighborhood.schemas.user import (
    PasswordChange, ProfileUpdate, UserCreate, serialize_page, serialize_user,
)
from neighborhood.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/users", tags=["users"])


def _as_int(raw: str | None) -> int | None:
    try:
        return int(raw) if raw is not None else None
    except ValueError:
        return None


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate,
    requester: Requester = Depends(get_requester),
    service: UserService = Depends(get_user_service),
):
    """Create an identity (ADMIN: own group only, LEADER: group required)."""
    draft = NewUserDraft(
        email=body.email,
        full_name=body.full_name,
        role_name=body.role_type,
        password=body.password,
        phone=body.phone,
        address=body.address,
        community_group_id=(
            GroupId(body.community_group_id) if body.community_group_id else None
        ),
    )
    return serialize_user(await service.create(requester, draft))


@router.get("")
async def list_users(
    search: str | None = Query(None),
    role_type: str | None = Query(None, alias="roleType"),
    community_group_id: UUID | None = Query(None, alias="communityGroupId"),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    requester: Requester = Depends(get_requester),
    service: UserService = Depends(get_user_service),
):
    """Paginated active identities within the requester's scope."""
    result = await service.list(
        requester,
        search=search,
        role_name=role_type,
        group_id=GroupId(community_group_id) if community_group_id else None,
        page=_as_int(page),
        limit=_as_int(limit),
    )
    return serialize_page(result.data, result.meta)


@router.get("/me")
async def get_me(
    requester: Requester = Depends(get_requester),
    service: UserService = Depends(get_user_service),
):
    return serialize_user(await service.get(requester, requester.id))


@router.patch("/me")
async def update_me(
    body: ProfileUpdate,
    requester: Requester = Depends(get_requester),
    service: UserService = Depends(get_user_service),
):
    updated = await service.update_profile(
        requester.id,
        full_name=body.full_name,
        email=body.email,
        phone=body.phone,
        address=body.address,
    )
    return serialize_user(updated)


@router.post("/me/password")
async def change_my_password(
    body: PasswordChange,
    requester: Requester = Depends(get_requester),
    service: UserService = Depends(get_user_service),
):
    await service.change_password(
        requester.id, body.current_password, body.new_password,
    )
    return {"message": "Password updated"}


@router.get("/{user_id}")
async def get_user(
    user_id: UUID,
    requester: Requester = Depends(get_requester),
    service: UserService = Depends(get_user_service),
):
    """Single identity by id; wallet shown per viewer relationship."""
    return serialize_user(await service.get(requester, UserId(user_id)))
