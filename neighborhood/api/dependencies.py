"""Request Dependencies - requester identity and service wiring for route handlers.

Invariants:
    - The requester is loaded fresh from the store on every request
    - Missing, unknown or inactive requester ids -> 401 before any handler logic runs
    - Services and the requester share the request's single DB session

Design Decisions:
    - Token/session verification happens upstream; the gateway forwards the
      authenticated identity id in X-User-Id
"""

from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from neighborhood.config import get_settings
from neighborhood.core.domain_types import Requester, UserId
from neighborhood.infrastructure.credentials import BcryptCredentials
from neighborhood.infrastructure.database import get_db
from neighborhood.infrastructure.group_store import GroupStore
from neighborhood.infrastructure.role_store import RoleStore
from neighborhood.infrastructure.user_store import UserStore
from neighborhood.services.group_service import GroupService
from neighborhood.services.user_service import UserService

REQUESTER_HEADER = "X-User-Id"


def get_credentials() -> BcryptCredentials:
    return BcryptCredentials(rounds=get_settings().password_hash_rounds)


async def get_requester(
    x_user_id: UUID | None = Header(None, alias=REQUESTER_HEADER),
    db: AsyncSession = Depends(get_db),
) -> Requester:
    if x_user_id is None:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    record = await UserStore(db).find_by_id(UserId(x_user_id))
    if record is None or not record.is_active:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return Requester.from_record(record)


async def get_user_service(
    db: AsyncSession = Depends(get_db),
    credentials: BcryptCredentials = Depends(get_credentials),
) -> UserService:
    settings = get_settings()
    return UserService(
        users=UserStore(db),
        roles=RoleStore(db),
        groups=GroupStore(db),
        credentials=credentials,
        default_password=settings.default_member_password,
        default_page_limit=settings.default_page_limit,
    )


async def get_group_service(db: AsyncSession = Depends(get_db)) -> GroupService:
    return GroupService(groups=GroupStore(db), users=UserStore(db))
