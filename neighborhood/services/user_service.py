"""User Service - identity provisioning, scoped listing, profile and credential flows.

Invariants:
    - Every returned identity is a UserView (no password_hash) that went through redact()
    - list() always runs through resolve_scope -> compose -> store -> redact, in that order
    - create() checks email, then target group, then role, then hashes and writes once
    - A failed check raises before any write; nothing is retried
    - Wrong current password -> ValidationError and the stored hash is untouched

Design Decisions:
    - Repositories and the credential verifier are injected: the service is the
      async shell around the pure functions in core/
"""

import logging
from dataclasses import dataclass

from neighborhood.core.domain_types import GroupId, Requester, UserId, UserView
from neighborhood.core.errors import ResourceNotFoundError, ValidationError
from neighborhood.core.filter_composer import compose
from neighborhood.core.pagination import PageMeta, build_page_meta, DEFAULT_LIMIT
from neighborhood.core.provisioning import (
    NewUserDraft, ensure_email_available, plan_user_creation,
)
from neighborhood.core.repository_protocols import (
    CredentialVerifier, GroupRepository, RoleRepository, UserRepository,
)
from neighborhood.core.scope_resolver import resolve_scope
from neighborhood.core.visibility import redact, redact_all, to_public_view

logger = logging.getLogger(__name__)

INVALID_LOGIN = "Invalid email or password"


@dataclass(frozen=True)
class UserPage:
    data: list[UserView]
    meta: PageMeta


class UserService:
    """Identity operations on behalf of an authenticated requester."""

    def __init__(
        self,
        users: UserRepository,
        roles: RoleRepository,
        groups: GroupRepository,
        credentials: CredentialVerifier,
        default_password: str,
        default_page_limit: int = DEFAULT_LIMIT,
    ):
        self.users = users
        self.roles = roles
        self.groups = groups
        self.credentials = credentials
        self.default_password = default_password
        self.default_page_limit = default_page_limit

    async def create(self, requester: Requester, draft: NewUserDraft) -> UserView:
        """Provision a new identity into the requester's permitted group."""
        existing = await self.users.find_by_email(draft.email)
        ensure_email_available(draft.email, existing.id if existing else None)

        plan = plan_user_creation(requester, draft, self.default_password)

        if not await self.groups.exists(plan.group_id):
            raise ValidationError(
                f"Community group '{plan.group_id}' does not exist",
                field="communityGroupId",
            )
        role = await self.roles.find_by_name(plan.role_name)
        if role is None:
            raise ValidationError(
                f"Role type '{plan.role_name.value}' is not valid", field="roleType",
            )

        record = await self.users.create(
            fields={
                "email": plan.email,
                "full_name": plan.full_name,
                "phone": plan.phone,
                "address": plan.address,
                "password": self.credentials.hash(plan.secret),
            },
            role_id=role.id,
            group_id=plan.group_id,
            created_by_id=plan.created_by_id,
        )
        logger.info(
            "User provisioned",
            extra={
                "user_id": record.id,
                "group_id": record.group_id,
                "requester_id": requester.id,
            },
        )
        return redact(requester, record)

    async def list(
        self,
        requester: Requester,
        search: str | None = None,
        role_name: str | None = None,
        group_id: GroupId | None = None,
        page: object = None,
        limit: object = None,
    ) -> UserPage:
        """Active identities visible to the requester, newest first."""
        scope = resolve_scope(requester.role, requester.group_id, group_id)
        query = compose(
            scope,
            search=search,
            role_name=role_name,
            explicit_group_id=group_id,
            page=page,
            limit=limit,
            default_limit=self.default_page_limit,
        )
        records, total = await self.users.find_many(query)
        return UserPage(
            data=redact_all(requester, records),
            meta=build_page_meta(total, query.page),
        )

    async def get(self, requester: Requester, user_id: UserId) -> UserView:
        record = await self.users.find_by_id(user_id)
        if record is None:
            raise ResourceNotFoundError("User", str(user_id))
        return redact(requester, record)

    async def update_profile(
        self,
        user_id: UserId,
        full_name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> UserView:
        """Self-service profile edit. Only an email change is cross-checked."""
        if email:
            existing = await self.users.find_by_email(email)
            ensure_email_available(email, existing.id if existing else None, self_id=user_id)

        record = await self.users.update(user_id, {
            "full_name": full_name,
            "email": email,
            "phone": phone,
            "address": address,
        })
        if record is None:
            raise ResourceNotFoundError("User", str(user_id))
        return to_public_view(record)

    async def change_password(
        self, user_id: UserId, current_password: str, new_password: str,
    ) -> None:
        record = await self.users.find_by_id(user_id)
        if record is None:
            raise ResourceNotFoundError("User", str(user_id))

        if not self.credentials.verify(current_password, record.password_hash):
            logger.warning("Password change rejected", extra={"user_id": user_id})
            raise ValidationError("Current password is incorrect", field="currentPassword")

        await self.users.update(user_id, {"password": self.credentials.hash(new_password)})
        logger.info("Password changed", extra={"user_id": user_id})

    async def authenticate(self, email: str, password: str) -> UserView:
        """Check a login secret. Unknown, inactive and wrong-password look the same."""
        record = await self.users.find_by_email(email)
        if (
            record is None
            or not record.is_active
            or not self.credentials.verify(password, record.password_hash)
        ):
            raise ValidationError(INVALID_LOGIN)
        return to_public_view(record)
