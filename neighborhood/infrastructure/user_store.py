"""User Store - SQLAlchemy implementation of UserRepository.

Invariants:
    - QueryFilter terms translate 1:1 into WHERE conditions joined with AND
    - The same conditions drive both the page query and the total count
    - create() writes the row with its role, group and creator links in one commit
    - Reads re-populate relationships so a returned record is never stale
    - update() stamps updated_at on every successful write
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from neighborhood.core.domain_types import GroupId, RoleId, UserId, UserRecord
from neighborhood.core.filter_composer import (
    ActiveTerm, ComposedQuery, FilterTerm, GroupTerm, QueryFilter, RoleTerm, SearchTerm,
)
from neighborhood.infrastructure.database import commit_or_rollback
from neighborhood.infrastructure.record_mapping import user_to_record
from neighborhood.models.role import Role
from neighborhood.models.user import User

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "email", "full_name", "phone", "address", "password",
    "community_group_id", "is_active",
)


def term_to_condition(term: FilterTerm) -> ColumnElement[bool]:
    """One filter term -> one SQL condition."""
    if isinstance(term, ActiveTerm):
        return User.is_active.is_(term.is_active)
    if isinstance(term, SearchTerm):
        return or_(
            User.full_name.icontains(term.text, autoescape=True),
            User.email.icontains(term.text, autoescape=True),
        )
    if isinstance(term, RoleTerm):
        return User.role.has(Role.name == term.role_name)
    if isinstance(term, GroupTerm):
        return User.community_group_id == term.group_id
    raise TypeError(f"Unsupported filter term: {term!r}")


def to_conditions(query_filter: QueryFilter) -> list[ColumnElement[bool]]:
    return [term_to_condition(t) for t in query_filter.terms]


class UserStore:
    """Persistence for User rows."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_one(self, *conditions) -> User | None:
        result = await self.db.execute(
            select(User).where(*conditions)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, user_id: UserId) -> UserRecord | None:
        user = await self._get_one(User.id == user_id)
        return user_to_record(user) if user else None

    async def find_by_email(self, email: str) -> UserRecord | None:
        user = await self._get_one(User.email == email)
        return user_to_record(user) if user else None

    async def find_many(
        self, query: ComposedQuery,
    ) -> tuple[list[UserRecord], int]:
        """One page of users plus the total matching count."""
        conditions = to_conditions(query.filter)
        order_column = getattr(User, query.order_by.field)
        stmt = (
            select(User)
            .where(*conditions)
            .order_by(
                order_column.desc() if query.order_by.descending else order_column.asc(),
                User.id,
            )
            .offset(query.page.skip)
            .limit(query.page.take)
        )
        result = await self.db.execute(stmt)
        users = result.scalars().all()
        total = await self.count(query)
        return [user_to_record(u) for u in users], total

    async def count(self, query: ComposedQuery) -> int:
        total = await self.db.scalar(
            select(func.count()).select_from(User)
            .where(*to_conditions(query.filter)),
        )
        return total or 0

    async def create(
        self,
        fields: dict,
        role_id: RoleId,
        group_id: GroupId,
        created_by_id: UserId | None,
    ) -> UserRecord:
        user = User(
            **fields,
            role_id=role_id,
            community_group_id=group_id,
            created_by_id=created_by_id,
        )
        self.db.add(user)
        await commit_or_rollback(self.db, "create")
        return await self.find_by_id(UserId(user.id))

    async def update(self, user_id: UserId, fields: dict) -> UserRecord | None:
        """Apply non-None fields; returns None for an unknown id."""
        user = await self._get_one(User.id == user_id)
        if user is None:
            return None
        for key in UPDATABLE_FIELDS:
            if fields.get(key) is not None:
                setattr(user, key, fields[key])
        user.updated_at = datetime.now(timezone.utc)
        await commit_or_rollback(self.db, "update")
        # group may have moved; force the relationships to reload
        self.db.expire(user, ["role", "group"])
        return await self.find_by_id(user_id)
