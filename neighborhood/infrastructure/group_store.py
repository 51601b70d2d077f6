"""Group Store - SQLAlchemy implementation of GroupRepository.

Invariants:
    - create_with_wallet writes the group and a zero-balance wallet in ONE transaction;
      if the wallet write fails the group row is rolled back with it
    - No retries: a failed write surfaces immediately as DatabaseError
    - Reads always include the wallet (selectin on CommunityGroup.wallet)
    - update/find return None for unknown ids; the service decides on 404
"""

import logging
from decimal import Decimal

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from neighborhood.core.domain_types import GroupId, GroupType, GroupView
from neighborhood.core.errors import DatabaseError
from neighborhood.infrastructure.database import commit_or_rollback
from neighborhood.infrastructure.record_mapping import group_to_view
from neighborhood.models.community_group import CommunityGroup
from neighborhood.models.user import User
from neighborhood.models.wallet import Wallet

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "type")


class GroupStore:
    """Persistence for CommunityGroup + Wallet."""

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _new_wallet(group: CommunityGroup) -> Wallet:
        return Wallet(group=group, balance=Decimal("0"))

    async def create_with_wallet(
        self, name: str, group_type: GroupType,
    ) -> GroupView:
        """Insert group, then its wallet, then commit both or neither."""
        group = CommunityGroup(name=name, type=group_type.value)
        try:
            self.db.add(group)
            await self.db.flush()
            self.db.add(self._new_wallet(group))
            await self.db.flush()
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"Group+wallet create rolled back: {e}")
            raise DatabaseError("Group and wallet were not created", "create")
        except Exception:
            await self.db.rollback()
            raise
        return group_to_view(group)

    async def _get(self, group_id: GroupId) -> CommunityGroup | None:
        result = await self.db.execute(
            select(CommunityGroup)
            .where(CommunityGroup.id == group_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def find_by_id(self, group_id: GroupId) -> GroupView | None:
        group = await self._get(group_id)
        return group_to_view(group) if group else None

    async def find_all(self, group_type: GroupType | None = None) -> list[GroupView]:
        query = select(CommunityGroup).order_by(CommunityGroup.name.asc())
        if group_type is not None:
            query = query.where(CommunityGroup.type == group_type.value)
        result = await self.db.execute(query)
        return [group_to_view(g) for g in result.scalars().all()]

    async def update(self, group_id: GroupId, fields: dict) -> GroupView | None:
        group = await self._get(group_id)
        if group is None:
            return None
        for key in UPDATABLE_FIELDS:
            if fields.get(key) is not None:
                value = fields[key]
                setattr(group, key, value.value if isinstance(value, GroupType) else value)
        await commit_or_rollback(self.db, "update")
        return group_to_view(group)

    async def delete(self, group_id: GroupId) -> None:
        group = await self._get(group_id)
        if group is None:
            return
        await self.db.delete(group)
        await commit_or_rollback(self.db, "delete")

    async def exists(self, group_id: GroupId) -> bool:
        count = await self.db.scalar(
            select(func.count()).select_from(CommunityGroup)
            .where(CommunityGroup.id == group_id),
        )
        return bool(count)

    async def count_members(self, group_id: GroupId) -> int:
        count = await self.db.scalar(
            select(func.count()).select_from(User)
            .where(User.community_group_id == group_id),
        )
        return count or 0
