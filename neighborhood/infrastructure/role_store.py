"""Role Store - read-only lookup of seeded role rows by name."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from neighborhood.core.domain_types import RoleName, RoleView
from neighborhood.infrastructure.record_mapping import role_to_view
from neighborhood.models.role import Role


class RoleStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_name(self, name: RoleName) -> RoleView | None:
        result = await self.db.execute(select(Role).where(Role.name == name.value))
        role = result.scalar_one_or_none()
        return role_to_view(role) if role else None
