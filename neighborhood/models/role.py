"""Role ORM - immutable reference data, one row per RoleName.

Invariants:
    - name is unique and always a RoleName value
    - Rows are seeded by migration; the application never inserts roles
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from neighborhood.db.base import Base


class Role(Base):
    """System role reference row."""
    __tablename__ = "roles"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)

    users: Mapped[list["User"]] = relationship("User", back_populates="role")
