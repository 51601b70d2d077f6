"""User ORM - an identity bound to exactly one role and one group.

Invariants:
    - email is unique across active AND inactive users
    - password holds a bcrypt hash, never plaintext, never returned outward
    - role_id and group_id are non-nullable once the insert commits
    - created_by_id points at the identity that provisioned this one (NULL for seeds)
    - Users are soft-deactivated via is_active, never hard-deleted here

Design Decisions:
    - role and group loaded with selectin: every read path needs both, and the
      group's wallet comes along through CommunityGroup.wallet
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from neighborhood.db.base import Base


class User(Base):
    """Identity entity."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column(String(150), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    role_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("roles.id"), nullable=False,
    )
    community_group_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("community_groups.id"), nullable=False,
    )
    created_by_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    # Relationships
    role: Mapped["Role"] = relationship(
        "Role", back_populates="users", lazy="selectin",
    )
    group: Mapped["CommunityGroup"] = relationship(
        "CommunityGroup", back_populates="users", lazy="selectin",
    )
