"""CommunityGroup ORM - a tenant unit (RT, RW or other) owning exactly one wallet.

Invariants:
    - type is a GroupType value
    - wallet is one-to-one and created in the same transaction as the group
    - Deleting a group deletes its wallet (delete-orphan cascade)

Design Decisions:
    - No parent_id: the RT/RW hierarchy is expressed by the type tag and by roles
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from neighborhood.db.base import Base


class CommunityGroup(Base):
    """Group entity - owns one Wallet and many Users."""
    __tablename__ = "community_groups"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    wallet: Mapped["Wallet"] = relationship(
        "Wallet", back_populates="group", uselist=False,
        cascade="all, delete-orphan", lazy="selectin",
    )
    users: Mapped[list["User"]] = relationship(
        "User", back_populates="group", passive_deletes=True,
    )
