"""Wallet ORM - the balance record owned 1:1 by a CommunityGroup.

Invariants:
    - Always belongs to a group (group_id FK, unique)
    - balance starts at 0 and is never NULL
    - Never created on its own; only alongside its group
"""

import uuid
from decimal import Decimal
from datetime import datetime, timezone

from sqlalchemy import Numeric, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from neighborhood.db.base import Base


class Wallet(Base):
    """Group wallet - balance only; ledger entries live elsewhere."""
    __tablename__ = "wallets"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    group_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("community_groups.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    balance: Mapped[Decimal] = mapped_column(
        Numeric(14, 2), nullable=False, default=Decimal("0"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    group: Mapped["CommunityGroup"] = relationship(
        "CommunityGroup", back_populates="wallet",
    )
