"""ORM Models - SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - CommunityGroup owns Wallet; User references Role and CommunityGroup

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from neighborhood.models.role import Role  # noqa: F401
from neighborhood.models.community_group import CommunityGroup  # noqa: F401
from neighborhood.models.wallet import Wallet  # noqa: F401
from neighborhood.models.user import User  # noqa: F401
