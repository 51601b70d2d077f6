"""ORM -> core record mapping.

Invariants:
    - Relationships (role, group, group.wallet) must already be loaded
    - Output records are frozen; ORM instances never leave infrastructure/
"""

from decimal import Decimal

from neighborhood.core.domain_types import (
    GroupId, GroupType, GroupView, RoleId, RoleName, RoleView,
    UserId, UserRecord, WalletId, WalletView,
)
from neighborhood.models.community_group import CommunityGroup
from neighborhood.models.role import Role
from neighborhood.models.user import User
from neighborhood.models.wallet import Wallet


def wallet_to_view(wallet: Wallet | None) -> WalletView | None:
    if wallet is None:
        return None
    return WalletView(id=WalletId(wallet.id), balance=Decimal(wallet.balance))


def group_to_view(group: CommunityGroup) -> GroupView:
    return GroupView(
        id=GroupId(group.id),
        name=group.name,
        type=GroupType(group.type),
        wallet=wallet_to_view(group.wallet),
    )


def role_to_view(role: Role) -> RoleView:
    return RoleView(id=RoleId(role.id), name=RoleName(role.name))


def user_to_record(user: User) -> UserRecord:
    return UserRecord(
        id=UserId(user.id),
        email=user.email,
        full_name=user.full_name,
        password_hash=user.password,
        phone=user.phone,
        address=user.address,
        is_active=user.is_active,
        created_at=user.created_at,
        role=role_to_view(user.role),
        group=group_to_view(user.group),
        created_by_id=UserId(user.created_by_id) if user.created_by_id else None,
    )
