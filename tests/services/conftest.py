"""Service test fixtures - async DB, seeded community, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Roles seeded for every RoleName; groups created through GroupStore
    - Users get strictly increasing created_at so "newest first" is deterministic
    - get_db dependency overridden to use the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for store/route tests
    - bcrypt cost 4: hashing stays real but cheap
"""

from datetime import timedelta
from decimal import Decimal
from types import SimpleNamespace

import pytest
from sqlalchemy import update
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from neighborhood.core.domain_types import GroupId, GroupType, Requester, RoleName, UserId
from neighborhood.db.base import Base
from neighborhood.infrastructure.credentials import BcryptCredentials
from neighborhood.infrastructure.database import get_db
from neighborhood.infrastructure.group_store import GroupStore
from neighborhood.infrastructure.role_store import RoleStore
from neighborhood.infrastructure.user_store import UserStore
from neighborhood.main import app
from neighborhood.models import Role, User, Wallet
from neighborhood.services.group_service import GroupService
from neighborhood.services.user_service import UserService
from tests.services.seed_data import BASE_TIME, DEFAULT_PASSWORD, PASSWORD, PEOPLE


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def credentials():
    return BcryptCredentials(rounds=4)


@pytest.fixture
async def roles(test_db):
    rows = {name: Role(name=name.value) for name in RoleName}
    test_db.add_all(rows.values())
    await test_db.commit()
    return rows


@pytest.fixture
async def groups(test_db):
    """RT 01, RT 02 (wallet balance 150000) and RW 05."""
    store = GroupStore(test_db)
    a = await store.create_with_wallet("RT 01", GroupType.RT)
    b = await store.create_with_wallet("RT 02", GroupType.RT)
    rw = await store.create_with_wallet("RW 05", GroupType.RW)
    await test_db.execute(
        update(Wallet).where(Wallet.group_id == b.id).values(balance=Decimal("150000")),
    )
    await test_db.commit()
    return SimpleNamespace(a=a, b=b, rw=rw)


@pytest.fixture
async def people(test_db, roles, groups, credentials):
    """Seeded ORM users keyed as in seed_data.PEOPLE."""
    hashed = credentials.hash(PASSWORD)
    created = {}
    for i, (key, name, email, role, group_key, active) in enumerate(PEOPLE):
        user = User(
            email=email,
            full_name=name,
            password=hashed,
            is_active=active,
            role_id=roles[role].id,
            community_group_id=getattr(groups, group_key).id,
            created_at=BASE_TIME + timedelta(minutes=i),
        )
        test_db.add(user)
        created[key] = user
    await test_db.commit()
    return SimpleNamespace(**created)


@pytest.fixture
async def requesters(people, groups):
    """Requester value for every seeded user."""
    return SimpleNamespace(**{
        key: Requester(
            id=UserId(getattr(people, key).id),
            role=role,
            group_id=GroupId(getattr(groups, group_key).id),
        )
        for key, _, _, role, group_key, _ in PEOPLE
    })


@pytest.fixture
def user_store(test_db):
    return UserStore(test_db)


@pytest.fixture
def group_store(test_db):
    return GroupStore(test_db)


@pytest.fixture
def user_service(test_db, credentials):
    return UserService(
        users=UserStore(test_db),
        roles=RoleStore(test_db),
        groups=GroupStore(test_db),
        credentials=credentials,
        default_password=DEFAULT_PASSWORD,
    )


@pytest.fixture
def group_service(test_db):
    return GroupService(groups=GroupStore(test_db), users=UserStore(test_db))


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
