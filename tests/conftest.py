"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Schema is created per test on a fresh engine. Sample data is written and
committed through its own session, so the session under test starts with an
empty identity map and has to load everything itself.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models import Item, Member, Order
from app.models.address import Address
from app.seed import build_order

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 스키마를 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """조회 대상 세션 — 비어 있는 identity map으로 시작합니다."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
SEOUL = Address("서울", "1", "1111")
BUSAN = Address("부산", "2", "2222")


@pytest_asyncio.fixture
async def orders(session_factory: async_sessionmaker[AsyncSession]) -> list[int]:
    """주문 3건을 생성하고 커밋합니다 — 주문 ID를 생성 순서대로 반환.

    Order 1: userA — JPA1 BOOK x1, JPA2 BOOK x2
    Order 2: userB — SPRING1 BOOK x3, SPRING2 BOOK x4
    Order 3: userA — JPA1 BOOK x5
    """
    async with session_factory() as session:
        user_a = Member(name="userA", address=SEOUL)
        user_b = Member(name="userB", address=BUSAN)
        jpa1 = Item(name="JPA1 BOOK", price=10000, stock_quantity=100)
        jpa2 = Item(name="JPA2 BOOK", price=20000, stock_quantity=100)
        spring1 = Item(name="SPRING1 BOOK", price=20000, stock_quantity=200)
        spring2 = Item(name="SPRING2 BOOK", price=40000, stock_quantity=300)

        created: list[Order] = [
            build_order(user_a, SEOUL, [(jpa1, 10000, 1), (jpa2, 20000, 2)]),
            build_order(user_b, BUSAN, [(spring1, 20000, 3), (spring2, 40000, 4)]),
            build_order(user_a, SEOUL, [(jpa1, 10000, 5)]),
        ]
        # 순서대로 flush — id 오름차순이 생성 순서가 되도록 (Flush one by one so ids follow creation order)
        for order in created:
            session.add(order)
            await session.flush()
        await session.commit()
        return [order.id for order in created]


@pytest_asyncio.fixture
async def empty_order(session_factory: async_sessionmaker[AsyncSession], orders: list[int]) -> int:
    """주문 상품이 없는 주문 1건을 추가합니다."""
    async with session_factory() as session:
        member = Member(name="userC", address=SEOUL)
        order = build_order(member, SEOUL, [])
        session.add(order)
        await session.commit()
        return order.id
