"""샘플 데이터 시드 테스트.

Seed data tests — The demo data set loads and reads back through the API
strategies.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.repositories.order_repository import order_repository
from app.services.order_service import OrderFetchStrategy, order_service
from app.seed import seed_orders


class TestSeed:
    """seed_orders 테스트."""

    async def test_seed_orders(self, session_factory: async_sessionmaker[AsyncSession], db: AsyncSession):
        """회원 2명, 주문 2건, 주문당 상품 2개."""
        async with session_factory() as session:
            created = await seed_orders(session)
            await session.commit()

        assert await order_repository.count(db) == 2

        result = await order_service.list_orders(db, OrderFetchStrategy.COLLECTION_JOIN)
        assert [r.order_id for r in result] == [order.id for order in created]
        assert [r.name for r in result] == ["userA", "userB"]
        assert [[i.item_name for i in r.order_items] for r in result] == [
            ["JPA1 BOOK", "JPA2 BOOK"],
            ["SPRING1 BOOK", "SPRING2 BOOK"],
        ]

    async def test_count_empty(self, db: AsyncSession):
        """주문이 없으면 0."""
        assert await order_repository.count(db) == 0
