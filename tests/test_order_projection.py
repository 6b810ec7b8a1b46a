"""DTO 변환 및 플랫 결과 재그룹핑 테스트.

Projection builder and flat-result regrouping tests.
"""

from datetime import datetime

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.address import Address
from app.repositories.order_repository import order_repository
from app.schemas.order import OrderFlatRow
from app.services.order_service import OrderFetchStrategy, order_service
from app.utils.exceptions import DetachedAccessError

ORDERED_AT = datetime(2026, 1, 1, 12, 0, 0)
ALICE_HOME = Address("Seoul", "Main St", "11111")
BOB_HOME = Address("Busan", "Beach Rd", "22222")


def _row(order_id: int, name: str, address: Address, item_name: str, order_price: int, count: int) -> OrderFlatRow:
    return OrderFlatRow(
        order_id=order_id,
        name=name,
        order_date=ORDERED_AT,
        order_status="ORDER",
        address=address,
        item_name=item_name,
        order_price=order_price,
        count=count,
    )


class TestRegroupFlat:
    """regroup_flat 테스트."""

    def test_two_orders(self):
        """O1 2행 + O2 1행 → O1[Book, Pen], O2[Book]."""
        rows = [
            _row(1, "Alice", ALICE_HOME, "Book", 10, 2),
            _row(1, "Alice", ALICE_HOME, "Pen", 2, 5),
            _row(2, "Bob", BOB_HOME, "Book", 10, 1),
        ]
        result = order_service.regroup_flat(rows)

        assert [r.order_id for r in result] == [1, 2]
        assert [(i.item_name, i.order_price, i.count) for i in result[0].order_items] == [
            ("Book", 10, 2),
            ("Pen", 2, 5),
        ]
        assert [i.item_name for i in result[1].order_items] == ["Book"]
        assert result[0].name == "Alice"
        assert result[0].address.city == "Seoul"

    def test_first_occurrence_order(self):
        """그룹 순서는 최초 등장 순서, 정렬하지 않음."""
        rows = [
            _row(7, "Bob", BOB_HOME, "Cup", 3, 1),
            _row(3, "Alice", ALICE_HOME, "Book", 10, 1),
            _row(7, "Bob", BOB_HOME, "Plate", 4, 2),
        ]
        result = order_service.regroup_flat(rows)

        assert [r.order_id for r in result] == [7, 3]
        assert [i.item_name for i in result[0].order_items] == ["Cup", "Plate"]

    def test_output_count_equals_distinct_keys(self):
        """출력 주문 수 = 서로 다른 주문 키 수."""
        rows = [
            _row(1, "Alice", ALICE_HOME, "Book", 10, 1),
            _row(2, "Bob", BOB_HOME, "Book", 10, 1),
            _row(1, "Alice", ALICE_HOME, "Pen", 2, 1),
            _row(3, "Alice", ALICE_HOME, "Pen", 2, 1),
        ]
        result = order_service.regroup_flat(rows)
        assert len(result) == len({row.order_key for row in rows}) == 3

    def test_empty_rows(self):
        """빈 입력 → 빈 목록."""
        assert order_service.regroup_flat([]) == []

    def test_missing_address(self):
        """배송지가 없는 행은 address=None."""
        result = order_service.regroup_flat([_row(1, "Alice", None, "Book", 10, 1)])
        assert result[0].address is None


class TestProjection:
    """엔티티 → DTO 변환 테스트."""

    async def test_output_count_matches_input(self, db: AsyncSession, orders):
        """출력 수 = 입력 수, 주문 상품 수 일치."""
        entities = await order_repository.find_all_with_member_delivery_batched(db)
        responses = [order_service.to_response(order) for order in entities]

        assert len(responses) == len(entities)
        assert [len(r.order_items) for r in responses] == [len(o.order_items) for o in entities]

    async def test_entity_shape(self, db: AsyncSession, orders):
        """엔티티 형태 응답 — 회원/배송/상품 포함, 역참조 없음."""
        result = await order_service.list_order_entities(db)
        first = result[0].model_dump()

        assert first["id"] == orders[0]
        assert first["member"]["name"] == "userA"
        assert first["delivery"]["status"] == "READY"
        assert first["order_items"][0]["item"]["name"] == "JPA1 BOOK"
        assert first["order_items"][0]["item"]["stock_quantity"] == 100
        assert "order" not in first["order_items"][0]

    @pytest.mark.parametrize("strategy", [OrderFetchStrategy.PLAIN, OrderFetchStrategy.TO_ONE_JOIN])
    async def test_simple_orders(self, db: AsyncSession, orders, strategy):
        """회원/배송만 로딩한 주문 요약."""
        result = await order_service.list_simple_orders(db, strategy)
        assert [(r.order_id, r.name) for r in result] == list(zip(orders, ["userA", "userB", "userA"]))

    async def test_simple_orders_rejects_collection_strategy(self, db: AsyncSession, orders):
        """ToOne 전략이 아니면 ValueError."""
        with pytest.raises(ValueError):
            await order_service.list_simple_orders(db, OrderFetchStrategy.BATCH)

    async def test_simple_entities(self, db: AsyncSession, orders):
        """회원/배송까지의 엔티티 형태 응답."""
        result = await order_service.list_simple_order_entities(db)
        assert [r.member.name for r in result] == ["userA", "userB", "userA"]
        assert result[1].delivery.address.city == "부산"


class TestDetachedAccess:
    """로딩되지 않은 연관 엔티티 접근 테스트."""

    async def test_unresolved_member(self, db: AsyncSession, orders):
        """연관 엔티티를 로딩하지 않은 주문 변환 → DetachedAccessError."""
        entities = await order_repository.get_all(db)
        with pytest.raises(DetachedAccessError) as exc_info:
            order_service.to_response(entities[0])
        assert exc_info.value.status_code == 500
        assert "without being resolved first" in exc_info.value.detail

    async def test_unresolved_order_items(self, db: AsyncSession, orders):
        """주문 상품 없이 로딩한 주문을 전체 응답으로 변환 → DetachedAccessError."""
        entities = await order_repository.find_all_with_member_delivery(db, with_items=False)
        with pytest.raises(DetachedAccessError) as exc_info:
            order_service.to_response(entities[0])
        assert "order_items" in exc_info.value.detail

    async def test_access_after_session_closed(self, db: AsyncSession, orders):
        """세션에서 분리된 뒤 미로딩 연관 엔티티 접근 → DetachedAccessError."""
        entities = await order_repository.get_all(db)
        db.expunge_all()
        with pytest.raises(DetachedAccessError) as exc_info:
            order_service.to_simple_response(entities[0])
        assert "after its session closed" in exc_info.value.detail

    async def test_resolved_then_closed(self, session_factory: async_sessionmaker[AsyncSession], orders):
        """세션 안에서 로딩을 끝낸 주문은 세션이 닫힌 뒤에도 변환 가능."""
        async with session_factory() as session:
            entities = await order_repository.find_all_with_member_delivery_batched(session)

        responses = [order_service.to_response(order) for order in entities]
        assert [r.order_id for r in responses] == orders
        assert [len(r.order_items) for r in responses] == [2, 2, 1]
