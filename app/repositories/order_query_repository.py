"""주문 조회 전용 레포지토리 — 엔티티 대신 DTO로 직접 조회.

Order query Repository — Selects columns straight into response DTOs.
The SELECT list is narrowed to exactly what the response needs, at the cost
of coupling this layer to the API shape.

Queries (N orders):
    - find_order_summaries: ToOne 조인 컬럼만 조회 (1 query, no lines)
    - find_order_query_dtos: ToOne 조회 + 주문별 상품 조회 (1 + N)
    - find_order_query_dtos_optimized: ToOne 조회 + IN 배치 상품 조회 (1 + ceil(N / batch))
    - find_all_flat: 전체 조인 한 번, 주문 상품 수만큼 행 중복 (1, duplicated rows)
"""

from typing import Any, Sequence

from sqlalchemy import Row, Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.address import Address
from app.models.delivery import Delivery
from app.models.item import Item
from app.models.member import Member
from app.models.order import Order, OrderItem
from app.schemas.order import AddressResponse, OrderFlatRow, OrderItemResponse, OrderResponse, SimpleOrderResponse
from app.utils.grouping import group_by_ordered


class OrderQueryRepository:
    """주문 DTO 조회 레포지토리.

    Repository returning DTOs directly from column projections.
    """

    def _order_columns(self) -> Select[Any]:
        """주문 레벨 컬럼 조회 쿼리 — Order-level columns over the to-one joins."""
        return (
            select(
                Order.id,
                Member.name,
                Order.order_date,
                Order.status,
                Delivery.city,
                Delivery.street,
                Delivery.zipcode,
            )
            .join(Order.member)
            .join(Order.delivery)
            .order_by(Order.id)
        )

    def _to_simple(self, row: Row[Any]) -> SimpleOrderResponse:
        order_id, name, order_date, status, city, street, zipcode = row
        return SimpleOrderResponse(
            order_id=order_id,
            name=name,
            order_date=order_date,
            order_status=status.value,
            address=AddressResponse(city=city, street=street, zipcode=zipcode),
        )

    async def _find_order_items(
        self,
        db: AsyncSession,
        order_ids: Sequence[int],
    ) -> dict[int, list[OrderItemResponse]]:
        """주문 ID 목록의 주문 상품을 한 번의 IN 쿼리로 조회합니다.

        Fetch lines for the given orders in one IN query, grouped by order id.
        """
        query: Select[Any] = (
            select(OrderItem.order_id, Item.name, OrderItem.order_price, OrderItem.count)
            .join(OrderItem.item)
            .where(OrderItem.order_id.in_(order_ids))
            .order_by(OrderItem.id)
        )
        result = await db.execute(query)
        return group_by_ordered(
            result.all(),
            key=lambda row: row[0],
            value=lambda row: OrderItemResponse(item_name=row[1], order_price=row[2], count=row[3]),
        )

    async def find_order_summaries(self, db: AsyncSession) -> list[SimpleOrderResponse]:
        """주문 요약을 한 번의 쿼리로 조회합니다 (주문 상품 제외).

        Minimal order-only projection in a single query.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[SimpleOrderResponse]: 주문 요약 목록 (Order summaries)
        """
        result = await db.execute(self._order_columns())
        return [self._to_simple(row) for row in result.all()]

    async def find_order_query_dtos(self, db: AsyncSession) -> list[OrderResponse]:
        """ToOne 컬럼을 조회한 뒤, 주문마다 주문 상품을 조회합니다 (1 + N).

        To-one projection, then one line query per order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[OrderResponse]: 주문 목록 (Orders with lines)
        """
        summaries: list[SimpleOrderResponse] = await self.find_order_summaries(db)
        result: list[OrderResponse] = []
        for summary in summaries:
            lines: dict[int, list[OrderItemResponse]] = await self._find_order_items(db, [summary.order_id])
            result.append(
                OrderResponse(**summary.model_dump(), order_items=lines.get(summary.order_id, []))
            )
        return result

    async def find_order_query_dtos_optimized(
        self,
        db: AsyncSession,
        batch_size: int = 100,
    ) -> list[OrderResponse]:
        """ToOne 컬럼을 조회한 뒤, 주문 상품을 IN 쿼리로 한 번에 조회합니다.

        To-one projection, then lines for up to ``batch_size`` orders per IN
        query, matched back to their orders in memory.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            batch_size: IN 절 당 주문 수 (Orders per IN query, >= 1)

        Returns:
            list[OrderResponse]: 주문 목록 (Orders with lines)
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")

        summaries: list[SimpleOrderResponse] = await self.find_order_summaries(db)
        order_ids: list[int] = [summary.order_id for summary in summaries]

        lines: dict[int, list[OrderItemResponse]] = {}
        for start in range(0, len(order_ids), batch_size):
            lines.update(await self._find_order_items(db, order_ids[start:start + batch_size]))

        return [
            OrderResponse(**summary.model_dump(), order_items=lines.get(summary.order_id, []))
            for summary in summaries
        ]

    async def find_all_flat(self, db: AsyncSession) -> list[OrderFlatRow]:
        """주문/회원/배송/주문상품/상품을 한 번의 플랫 쿼리로 조회합니다.

        Fully flattened single query: one row per (order, line) with every
        order-level column repeated. Rows come back in canonical order.

        페이징 불가: 행이 주문 상품 단위이므로 전체를 반환합니다.
        (Not paginated: rows are per line, so every row is returned.)

        Inner joins drop orders that have no lines; such orders never reach
        the regrouping step.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[OrderFlatRow]: 플랫 행 목록 (Flat rows)
        """
        query: Select[Any] = (
            select(
                Order.id,
                Member.name.label("member_name"),
                Order.order_date,
                Order.status,
                Delivery.city,
                Delivery.street,
                Delivery.zipcode,
                Item.name.label("item_name"),
                OrderItem.order_price,
                OrderItem.count,
            )
            .join(Order.member)
            .join(Order.delivery)
            .join(Order.order_items)
            .join(OrderItem.item)
            .order_by(Order.id, OrderItem.id)
        )
        result = await db.execute(query)

        rows: list[OrderFlatRow] = []
        for order_id, name, order_date, status, city, street, zipcode, item_name, order_price, count in result.all():
            rows.append(
                OrderFlatRow(
                    order_id=order_id,
                    name=name,
                    order_date=order_date,
                    order_status=status.value,
                    address=Address(city, street, zipcode),
                    item_name=item_name,
                    order_price=order_price,
                    count=count,
                )
            )
        return rows


# 싱글턴 인스턴스 — Singleton instance
order_query_repository: OrderQueryRepository = OrderQueryRepository()
