"""주문 엔티티 레포지토리 — 조회 전략별 주문 로딩.

Order entity Repository — Loads Order aggregates under each retrieval strategy.
Every method returns orders whose associations are already resolved inside
the session, in canonical order (Order.id ascending, lines by OrderItem.id).

Strategies (N orders):
    - find_all: 연관 엔티티를 주문마다 개별 로딩 (per-order loads, up to 1 + 3N)
    - find_all_with_member_delivery: ToOne 조인 + 주문 상품 지연 로딩 (1 + N)
    - find_all_with_items: 컬렉션까지 한 번에 조인, 페이징 불가 (1, duplicated rows)
    - find_all_with_member_delivery_batched: ToOne 조인 + IN 배치 로딩 (1 + ceil(N / batch))
"""

from operator import attrgetter
from typing import Any, Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager
from sqlalchemy.orm.attributes import set_committed_value

from app.models.order import Order, OrderItem
from app.repositories.base import BaseRepository
from app.utils.grouping import group_by_ordered
from app.utils.pagination import Window, apply_window


class OrderRepository(BaseRepository[Order]):
    """주문 레포지토리.

    Order repository with one method per retrieval strategy.

    Extends:
        BaseRepository[Order]
    """

    def __init__(self) -> None:
        super().__init__(Order)

    def _with_member_delivery(self) -> Select[Any]:
        """회원/배송을 fetch join 하는 기본 쿼리.

        Base query fetch-joining the to-one associations (Member, Delivery).
        To-one joins never multiply rows, so this query paginates safely.
        """
        return (
            select(Order)
            .join(Order.member)
            .join(Order.delivery)
            .options(contains_eager(Order.member), contains_eager(Order.delivery))
            .order_by(Order.id)
        )

    async def find_all(
        self,
        db: AsyncSession,
        window: Window | None = None,
        with_items: bool = True,
    ) -> Sequence[Order]:
        """주문을 조회한 뒤 연관 엔티티를 주문마다 개별 로딩합니다.

        Plain strategy. One query for the orders, then each association is
        loaded per order: member, delivery and, when ``with_items``, the order
        lines (each line's item arrives joined with it). Members already in
        the identity map are not fetched twice, so N is an upper bound.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            window: 조회 범위 (Offset/limit window)
            with_items: 주문 상품까지 로딩할지 여부 (Whether to resolve order lines)

        Returns:
            Sequence[Order]: 연관 엔티티가 로딩된 주문 목록 (Resolved orders)
        """
        orders: Sequence[Order] = await self.get_all(db, window)
        for order in orders:
            await order.awaitable_attrs.member
            await order.awaitable_attrs.delivery
            if with_items:
                await order.awaitable_attrs.order_items
        return orders

    async def find_all_with_member_delivery(
        self,
        db: AsyncSession,
        window: Window | None = None,
        with_items: bool = True,
    ) -> Sequence[Order]:
        """회원/배송을 fetch join 하고, 주문 상품은 주문마다 로딩합니다.

        Single-association join strategy: 1 query for orders + member +
        delivery, then 1 query per order for its lines when ``with_items``.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            window: 조회 범위 (Offset/limit window)
            with_items: 주문 상품까지 로딩할지 여부 (Whether to resolve order lines)

        Returns:
            Sequence[Order]: 연관 엔티티가 로딩된 주문 목록 (Resolved orders)
        """
        query: Select[Any] = apply_window(self._with_member_delivery(), window or Window())
        result = await db.execute(query)
        orders: Sequence[Order] = result.scalars().all()
        if with_items:
            for order in orders:
                await order.awaitable_attrs.order_items
        return orders

    async def find_all_with_items(self, db: AsyncSession) -> list[Order]:
        """주문/회원/배송/주문상품/상품을 한 번의 조인으로 조회합니다.

        Full collection join strategy. The join against order lines returns
        one row per line, so each order appears once per line. Rows are
        collapsed by order identity in first-seen order and each order's
        lines are attached without further SQL.

        페이징 불가: 행이 주문 상품 수만큼 늘어나므로 OFFSET/LIMIT이 주문 단위로
        동작하지 않음. 전체를 반환합니다.
        (Not paginated: OFFSET/LIMIT would cut joined rows, not orders.
        Always returns every order.)

        Orders without lines are kept (outer join) with an empty list.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            list[Order]: 중복 제거된 주문 목록 (Deduplicated orders)
        """
        query: Select[Any] = (
            select(Order, OrderItem)
            .join(Order.member)
            .join(Order.delivery)
            .outerjoin(Order.order_items)
            .outerjoin(OrderItem.item)
            .options(
                contains_eager(Order.member),
                contains_eager(Order.delivery),
                contains_eager(OrderItem.item),
            )
            .order_by(Order.id, OrderItem.id)
        )
        result = await db.execute(query)

        # 주문 객체 기준 그룹핑 — identity map 덕분에 같은 PK는 같은 객체
        # Group by the Order object; the identity map yields one object per key
        lines_by_order: dict[Order, list[OrderItem]] = group_by_ordered(
            result.all(),
            key=lambda row: row[0],
            value=lambda row: row[1],
        )
        for order, order_items in lines_by_order.items():
            set_committed_value(order, "order_items", order_items)
        return list(lines_by_order)

    async def find_all_with_member_delivery_batched(
        self,
        db: AsyncSession,
        window: Window | None = None,
        batch_size: int = 100,
    ) -> Sequence[Order]:
        """회원/배송을 fetch join 하고, 주문 상품은 IN 쿼리로 배치 로딩합니다.

        Batched lazy load strategy. Pages over orders with the to-one join,
        then loads lines for up to ``batch_size`` orders per IN query.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            window: 조회 범위 (Offset/limit window)
            batch_size: IN 절 당 주문 수 (Orders per IN query, >= 1)

        Returns:
            Sequence[Order]: 연관 엔티티가 로딩된 주문 목록 (Resolved orders)
        """
        query: Select[Any] = apply_window(self._with_member_delivery(), window or Window())
        result = await db.execute(query)
        orders: Sequence[Order] = result.scalars().all()
        await self._load_order_items_in_batches(db, orders, batch_size)
        return orders

    async def _load_order_items_in_batches(
        self,
        db: AsyncSession,
        orders: Sequence[Order],
        batch_size: int,
    ) -> None:
        """주문 상품을 batch_size 단위 IN 쿼리로 로딩하여 각 주문에 붙입니다.

        Load lines for ``orders`` in IN-query batches and attach them.
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be >= 1, got {batch_size}")

        order_ids: list[int] = [order.id for order in orders]
        lines_by_order: dict[int, list[OrderItem]] = {}
        for start in range(0, len(order_ids), batch_size):
            chunk: list[int] = order_ids[start:start + batch_size]
            result = await db.execute(
                select(OrderItem)
                .where(OrderItem.order_id.in_(chunk))
                .order_by(OrderItem.id)
            )
            lines_by_order.update(
                group_by_ordered(result.scalars().all(), key=attrgetter("order_id"), value=lambda line: line)
            )

        for order in orders:
            set_committed_value(order, "order_items", lines_by_order.get(order.id, []))


# 싱글턴 인스턴스 — Singleton instance
order_repository: OrderRepository = OrderRepository()
