"""주문 조회 서비스 — 조회 전략 선택, DTO 변환, 플랫 결과 재그룹핑.

Order read Service — Strategy selection, DTO projection, flat-row regrouping.
Repositories resolve every association inside the session first; this
service then projects resolved records into response DTOs (resolve-then-project).
"""

import enum
from typing import Any, Iterable, Sequence

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.address import Address
from app.models.order import Order, OrderItem
from app.repositories.order_query_repository import order_query_repository
from app.repositories.order_repository import order_repository
from app.schemas.order import (
    AddressResponse,
    DeliveryEntityResponse,
    ItemEntityResponse,
    MemberEntityResponse,
    OrderEntityResponse,
    OrderFlatRow,
    OrderItemEntityResponse,
    OrderItemResponse,
    OrderResponse,
    SimpleOrderEntityResponse,
    SimpleOrderResponse,
)
from app.utils.exceptions import DetachedAccessError
from app.utils.grouping import group_by_ordered
from app.utils.pagination import Window, validate_window


class OrderFetchStrategy(str, enum.Enum):
    """주문 조회 전략 (Order retrieval strategy).

    PLAIN: 연관 엔티티 주문별 로딩 (per-order association loads)
    TO_ONE_JOIN: 회원/배송 fetch join + 주문 상품 주문별 로딩
    COLLECTION_JOIN: 컬렉션까지 fetch join — 페이징 불가 (no pagination)
    BATCH: 회원/배송 fetch join + 주문 상품 IN 배치 로딩
    FLAT: 플랫 조회 후 재그룹핑 — 페이징 불가 (no pagination)
    """

    PLAIN = "plain"
    TO_ONE_JOIN = "to_one_join"
    COLLECTION_JOIN = "collection_join"
    BATCH = "batch"
    FLAT = "flat"

    @property
    def supports_pagination(self) -> bool:
        return self not in (OrderFetchStrategy.COLLECTION_JOIN, OrderFetchStrategy.FLAT)


class OrderService:
    """주문 조회 비즈니스 로직을 처리하는 서비스.

    Service handling order reads. Each public ``list_*`` method backs one
    endpoint; ``list_orders`` is the strategy-selecting entry point.
    """

    # ------------------------------------------------------------------
    # 로딩 상태 확인 — Load-state guard
    # ------------------------------------------------------------------

    def _require_loaded(self, entity: Any, *attributes: str) -> None:
        """엔티티 속성이 세션 안에서 로딩되었는지 확인합니다.

        Verify that ``attributes`` of ``entity`` were loaded while the session
        was open. An unloaded attribute would otherwise trigger IO outside
        the session or come back empty.

        Raises:
            DetachedAccessError: 로딩되지 않은 속성이 있을 때 (Attribute not resolved)
        """
        state = inspect(entity)
        missing: list[str] = [name for name in attributes if name in state.unloaded]
        if missing:
            where: str = "after its session closed" if state.detached else "without being resolved first"
            raise DetachedAccessError(
                f"{type(entity).__name__}.{missing[0]} accessed {where}"
            )

    # ------------------------------------------------------------------
    # DTO 변환 — Projection builder
    # ------------------------------------------------------------------

    def _to_address(self, address: Address | None) -> AddressResponse | None:
        if address is None:
            return None
        return AddressResponse(city=address.city, street=address.street, zipcode=address.zipcode)

    def _to_item_response(self, order_item: OrderItem) -> OrderItemResponse:
        self._require_loaded(order_item, "order_price", "count", "item")
        self._require_loaded(order_item.item, "name")
        return OrderItemResponse(
            item_name=order_item.item.name,
            order_price=order_item.order_price,
            count=order_item.count,
        )

    def to_simple_response(self, order: Order) -> SimpleOrderResponse:
        """주문 엔티티를 요약 응답으로 변환합니다 (주문 상품 제외).

        Convert a resolved Order into a SimpleOrderResponse.

        Raises:
            DetachedAccessError: 회원/배송이 로딩되지 않았을 때 (Member/Delivery not resolved)
        """
        self._require_loaded(order, "id", "order_date", "status", "member", "delivery")
        self._require_loaded(order.member, "name")
        self._require_loaded(order.delivery, "city", "street", "zipcode")
        return SimpleOrderResponse(
            order_id=order.id,
            name=order.member.name,
            order_date=order.order_date,
            order_status=order.status.value,
            address=self._to_address(order.delivery.address),
        )

    def to_response(self, order: Order) -> OrderResponse:
        """주문 엔티티를 주문 응답으로 변환합니다.

        Convert a resolved Order into an OrderResponse. Lines keep the order
        of ``order.order_items``.

        Args:
            order: 연관 엔티티가 로딩된 주문 (Resolved order)

        Returns:
            OrderResponse: 주문 응답 (Order response)

        Raises:
            DetachedAccessError: 연관 엔티티가 로딩되지 않았을 때 (Association not resolved)
        """
        summary: SimpleOrderResponse = self.to_simple_response(order)
        self._require_loaded(order, "order_items")
        return OrderResponse(
            **summary.model_dump(),
            order_items=[self._to_item_response(oi) for oi in order.order_items],
        )

    def to_simple_entity_response(self, order: Order) -> SimpleOrderEntityResponse:
        """주문 엔티티를 엔티티 형태 그대로 변환합니다 (회원/배송까지).

        Mirror the Order entity shape down to its to-one associations.
        """
        self._require_loaded(order, "id", "order_date", "status", "member", "delivery")
        member = order.member
        delivery = order.delivery
        self._require_loaded(member, "id", "name", "city", "street", "zipcode")
        self._require_loaded(delivery, "id", "city", "street", "zipcode", "status")
        return SimpleOrderEntityResponse(
            id=order.id,
            member=MemberEntityResponse(id=member.id, name=member.name, address=self._to_address(member.address)),
            delivery=DeliveryEntityResponse(
                id=delivery.id,
                address=self._to_address(delivery.address),
                status=delivery.status.value,
            ),
            order_date=order.order_date,
            status=order.status.value,
        )

    def to_entity_response(self, order: Order) -> OrderEntityResponse:
        """주문 엔티티를 엔티티 형태 그대로 변환합니다 (주문 상품 포함).

        Mirror the whole Order aggregate. Lines carry no back reference.
        """
        simple: SimpleOrderEntityResponse = self.to_simple_entity_response(order)
        self._require_loaded(order, "order_items")
        order_items: list[OrderItemEntityResponse] = []
        for oi in order.order_items:
            self._require_loaded(oi, "id", "order_price", "count", "item")
            self._require_loaded(oi.item, "id", "name", "price", "stock_quantity")
            order_items.append(
                OrderItemEntityResponse(
                    id=oi.id,
                    item=ItemEntityResponse(
                        id=oi.item.id,
                        name=oi.item.name,
                        price=oi.item.price,
                        stock_quantity=oi.item.stock_quantity,
                    ),
                    order_price=oi.order_price,
                    count=oi.count,
                )
            )
        return OrderEntityResponse(**simple.model_dump(), order_items=order_items)

    # ------------------------------------------------------------------
    # 플랫 결과 재그룹핑 — Flat-result regrouping
    # ------------------------------------------------------------------

    def regroup_flat(self, rows: Iterable[OrderFlatRow]) -> list[OrderResponse]:
        """플랫 행을 주문 단위로 다시 묶습니다.

        Invert the duplication of a flat query. Rows are grouped by every
        order-level field (order_id, name, order_date, order_status, address);
        groups come out in first-occurrence order and lines in encounter order.
        Grouping by the full tuple equals grouping by order_id as long as the
        order-level fields depend only on order_id.

        Args:
            rows: 주문 x 주문상품 플랫 행 (One row per order line)

        Returns:
            list[OrderResponse]: 주문 목록 (One response per distinct order key)
        """
        groups: dict[tuple, list[OrderItemResponse]] = group_by_ordered(
            rows,
            key=lambda row: row.order_key,
            value=lambda row: OrderItemResponse(
                item_name=row.item_name,
                order_price=row.order_price,
                count=row.count,
            ),
        )
        return [
            OrderResponse(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=order_status,
                address=self._to_address(address),
                order_items=lines,
            )
            for (order_id, name, order_date, order_status, address), lines in groups.items()
        ]

    # ------------------------------------------------------------------
    # 조회 전략 선택 — Strategy selection
    # ------------------------------------------------------------------

    async def _fetch(
        self,
        db: AsyncSession,
        strategy: OrderFetchStrategy,
        window: Window,
    ) -> Sequence[Order]:
        if strategy is OrderFetchStrategy.PLAIN:
            return await order_repository.find_all(db, window)
        if strategy is OrderFetchStrategy.TO_ONE_JOIN:
            return await order_repository.find_all_with_member_delivery(db, window)
        if strategy is OrderFetchStrategy.COLLECTION_JOIN:
            return await order_repository.find_all_with_items(db)
        if strategy is OrderFetchStrategy.BATCH:
            return await order_repository.find_all_with_member_delivery_batched(
                db, window, batch_size=settings.BATCH_FETCH_SIZE
            )
        raise ValueError(f"Strategy {strategy.value} does not load Order entities")

    async def list_orders(
        self,
        db: AsyncSession,
        strategy: OrderFetchStrategy = OrderFetchStrategy.BATCH,
        offset: int | None = 0,
        limit: int | None = None,
    ) -> list[OrderResponse]:
        """선택한 전략으로 주문 목록을 조회하여 응답으로 변환합니다.

        List orders with the given strategy and project them to responses.

        COLLECTION_JOIN과 FLAT은 페이징을 지원하지 않으므로 offset/limit을 무시하고
        항상 전체 주문을 반환합니다. 메모리 페이징도 하지 않습니다.
        (COLLECTION_JOIN and FLAT ignore offset/limit and always return every
        order; they never paginate in memory either.) The window is still
        validated for every strategy.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            strategy: 조회 전략 (Retrieval strategy)
            offset: 건너뛸 주문 수 (Orders to skip, default 0)
            limit: 최대 주문 수, None이면 제한 없음 (Max orders; None for unbounded)

        Returns:
            list[OrderResponse]: 주문 응답 목록, 정렬 순서 유지 (Responses in canonical order)

        Raises:
            ValidationError: offset/limit이 음수일 때 (Negative offset or limit)
        """
        window: Window = validate_window(offset, limit)

        if strategy is OrderFetchStrategy.FLAT:
            rows: list[OrderFlatRow] = await order_query_repository.find_all_flat(db)
            return self.regroup_flat(rows)

        orders: Sequence[Order] = await self._fetch(db, strategy, window)
        return [self.to_response(order) for order in orders]

    async def list_order_entities(self, db: AsyncSession) -> list[OrderEntityResponse]:
        """주문을 엔티티 형태로 조회합니다 (권장하지 않음).

        List orders in entity shape via the plain strategy (discouraged).
        """
        orders: Sequence[Order] = await order_repository.find_all(db)
        return [self.to_entity_response(order) for order in orders]

    async def list_simple_orders(
        self,
        db: AsyncSession,
        strategy: OrderFetchStrategy = OrderFetchStrategy.TO_ONE_JOIN,
    ) -> list[SimpleOrderResponse]:
        """회원/배송까지만 로딩하여 주문 요약 목록을 조회합니다.

        List order summaries resolving only the to-one associations.
        Only PLAIN and TO_ONE_JOIN apply here.

        Raises:
            ValueError: 지원하지 않는 전략일 때 (Unsupported strategy)
        """
        if strategy is OrderFetchStrategy.PLAIN:
            orders = await order_repository.find_all(db, with_items=False)
        elif strategy is OrderFetchStrategy.TO_ONE_JOIN:
            orders = await order_repository.find_all_with_member_delivery(db, with_items=False)
        else:
            raise ValueError(f"Strategy {strategy.value} is not a to-one strategy")
        return [self.to_simple_response(order) for order in orders]

    async def list_simple_order_entities(self, db: AsyncSession) -> list[SimpleOrderEntityResponse]:
        """주문을 회원/배송까지의 엔티티 형태로 조회합니다 (권장하지 않음).

        List orders in entity shape, to-one only (discouraged).
        """
        orders: Sequence[Order] = await order_repository.find_all(db, with_items=False)
        return [self.to_simple_entity_response(order) for order in orders]

    async def list_order_summaries(self, db: AsyncSession) -> list[SimpleOrderResponse]:
        """주문 요약을 DTO로 직접 조회합니다 (Narrow column projection)."""
        return await order_query_repository.find_order_summaries(db)

    async def list_order_query_dtos(self, db: AsyncSession) -> list[OrderResponse]:
        """주문을 DTO로 직접 조회합니다 — 주문 상품은 주문마다 조회 (1 + N)."""
        return await order_query_repository.find_order_query_dtos(db)

    async def list_order_query_dtos_optimized(self, db: AsyncSession) -> list[OrderResponse]:
        """주문을 DTO로 직접 조회합니다 — 주문 상품은 IN 쿼리로 배치 조회."""
        return await order_query_repository.find_order_query_dtos_optimized(
            db, batch_size=settings.BATCH_FETCH_SIZE
        )


# 싱글턴 인스턴스 — Singleton instance
order_service: OrderService = OrderService()
