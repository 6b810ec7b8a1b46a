"""주문 조회 라우터 — 조회 전략별 주문 목록 엔드포인트.

Order read Router — One endpoint per retrieval strategy / response shape.
All endpoints are read-only and return JSON arrays in canonical order.

Endpoints:
    - v1: 엔티티 직접 노출 (entity shape, plain strategy — discouraged)
    - v2: 엔티티 → DTO 변환, 연관 엔티티 개별 로딩 (plain strategy)
    - v3: 컬렉션 fetch join — 페이징 불가 (full collection join, no paging)
    - v3.1: ToOne fetch join + 배치 로딩 — 페이징 가능 (batched, paginated)
    - v4: DTO 직접 조회, 주문 상품 제외 (narrow projection, no lines)
    - v5: DTO 직접 조회 + 주문별 상품 조회 (1 + N)
    - v5.1: DTO 직접 조회 + IN 배치 상품 조회
    - v6: 플랫 조회 후 재그룹핑 — 페이징 불가 (flat projection, no paging)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db
from app.schemas.order import OrderEntityResponse, OrderResponse, SimpleOrderResponse
from app.services.order_service import OrderFetchStrategy, order_service

router: APIRouter = APIRouter()


@router.get("/v1/orders", response_model=list[OrderEntityResponse])
async def orders_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderEntityResponse]:
    """주문을 엔티티 형태로 조회합니다.

    Orders in entity shape. Any entity change changes this API.
    """
    return await order_service.list_order_entities(db)


@router.get("/v2/orders", response_model=list[OrderResponse])
async def orders_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderResponse]:
    """엔티티를 조회해 DTO로 변환합니다 (N+1).

    Orders as DTOs; associations loaded per order.
    """
    return await order_service.list_orders(db, OrderFetchStrategy.PLAIN)


@router.get("/v3/orders", response_model=list[OrderResponse])
async def orders_v3(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderResponse]:
    """컬렉션까지 fetch join 하여 한 번에 조회합니다.

    Orders as DTOs from a single collection join. Not paginated.
    """
    return await order_service.list_orders(db, OrderFetchStrategy.COLLECTION_JOIN)


@router.get("/v3.1/orders", response_model=list[OrderResponse])
async def orders_v3_page(
    db: Annotated[AsyncSession, Depends(get_db)],
    offset: Annotated[int, Query()] = 0,
    limit: Annotated[int, Query()] = settings.DEFAULT_PAGE_LIMIT,
) -> list[OrderResponse]:
    """ToOne fetch join + 주문 상품 배치 로딩으로 페이징 조회합니다.

    Paginated orders: to-one join for the page, lines in IN batches.
    Negative offset/limit is rejected with 422.
    """
    return await order_service.list_orders(db, OrderFetchStrategy.BATCH, offset=offset, limit=limit)


@router.get("/v4/orders", response_model=list[SimpleOrderResponse])
async def orders_v4(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SimpleOrderResponse]:
    """필요한 컬럼만 DTO로 직접 조회합니다 (주문 상품 제외).

    Minimal order-only DTOs from a narrow column query.
    """
    return await order_service.list_order_summaries(db)


@router.get("/v5/orders", response_model=list[OrderResponse])
async def orders_v5(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderResponse]:
    """DTO로 직접 조회하고 주문 상품은 주문마다 조회합니다.

    DTO projection of orders, then one line query per order.
    """
    return await order_service.list_order_query_dtos(db)


@router.get("/v5.1/orders", response_model=list[OrderResponse])
async def orders_v5_optimized(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderResponse]:
    """DTO로 직접 조회하고 주문 상품은 IN 쿼리로 한 번에 조회합니다.

    DTO projection of orders, then lines via batched IN queries.
    """
    return await order_service.list_order_query_dtos_optimized(db)


@router.get("/v6/orders", response_model=list[OrderResponse])
async def orders_v6(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderResponse]:
    """플랫 조회 한 번 후 애플리케이션에서 주문 단위로 재그룹핑합니다.

    One flat query, regrouped per order in process. Not paginated.
    """
    return await order_service.list_orders(db, OrderFetchStrategy.FLAT)
