"""주문 요약 라우터 — ToOne(회원/배송) 관계만 다루는 엔드포인트.

Simple order Router — Endpoints that only touch the to-one associations
(Order → Member, Order → Delivery).

Endpoints:
    - v1: 엔티티 직접 노출 (entity shape — discouraged)
    - v2: DTO 변환, 회원/배송 개별 로딩 (plain strategy, 1 + 2N)
    - v3: DTO 변환, 회원/배송 fetch join (single query)
    - v4: DTO 직접 조회 (narrow column projection)
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.order import SimpleOrderEntityResponse, SimpleOrderResponse
from app.services.order_service import OrderFetchStrategy, order_service

router: APIRouter = APIRouter()


@router.get("/v1/simple-orders", response_model=list[SimpleOrderEntityResponse])
async def simple_orders_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SimpleOrderEntityResponse]:
    """주문을 회원/배송까지 엔티티 형태로 조회합니다."""
    return await order_service.list_simple_order_entities(db)


@router.get("/v2/simple-orders", response_model=list[SimpleOrderResponse])
async def simple_orders_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SimpleOrderResponse]:
    """엔티티를 조회해 DTO로 변환합니다 — 회원/배송 개별 로딩."""
    return await order_service.list_simple_orders(db, OrderFetchStrategy.PLAIN)


@router.get("/v3/simple-orders", response_model=list[SimpleOrderResponse])
async def simple_orders_v3(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SimpleOrderResponse]:
    """회원/배송을 fetch join 하여 한 번에 조회합니다."""
    return await order_service.list_simple_orders(db, OrderFetchStrategy.TO_ONE_JOIN)


@router.get("/v4/simple-orders", response_model=list[SimpleOrderResponse])
async def simple_orders_v4(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[SimpleOrderResponse]:
    """필요한 컬럼만 DTO로 직접 조회합니다."""
    return await order_service.list_order_summaries(db)
