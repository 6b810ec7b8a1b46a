"""API 라우터 패키지 — 모든 조회 엔드포인트 통합.

API Router package — Aggregates all read endpoints into a single router
for inclusion in the FastAPI application.

Included routers:
    - orders: 주문 + 주문 상품 조회 (Orders with lines, v1 ~ v6)
    - simple_orders: 주문 요약 조회 (To-one only order summaries, v1 ~ v4)
"""

from fastapi import APIRouter

from app.api.orders import router as orders_router
from app.api.simple_orders import router as simple_orders_router

api_router: APIRouter = APIRouter()

api_router.include_router(orders_router, tags=["Orders"])
api_router.include_router(simple_orders_router, tags=["Simple Orders"])
