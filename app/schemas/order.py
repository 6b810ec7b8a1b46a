"""주문 조회 Pydantic 응답 스키마 정의.

Order read Pydantic response schema definitions.
Every schema holds plain scalars or nested schemas only; no ORM instance is
ever referenced, so responses serialize without lazy-load or cycle issues.
"""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel

from app.models.address import Address


# === 공통 (Common) ===

class AddressResponse(BaseModel):
    """주소 응답 스키마 (Address response schema).

    Attributes:
        city: 도시 (City)
        street: 거리 (Street)
        zipcode: 우편번호 (Zip code)
    """

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None


# === 주문 DTO (Order DTOs) ===

class OrderItemResponse(BaseModel):
    """주문 상품 응답 스키마 — 주문 라인 요약.

    Order line summary.

    Attributes:
        item_name: 상품명 (Item name)
        order_price: 주문 가격 (Price at order time)
        count: 주문 수량 (Quantity)
    """

    item_name: str  # 상품명 (Item name)
    order_price: int  # 주문 가격 (Price at order time)
    count: int  # 주문 수량 (Quantity)


class SimpleOrderResponse(BaseModel):
    """주문 요약 응답 스키마 — 상품 목록 없음.

    Minimal order-only summary (no lines). Used by the to-one endpoints and
    the narrow-column projection.

    Attributes:
        order_id: 주문 ID (Order identifier)
        name: 주문자 이름 (Member name)
        order_date: 주문 시각 (Order timestamp)
        order_status: 주문 상태 (ORDER | CANCEL)
        address: 배송지 (Delivery address)
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: str
    address: AddressResponse | None = None


class OrderResponse(SimpleOrderResponse):
    """주문 응답 스키마 — 주문 라인 포함.

    Order summary with its lines in insertion order.

    Attributes:
        order_items: 주문 상품 목록 (Order lines)
    """

    order_items: list[OrderItemResponse] = []


# === 엔티티 형태 응답 (Entity-shaped responses, v1 only) ===
# 엔티티를 그대로 노출하는 형태 — 엔티티 변경이 곧 API 응답 형태 변경이 되므로 권장하지 않음
# Mirrors the table shape. Discouraged: any column change becomes an API change.

class MemberEntityResponse(BaseModel):
    """회원 엔티티 응답 (Member entity shape)."""

    id: int
    name: str
    address: AddressResponse | None = None


class DeliveryEntityResponse(BaseModel):
    """배송 엔티티 응답 (Delivery entity shape)."""

    id: int
    address: AddressResponse | None = None
    status: str


class ItemEntityResponse(BaseModel):
    """상품 엔티티 응답 (Item entity shape)."""

    id: int
    name: str
    price: int
    stock_quantity: int


class OrderItemEntityResponse(BaseModel):
    """주문 상품 엔티티 응답 — 주문으로의 역참조 없음.

    OrderItem entity shape without the back reference to its order.
    """

    id: int
    item: ItemEntityResponse
    order_price: int
    count: int


class SimpleOrderEntityResponse(BaseModel):
    """주문 엔티티 응답 — 회원/배송까지만 (Order entity shape, to-one only)."""

    id: int
    member: MemberEntityResponse
    delivery: DeliveryEntityResponse
    order_date: datetime
    status: str


class OrderEntityResponse(SimpleOrderEntityResponse):
    """주문 엔티티 응답 — 주문 상품 포함 (Order entity shape with lines)."""

    order_items: list[OrderItemEntityResponse] = []


# === 플랫 조회 행 (Flat query row) ===

@dataclass(frozen=True)
class OrderFlatRow:
    """주문 x 주문상품 조인 결과 한 행.

    One row of the fully flattened order/line query. Order-level columns are
    repeated on every line of the same order.

    Attributes:
        order_id: 주문 ID
        name: 주문자 이름 (Member name)
        order_date: 주문 시각
        order_status: 주문 상태
        address: 배송지 값 객체 (Delivery address, hashable)
        item_name: 상품명
        order_price: 주문 가격
        count: 주문 수량
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: str
    address: Address | None
    item_name: str
    order_price: int
    count: int

    @property
    def order_key(self) -> tuple:
        """주문 레벨 필드 전체로 구성된 그룹 키 (Key over every order-level field)."""
        return (self.order_id, self.name, self.order_date, self.order_status, self.address)
