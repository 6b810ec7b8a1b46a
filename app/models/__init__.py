"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    address: 주소 값 타입 (Embedded Address value)
    member: 회원 (Member)
    item: 상품 (Item)
    delivery: 배송 (Delivery, DeliveryStatus)
    order: 주문 및 주문 상품 (Order, OrderItem, OrderStatus)
"""

from app.models.address import Address
from app.models.member import Member
from app.models.item import Item
from app.models.delivery import Delivery, DeliveryStatus
from app.models.order import Order, OrderItem, OrderStatus

__all__ = [
    "Address",
    "Member",
    "Item",
    "Delivery", "DeliveryStatus",
    "Order", "OrderItem", "OrderStatus",
]
