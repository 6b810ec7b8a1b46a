"""주문 관련 SQLAlchemy ORM 모델 정의.

Order-related SQLAlchemy ORM model definitions.

Tables:
    - orders: 주문 (Order header; many-to-one member, one-to-one delivery)
    - order_items: 주문 상품 (Order lines; many-to-one item)

Loading defaults:
    - Order.member / Order.delivery / Order.order_items: lazy ("select").
      Repositories resolve them explicitly before projection.
    - OrderItem.item: joined. Any load of order lines brings their item in the
      same statement, so loading one order's lines is exactly one round trip.
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Enum, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class OrderStatus(str, enum.Enum):
    """주문 상태 — ORDER: 주문, CANCEL: 취소 (Order status)."""

    ORDER = "ORDER"
    CANCEL = "CANCEL"


class Order(Base):
    """주문 모델.

    Order model — Aggregate root of the read side.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier; ascending id is the canonical order)
        member_id: 주문자 FK (Member foreign key, required)
        delivery_id: 배송 FK (Delivery foreign key, unique, required)
        order_date: 주문 시각 (Order timestamp)
        status: 주문 상태 (ORDER | CANCEL)

    Relationships:
        member: 주문자 (Many-to-one)
        delivery: 배송 정보 (One-to-one)
        order_items: 주문 상품 목록 — id 오름차순 = 입력 순서 (Lines in insertion order)
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("members.id"), nullable=False, index=True)
    delivery_id: Mapped[int] = mapped_column(Integer, ForeignKey("deliveries.id"), nullable=False, unique=True)
    order_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, native_enum=False, length=20),
        nullable=False,
        default=OrderStatus.ORDER,
    )

    member = relationship("Member")
    delivery = relationship("Delivery", single_parent=True, cascade="all, delete-orphan")
    order_items = relationship(
        "OrderItem",
        back_populates="order",
        order_by="OrderItem.id",
        cascade="all, delete-orphan",
    )


class OrderItem(Base):
    """주문 상품 모델.

    OrderItem model — One line of an order.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        order_id: 주문 FK (Order foreign key)
        item_id: 상품 FK (Item foreign key)
        order_price: 주문 당시 가격 (Price at order time)
        count: 주문 수량 (Quantity)
    """

    __tablename__ = "order_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    item_id: Mapped[int] = mapped_column(Integer, ForeignKey("items.id"), nullable=False)
    order_price: Mapped[int] = mapped_column(Integer, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False)

    order = relationship("Order", back_populates="order_items")
    item = relationship("Item", lazy="joined", innerjoin=True)

    __table_args__ = (
        CheckConstraint("order_price >= 0", name="ck_order_item_price_non_negative"),
        CheckConstraint("count >= 0", name="ck_order_item_count_non_negative"),
    )
