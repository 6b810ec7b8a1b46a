"""배송 SQLAlchemy ORM 모델 정의.

Delivery SQLAlchemy ORM model definition.

Tables:
    - deliveries: 주문별 배송 정보 (One delivery per order)
"""

import enum

from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column

from app.database import Base
from app.models.address import Address


class DeliveryStatus(str, enum.Enum):
    """배송 상태 — READY: 준비, COMP: 완료 (Delivery status)."""

    READY = "READY"
    COMP = "COMP"


class Delivery(Base):
    """배송 모델 — 주문과 1:1.

    Delivery model — One-to-one with Order (the order owns the FK).

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        address: 배송지 — city/street/zipcode 컬럼 composite (Shipping address)
        status: 배송 상태 (READY | COMP)
    """

    __tablename__ = "deliveries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(20), nullable=True)
    # 배송 상태 — 문자열로 저장 (Stored as VARCHAR, not a native enum type)
    status: Mapped[DeliveryStatus] = mapped_column(
        Enum(DeliveryStatus, native_enum=False, length=20),
        nullable=False,
        default=DeliveryStatus.READY,
    )

    address: Mapped[Address] = composite("city", "street", "zipcode")
