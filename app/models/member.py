"""회원 SQLAlchemy ORM 모델 정의.

Member SQLAlchemy ORM model definition.

Tables:
    - members: 주문자 (Customers placing orders)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column

from app.database import Base
from app.models.address import Address


class Member(Base):
    """회원 모델 — 주문의 주문자.

    Member model — The customer who places an order.
    Orders reference members (many-to-one); members hold no back reference
    so that nothing serialized from a member can cycle back to its orders.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        name: 회원 이름 (Member name)
        address: 회원 주소 — city/street/zipcode 컬럼 composite (Embedded address)
    """

    __tablename__ = "members"

    # 회원 고유 식별자 — Member identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 회원 이름 — Member display name
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 주소 컬럼 — Address columns
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(20), nullable=True)

    address: Mapped[Address] = composite("city", "street", "zipcode")
