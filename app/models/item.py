"""상품 SQLAlchemy ORM 모델 정의.

Item SQLAlchemy ORM model definition.

Tables:
    - items: 판매 상품 (Catalog items)
"""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Item(Base):
    """상품 모델.

    Item model — A product that can appear on order lines.

    Attributes:
        id: 고유 식별자 (Auto-increment identifier)
        name: 상품명 (Item name)
        price: 정가 (List price)
        stock_quantity: 재고 수량 (Stock on hand, read-only here)
    """

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_item_price_non_negative"),
        CheckConstraint("stock_quantity >= 0", name="ck_item_stock_non_negative"),
    )
