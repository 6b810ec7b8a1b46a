"""주소 값 타입 — 회원/배송에 임베드되는 불변 값 객체.

Address value type embedded into Member and Delivery.
Mapped with SQLAlchemy ``composite`` over three columns (city, street, zipcode).
Frozen so that it is hashable and can take part in grouping keys.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """주소 값 객체 (Address value object).

    Attributes:
        city: 도시 (City)
        street: 거리 (Street)
        zipcode: 우편번호 (Zip code)
    """

    city: str | None
    street: str | None
    zipcode: str | None
