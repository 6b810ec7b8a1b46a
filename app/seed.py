"""초기 데이터 시드 스크립트 — 회원, 상품, 주문 샘플 생성.

Seed script — Creates sample members, items and orders.
Run this script once to bootstrap the database with demo data.

Usage:
    python -m app.seed

Creates:
    - 2명 회원: userA(서울), userB(부산) (2 members)
    - 4개 상품: JPA1/JPA2/SPRING1/SPRING2 BOOK (4 items)
    - 2개 주문: 회원별 1건, 주문당 상품 2개 (2 orders, 2 lines each)
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import async_session, engine, Base
from app.models import Delivery, Item, Member, Order, OrderItem
from app.models.address import Address
from app.repositories.order_repository import order_repository


def build_order(member: Member, address: Address, lines: list[tuple[Item, int, int]]) -> Order:
    """주문 한 건을 구성합니다.

    Build one order for ``member`` delivered to ``address``.

    Args:
        member: 주문자 (Ordering member)
        address: 배송지 (Delivery address)
        lines: (상품, 주문 가격, 수량) 목록 ((item, order price, count) per line)
    """
    return Order(
        member=member,
        delivery=Delivery(address=address),
        order_items=[
            OrderItem(item=item, order_price=order_price, count=count)
            for item, order_price, count in lines
        ],
    )


async def seed_orders(db: AsyncSession) -> list[Order]:
    """샘플 회원/상품/주문을 세션에 추가합니다 (커밋하지 않음).

    Add the sample data set to ``db`` and flush. The caller commits.
    """
    seoul = Address("서울", "1", "1111")
    busan = Address("부산", "2", "2222")
    user_a = Member(name="userA", address=seoul)
    user_b = Member(name="userB", address=busan)

    jpa1 = Item(name="JPA1 BOOK", price=10000, stock_quantity=100)
    jpa2 = Item(name="JPA2 BOOK", price=20000, stock_quantity=100)
    spring1 = Item(name="SPRING1 BOOK", price=20000, stock_quantity=200)
    spring2 = Item(name="SPRING2 BOOK", price=40000, stock_quantity=300)

    orders: list[Order] = [
        build_order(user_a, seoul, [(jpa1, 10000, 1), (jpa2, 20000, 2)]),
        build_order(user_b, busan, [(spring1, 20000, 3), (spring2, 40000, 4)]),
    ]
    db.add_all(orders)
    await db.flush()
    return orders


async def seed() -> None:
    """데이터베이스를 샘플 데이터로 시드합니다.

    Seed the database with the sample data set.
    Creates tables if they don't exist.

    Idempotent: 이미 주문이 있으면 건너뜁니다 (Skips if any order exists).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if await order_repository.count(db):
            print("Already seeded. Skipping.")
            return

        orders: list[Order] = await seed_orders(db)
        await db.commit()
        print(f"Seeded: orders={[order.id for order in orders]}")


if __name__ == "__main__":
    asyncio.run(seed())
