"""create_order_tables

Revision ID: a1c2e3f4b5d6
Revises:
Create Date: 2026-10-19 10:00:00.000000

주문 조회 테이블 생성: members, items, deliveries, orders, order_items.
Create order read tables: members, items, deliveries, orders, order_items.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c2e3f4b5d6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # members — 회원 (주소는 city/street/zipcode 컬럼으로 임베드)
    # Members with an embedded address
    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('city', sa.String(255), nullable=True),
        sa.Column('street', sa.String(255), nullable=True),
        sa.Column('zipcode', sa.String(20), nullable=True),
    )

    # items — 상품 (Catalog items)
    op.create_table(
        'items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('price', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.CheckConstraint('price >= 0', name='ck_item_price_non_negative'),
        sa.CheckConstraint('stock_quantity >= 0', name='ck_item_stock_non_negative'),
    )

    # deliveries — 배송 (One per order)
    op.create_table(
        'deliveries',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('city', sa.String(255), nullable=True),
        sa.Column('street', sa.String(255), nullable=True),
        sa.Column('zipcode', sa.String(20), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='READY'),
    )

    # orders — 주문 (member many-to-one, delivery one-to-one)
    op.create_table(
        'orders',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id'), nullable=False),
        sa.Column('delivery_id', sa.Integer(), sa.ForeignKey('deliveries.id'), nullable=False, unique=True),
        sa.Column('order_date', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('status', sa.String(20), nullable=False, server_default='ORDER'),
    )
    op.create_index('ix_orders_member_id', 'orders', ['member_id'])

    # order_items — 주문 상품 (Order lines, id ascending = insertion order)
    op.create_table(
        'order_items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('order_id', sa.Integer(), sa.ForeignKey('orders.id', ondelete='CASCADE'), nullable=False),
        sa.Column('item_id', sa.Integer(), sa.ForeignKey('items.id'), nullable=False),
        sa.Column('order_price', sa.Integer(), nullable=False),
        sa.Column('count', sa.Integer(), nullable=False),
        sa.CheckConstraint('order_price >= 0', name='ck_order_item_price_non_negative'),
        sa.CheckConstraint('count >= 0', name='ck_order_item_count_non_negative'),
    )
    op.create_index('ix_order_items_order_id', 'order_items', ['order_id'])


def downgrade() -> None:
    op.drop_index('ix_order_items_order_id', table_name='order_items')
    op.drop_table('order_items')
    op.drop_index('ix_orders_member_id', table_name='orders')
    op.drop_table('orders')
    op.drop_table('deliveries')
    op.drop_table('items')
    op.drop_table('members')
