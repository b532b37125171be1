"""shopping_initial

Revision ID: 3c4d5e6f7a03
Revises:
Create Date: 2026-10-19 10:10:00.000000

Tablas del servicio de compras: buys, details.
Create the shopping service tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c4d5e6f7a03'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = ('shopping',)
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # buys — usuario, dirección y estado son referencias remotas
    op.create_table(
        'buys',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('order_number', sa.String(50), nullable=False, unique=True),
        sa.Column('buy_date', sa.BigInteger(), nullable=False),
        sa.Column('subtotal', sa.Integer(), nullable=False),
        sa.Column('iva', sa.Integer(), nullable=False),
        sa.Column('shipping', sa.Integer(), nullable=False),
        sa.Column('total', sa.Integer(), nullable=False),
        sa.Column('payment_method', sa.String(50), nullable=False),
        sa.Column('status_id', sa.Integer(), nullable=False),
        sa.Column('address_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
    )
    op.create_index('ix_buys_buy_date', 'buys', ['buy_date'])
    op.create_index('ix_buys_status_id', 'buys', ['status_id'])
    op.create_index('ix_buys_user_id', 'buys', ['user_id'])

    op.create_table(
        'details',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('buy_id', sa.Integer(), sa.ForeignKey('buys.id'), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_price', sa.Integer(), nullable=False),
        sa.Column('subtotal', sa.Integer(), nullable=False),
    )
    op.create_index('ix_details_buy_id', 'details', ['buy_id'])
    op.create_index('ix_details_product_id', 'details', ['product_id'])


def downgrade() -> None:
    op.drop_index('ix_details_product_id', table_name='details')
    op.drop_index('ix_details_buy_id', table_name='details')
    op.drop_table('details')
    op.drop_index('ix_buys_user_id', table_name='buys')
    op.drop_index('ix_buys_status_id', table_name='buys')
    op.drop_index('ix_buys_buy_date', table_name='buys')
    op.drop_table('buys')
