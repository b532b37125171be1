"""geography_initial

Revision ID: 1a2b3c4d5e01
Revises:
Create Date: 2026-10-19 10:00:00.000000

Tablas del servicio de geografía: regions, comunas, addresses.
Create the geography service tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '1a2b3c4d5e01'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = ('geography',)
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'regions',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
    )

    # comunas — nombre único dentro de la región (name unique per region)
    op.create_table(
        'comunas',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('region_id', sa.Integer(), sa.ForeignKey('regions.id'), nullable=False),
        sa.UniqueConstraint('region_id', 'name', name='uq_comunas_region_name'),
    )
    op.create_index('ix_comunas_region_id', 'comunas', ['region_id'])

    # addresses — user_id vive en el servicio de usuarios, sin FK
    op.create_table(
        'addresses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('street', sa.String(200), nullable=False),
        sa.Column('number', sa.String(20), nullable=False),
        sa.Column('comuna_id', sa.Integer(), sa.ForeignKey('comunas.id'), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
    )
    op.create_index('ix_addresses_comuna_id', 'addresses', ['comuna_id'])
    op.create_index('ix_addresses_user_id', 'addresses', ['user_id'])


def downgrade() -> None:
    op.drop_index('ix_addresses_user_id', table_name='addresses')
    op.drop_index('ix_addresses_comuna_id', table_name='addresses')
    op.drop_table('addresses')
    op.drop_index('ix_comunas_region_id', table_name='comunas')
    op.drop_table('comunas')
    op.drop_table('regions')
