"""users_initial

Revision ID: 4d5e6f7a8b04
Revises:
Create Date: 2026-10-19 10:15:00.000000

Tablas del servicio de usuarios: roles, users.
Create the users service tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4d5e6f7a8b04'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = ('users',)
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'roles',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(50), nullable=False, unique=True),
    )

    # users — password guarda el hash bcrypt; status_id sin FK
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('rut', sa.String(12), nullable=False, unique=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('lastname', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(20), nullable=False),
        sa.Column('email', sa.String(100), nullable=False, unique=True),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('profile_photo', sa.String(500), nullable=True),
        sa.Column('role_id', sa.Integer(), sa.ForeignKey('roles.id'), nullable=False),
        sa.Column('status_id', sa.Integer(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('users')
    op.drop_table('roles')
