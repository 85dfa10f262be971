"""Create users and subscriptions tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users and subscriptions tables"""

    # 1. Create users table
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(255), nullable=False),
        sa.Column('version', sa.Integer(), server_default='0', nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('username', name='uq_users_username'),
        sqlite_autoincrement=True,
    )

    # 2. Create subscriptions table
    op.create_table('subscriptions',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('version', sa.Integer(), server_default='0', nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_subscriptions'),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.id'],
            name='fk_subscriptions_user_id_users',
            ondelete='CASCADE',
        ),
        sa.UniqueConstraint('user_id', 'name', name='uq_subscriptions_user_id_name'),
        sqlite_autoincrement=True,
    )

    op.create_index('ix_subscriptions_user_id', 'subscriptions', ['user_id'])
    op.create_index('ix_subscriptions_name', 'subscriptions', ['name'])


def downgrade() -> None:
    """Drop users and subscriptions tables"""
    op.drop_index('ix_subscriptions_name', table_name='subscriptions')
    op.drop_index('ix_subscriptions_user_id', table_name='subscriptions')
    op.drop_table('subscriptions')
    op.drop_table('users')
