"""create_user_unions_members

Revision ID: 3b1f6c2d9e4a
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b1f6c2d9e4a'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create account, union and member tables."""
    op.create_table(
        'user',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_user_id', 'user', ['id'])
    op.create_index('ix_user_email', 'user', ['email'], unique=True)

    op.create_table(
        'unions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_by', sa.Integer(), sa.ForeignKey('user.id', ondelete='CASCADE'), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_unions_id', 'unions', ['id'])
    # Backstop for concurrent slug allocation
    op.create_index('ix_unions_slug', 'unions', ['slug'], unique=True)
    op.create_index('ix_unions_created_by', 'unions', ['created_by'])

    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('union_id', sa.Integer(), sa.ForeignKey('unions.id', ondelete='CASCADE'), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('member_number', sa.String(), nullable=True),
        sa.Column(
            'status',
            sa.Enum('active', 'pending', 'inactive', name='member_status'),
            nullable=False,
            server_default='active',
        ),
        sa.Column('date_joined', sa.Date(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_members_id', 'members', ['id'])
    op.create_index('ix_members_union_id', 'members', ['union_id'])


def downgrade() -> None:
    """Drop member, union and account tables."""
    op.drop_index('ix_members_union_id', table_name='members')
    op.drop_index('ix_members_id', table_name='members')
    op.drop_table('members')
    sa.Enum(name='member_status').drop(op.get_bind(), checkfirst=True)
    op.drop_index('ix_unions_created_by', table_name='unions')
    op.drop_index('ix_unions_slug', table_name='unions')
    op.drop_index('ix_unions_id', table_name='unions')
    op.drop_table('unions')
    op.drop_index('ix_user_email', table_name='user')
    op.drop_index('ix_user_id', table_name='user')
    op.drop_table('user')
