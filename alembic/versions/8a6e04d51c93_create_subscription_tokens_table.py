"""create_subscription_tokens_table

Revision ID: 8a6e04d51c93
Revises: 3f1c9a2b7d40
Create Date: 2026-09-30 15:47:02.093518

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8a6e04d51c93'
down_revision: Union[str, None] = '3f1c9a2b7d40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the subscription_tokens table, one row per issued token."""
    op.create_table(
        'subscription_tokens',
        sa.Column('subscription_token', sa.String(), nullable=False),
        sa.Column('subscriber_id', sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(['subscriber_id'], ['subscriptions.id']),
        sa.PrimaryKeyConstraint('subscription_token'),
    )
    op.create_index(
        op.f('ix_subscription_tokens_subscriber_id'),
        'subscription_tokens',
        ['subscriber_id'],
        unique=False,
    )


def downgrade() -> None:
    """Drop the subscription_tokens table."""
    op.drop_index(op.f('ix_subscription_tokens_subscriber_id'), table_name='subscription_tokens')
    op.drop_table('subscription_tokens')
