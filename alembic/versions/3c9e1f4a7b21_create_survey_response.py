"""create survey_response

Revision ID: 3c9e1f4a7b21
Revises:
Create Date: 2026-10-18 10:12:44.318902

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3c9e1f4a7b21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'survey_response',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('age_group', sa.String(length=16), nullable=False),
        sa.Column('district', sa.String(length=32), nullable=False),
        sa.Column('topics', postgresql.ARRAY(sa.Text()).with_variant(sa.JSON(), 'sqlite'), nullable=False),
        sa.Column('other_topic', sa.Text(), nullable=True),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('wants_updates', sa.Boolean(), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=True),
        sa.Column('user_agent', sa.Text(), nullable=True),
        sa.Column('ip_hash', sa.String(length=64), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    )
    op.create_index('ix_survey_response_ip_hash', 'survey_response', ['ip_hash'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_survey_response_ip_hash', table_name='survey_response')
    op.drop_table('survey_response')
