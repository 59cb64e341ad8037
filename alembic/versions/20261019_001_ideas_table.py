"""Ideas table - v1.0

Revision ID: 001_ideas_table
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from snowflake.sqlalchemy import VARIANT

# revision identifiers, used by Alembic.
revision: str = '001_ideas_table'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the idea record store."""
    op.create_table(
        'ideas',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('owner_id', sa.String(128), nullable=False),
        sa.Column('owner_email', sa.String(320), nullable=True),
        sa.Column('owner_name', sa.String(255), nullable=True),
        sa.Column('idea_text', sa.Text(), nullable=False),
        sa.Column('contact', VARIANT, nullable=True),
        sa.Column('analysis', VARIANT, nullable=True),
        sa.Column('submitted_at', sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('ideas')
