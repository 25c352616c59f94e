"""create participants table

Revision ID: 3f9a1c2b7d41
Revises:
Create Date: 2025-09-02 18:12:05.114372

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '3f9a1c2b7d41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # SERIAL ids come from a sequence and are never reused after a delete
    op.execute("""
        CREATE TABLE IF NOT EXISTS participants (
            id SERIAL PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            email VARCHAR(255) NOT NULL,
            phone VARCHAR(50) NOT NULL,
            company VARCHAR(255) NOT NULL,
            score DOUBLE PRECISION CHECK (score IS NULL OR score >= 0),
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW()
        )
    """)

    op.execute('CREATE UNIQUE INDEX IF NOT EXISTS uq_participants_email_lower ON participants(lower(email))')
    op.execute('CREATE INDEX IF NOT EXISTS idx_participants_score ON participants(score DESC)')


def downgrade() -> None:
    """Downgrade schema."""
    op.execute('DROP INDEX IF EXISTS idx_participants_score')
    op.execute('DROP INDEX IF EXISTS uq_participants_email_lower')
    op.execute('DROP TABLE IF EXISTS participants')
