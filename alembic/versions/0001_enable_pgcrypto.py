"""enable pgcrypto

Revision ID: 0001_enable_pgcrypto
Revises: None
Create Date: 2025-09-01

gen_random_uuid() backs the uuid primary keys of every table.
"""

from alembic import op


revision = "0001_enable_pgcrypto"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')


def downgrade() -> None:
    # Other schemas may rely on the extension; leave it installed
    pass
