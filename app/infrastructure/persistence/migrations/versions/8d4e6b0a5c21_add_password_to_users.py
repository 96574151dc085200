"""add_password_to_users

Adds the bcrypt hash column. Apply before deploying the build that accepts
passwords. Nullable: users created without a password keep NULL.

Revision ID: 8d4e6b0a5c21
Revises: 3f1a9c2e7b10
Create Date: 2025-04-01 00:23:07.023000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8d4e6b0a5c21"
down_revision: Union[str, Sequence[str], None] = "3f1a9c2e7b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "users",
        sa.Column("password", sa.String(length=255), nullable=True),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_column("users", "password")
