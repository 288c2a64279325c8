"""Create the person table."""

from __future__ import annotations

from alembic import op

from personapi.db.models import Person

revision = "0001_create_person"
down_revision = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    # the API creates the table on first use; adopt it instead of failing
    Person.__table__.create(bind=op.get_bind(), checkfirst=True)


def downgrade() -> None:
    Person.__table__.drop(bind=op.get_bind(), checkfirst=True)
