"""Create cases table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `cases` table and its case_number index.
Rollback: downgrade() drops the table (all case data is lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "cases",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Identity assigned by the database on insert",
        ),
        sa.Column(
            "case_number",
            sa.Integer(),
            nullable=False,
            comment="Caller-supplied case number",
        ),
        sa.Column(
            "title",
            sa.String(255),
            nullable=False,
            comment="Caller-supplied case title",
        ),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "created_date",
            sa.DateTime(),
            nullable=False,
            comment="When the case was created",
        ),
        sa.PrimaryKeyConstraint("id"),
        sqlite_autoincrement=True,
    )

    op.create_index("idx_cases_case_number", "cases", ["case_number"])


def downgrade() -> None:
    op.drop_index("idx_cases_case_number", table_name="cases")
    op.drop_table("cases")
