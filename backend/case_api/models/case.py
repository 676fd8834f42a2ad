"""
Case API: Case SQLAlchemy Model
=================================

What:  ORM model representing the `cases` table.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.
Who:   Used by CaseRepository for every store operation.

Table Design Rationale:
    - Integer identity key: assigned by the database on insert, ascending,
      which gives "list all" its deterministic ordering
    - case_number / title: NOT NULL, enforced again in CaseService before insert
    - description: optional free text
    - created_date: filled by CaseService when the client omits it

Lifecycle:
    Created by POST /case/addCase, never updated, removed by DELETE /case/{id}.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from case_api.database import Base


class Case(Base):
    """A single case record."""

    __tablename__ = "cases"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Identity assigned by the database on insert",
    )

    case_number: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Caller-supplied case number",
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Caller-supplied case title",
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    # Naive UTC; the service normalizes supplied offsets and fills in "now"
    created_date: Mapped[datetime] = mapped_column(
        DateTime(),
        nullable=False,
        comment="When the case was created",
    )

    # ── Indexes ───────────────────────────────────────────────────────────
    # case_number is the only exact-match search column.
    # sqlite_autoincrement: SQLite otherwise reuses the id of a deleted last row
    __table_args__ = (
        Index("idx_cases_case_number", "case_number"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return (
            f"<Case(id={self.id}, case_number={self.case_number}, "
            f"title='{self.title}')>"
        )
