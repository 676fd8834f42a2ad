"""
Case API: Case Repository
===========================

What:  Persistence operations for the `cases` table.
How:   Wraps one AsyncSession (the request's session) and issues exactly one
       statement per call. Commit and rollback belong to get_db_session.
Who:   Constructed per request by CaseService.

Query plans:
    find_by_id:              WHERE id = :id                → primary key lookup
    find_all_ordered_by_id:  ORDER BY id ASC               → primary key scan
    find_by_case_number:     WHERE case_number = :n        → idx_cases_case_number
    find_by_title_contains:  WHERE lower(title) LIKE lower('%' || :s || '%')

Filtered lookups are also ordered by id so that repeated searches enumerate
matches in the same order.
"""

import logging
from typing import List, Optional

from sqlalchemy import Select, delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from case_api.exceptions import DatabaseError
from case_api.models.case import Case

logger = logging.getLogger(__name__)


class CaseRepository:
    """Store contract for Case records."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, case: Case) -> Case:
        """
        Persist a new case and return it with its assigned id.

        The flush sends the INSERT so the database assigns the identity
        without committing; the commit happens in get_db_session.
        """
        try:
            self.db.add(case)
            await self.db.flush()
        except SQLAlchemyError as e:
            logger.error("Failed to insert case: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not save the case. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e
        logger.info("Case %s inserted (case_number=%s)", case.id, case.case_number)
        return case

    async def delete_by_id(self, case_id: int) -> None:
        """Delete the case with this id. A missing id deletes nothing."""
        try:
            result = await self.db.execute(delete(Case).where(Case.id == case_id))
        except SQLAlchemyError as e:
            logger.error("Failed to delete case %s: %s", case_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not delete the case. Please try again.",
                context={"case_id": case_id},
            ) from e
        logger.info("Delete case %s: %d row(s) removed", case_id, result.rowcount)

    async def find_by_id(self, case_id: int) -> Optional[Case]:
        try:
            result = await self.db.execute(select(Case).where(Case.id == case_id))
        except SQLAlchemyError as e:
            logger.error("Failed to fetch case %s: %s", case_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve the case. Please try again.",
                context={"case_id": case_id},
            ) from e
        return result.scalar_one_or_none()

    async def find_all_ordered_by_id(self) -> List[Case]:
        return await self._fetch_all(select(Case))

    async def find_by_case_number(self, case_number: int) -> List[Case]:
        return await self._fetch_all(
            select(Case).where(Case.case_number == case_number)
        )

    async def find_by_title_contains(self, title: str) -> List[Case]:
        """Case-insensitive substring match; `%` and `_` match literally."""
        return await self._fetch_all(
            select(Case).where(Case.title.icontains(title, autoescape=True))
        )

    async def find_by_case_number_and_title_contains(
        self, case_number: int, title: str
    ) -> List[Case]:
        return await self._fetch_all(
            select(Case).where(
                Case.case_number == case_number,
                Case.title.icontains(title, autoescape=True),
            )
        )

    async def count(self) -> int:
        try:
            result = await self.db.execute(select(func.count(Case.id)))
        except SQLAlchemyError as e:
            logger.error("Failed to count cases: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not count cases. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e
        return result.scalar_one()

    async def _fetch_all(self, query: Select) -> List[Case]:
        """Run a Case query ordered by id and return every row."""
        try:
            result = await self.db.execute(query.order_by(Case.id.asc()))
        except SQLAlchemyError as e:
            logger.error("Case query failed: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve cases. Please try again.",
                context={"error_type": type(e).__name__},
            ) from e
        return list(result.scalars().all())
