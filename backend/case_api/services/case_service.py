"""
Case API: Case Service (Validation and Search Dispatch)
=========================================================

What:  Business rules for the /case endpoints.
How:   Validates create requests, fills in default field values, picks the
       repository lookup that matches the supplied search parameters, and
       converts ORM rows into response schemas.
Who:   Called by route handlers; calls CaseRepository.

Search dispatch:
    caseNumber  title   → repository call
    ----------  -----   ---------------------------------------------
    absent      absent  find_all_ordered_by_id
    present     present find_by_case_number_and_title_contains
    present     absent  find_by_case_number
    absent      present find_by_title_contains

    An empty title string counts as absent; caseNumber=0 counts as present.

Lookups by id never raise for a missing case: get_case returns None and
delete_case succeeds either way.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from case_api.exceptions import ValidationError
from case_api.models.case import Case
from case_api.repositories.case_repository import CaseRepository
from case_api.schemas.case import CaseCreate, CaseResponse

logger = logging.getLogger(__name__)


class CaseService:
    """
    Stateless service; every method receives the request's session and
    builds a CaseRepository around it.
    """

    async def list_cases(self, db: AsyncSession) -> List[CaseResponse]:
        """All cases, ascending by id. An empty store gives an empty list."""
        cases = await CaseRepository(db).find_all_ordered_by_id()
        if not cases:
            logger.info("No cases found")
        return self._to_responses(cases)

    async def create_case(
        self, db: AsyncSession, payload: Optional[CaseCreate]
    ) -> CaseResponse:
        """
        Validate and persist a new case.

        Raises:
            ValidationError: body absent, caseNumber absent or 0, or title
                             absent or empty. Nothing is written in that case.
        """
        self._validate_new_case(payload)

        created_date = self._to_stored_time(payload.created_date)

        case = Case(
            case_number=payload.case_number,
            title=payload.title,
            description=payload.description,
            created_date=created_date,
        )
        created = await CaseRepository(db).insert(case)
        return CaseResponse.model_validate(created)

    async def get_case(self, db: AsyncSession, case_id: int) -> Optional[CaseResponse]:
        case = await CaseRepository(db).find_by_id(case_id)
        if case is None:
            logger.info("Case %s not found", case_id)
            return None
        return CaseResponse.model_validate(case)

    async def delete_case(self, db: AsyncSession, case_id: int) -> None:
        await CaseRepository(db).delete_by_id(case_id)

    async def search_cases(
        self,
        db: AsyncSession,
        case_number: Optional[int] = None,
        title: Optional[str] = None,
    ) -> List[CaseResponse]:
        """Dispatch to the lookup matching the supplied parameters."""
        repository = CaseRepository(db)
        has_number = case_number is not None
        has_title = bool(title)

        if not has_number and not has_title:
            logger.info("No search term provided, returning all cases")
            cases = await repository.find_all_ordered_by_id()
        elif has_number and has_title:
            cases = await repository.find_by_case_number_and_title_contains(
                case_number, title
            )
        elif has_number:
            cases = await repository.find_by_case_number(case_number)
        else:
            cases = await repository.find_by_title_contains(title)

        if not cases:
            logger.info("No cases found for the given search criteria")
        return self._to_responses(cases)

    @staticmethod
    def _validate_new_case(payload: Optional[CaseCreate]) -> None:
        if payload is None:
            raise ValidationError(message="Request body is required")
        if not payload.case_number:
            raise ValidationError(message="caseNumber is required", field="caseNumber")
        if not payload.title:
            raise ValidationError(message="title is required", field="title")

    @staticmethod
    def _to_stored_time(value: Optional[datetime]) -> datetime:
        """
        Timestamps are stored as naive UTC. An offset-qualified value is
        converted to UTC, a naive one is taken as UTC already, and an absent
        one becomes the current time.
        """
        if value is None:
            return datetime.now(timezone.utc).replace(tzinfo=None)
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    @staticmethod
    def _to_responses(cases: List[Case]) -> List[CaseResponse]:
        return [CaseResponse.model_validate(case) for case in cases]


case_service = CaseService()
