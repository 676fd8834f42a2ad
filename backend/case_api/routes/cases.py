"""
Case API: Case Route Handlers
===============================

What:  The /case endpoints: list, create, fetch, delete, search.
How:   Extracts path/query/body input, delegates to CaseService, returns JSON.

Endpoint summary:
    GET    /case/getAllCases   → all cases, ascending id
    POST   /case/addCase       → created case (400 on missing caseNumber/title)
    GET    /case/searchCases   → cases matching caseNumber and/or title
    GET    /case/{case_id}     → the case, or 200 with an empty body
    DELETE /case/{case_id}     → 200 with an empty body, even if absent

The static paths are registered before /{case_id} so that "getAllCases"
and "searchCases" are never parsed as an id.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from case_api.database import get_db_session
from case_api.schemas.case import (
    CASE_NUMBER_MAX,
    CASE_NUMBER_MIN,
    CaseCreate,
    CaseResponse,
    ErrorResponse,
)
from case_api.services.case_service import case_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/case", tags=["Cases"])


@router.get(
    "/getAllCases",
    response_model=List[CaseResponse],
    summary="List all cases",
    description="Returns every case ordered by id ascending. Empty array when there are none.",
)
async def get_all_cases(
    db: AsyncSession = Depends(get_db_session),
) -> List[CaseResponse]:
    return await case_service.list_cases(db)


@router.post(
    "/addCase",
    response_model=CaseResponse,
    responses={
        200: {"description": "The created case with its assigned id", "model": CaseResponse},
        400: {"description": "Missing body, caseNumber or title", "model": ErrorResponse},
    },
    summary="Create a case",
)
async def add_case(
    payload: Optional[CaseCreate] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> CaseResponse:
    """
    Create a case. `createdDate` defaults to the current time when omitted;
    any `id` in the body is ignored.
    """
    return await case_service.create_case(db, payload)


@router.get(
    "/searchCases",
    response_model=List[CaseResponse],
    summary="Search cases by case number and/or title",
    description=(
        "Filters by exact caseNumber and/or case-insensitive title substring. "
        "With both parameters, a case must match both. With neither, all cases "
        "are returned ordered by id."
    ),
)
async def search_cases(
    case_number: Optional[int] = Query(
        default=None, alias="caseNumber", ge=CASE_NUMBER_MIN, le=CASE_NUMBER_MAX
    ),
    title: Optional[str] = Query(default=None),
    db: AsyncSession = Depends(get_db_session),
) -> List[CaseResponse]:
    return await case_service.search_cases(db, case_number=case_number, title=title)


@router.get(
    "/{case_id}",
    response_model=CaseResponse,
    responses={
        200: {"description": "The case, or an empty body when no case has this id"},
    },
    summary="Get a case by id",
)
async def get_case(
    case_id: int,
    db: AsyncSession = Depends(get_db_session),
):
    """A missing case is not an error: the response is 200 with no body."""
    case = await case_service.get_case(db, case_id)
    if case is None:
        return Response(status_code=200)
    return case


@router.delete(
    "/{case_id}",
    status_code=200,
    response_class=Response,
    summary="Delete a case by id",
    description="Always returns 200 with an empty body, whether or not the case existed.",
)
async def delete_case(
    case_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await case_service.delete_case(db, case_id)
    return Response(status_code=200)
