"""
Case API: Case Service Unit Tests
===================================

What:  Tests for CaseService validation, defaults and search dispatch.
How:   CaseRepository is patched, so every test asserts which store call the
       service made and how it shaped the result. No database involved.

What we test:
    ✅ list returns repository order; empty store gives an empty list
    ✅ create rejects missing body / caseNumber / title and writes nothing
    ✅ create fills createdDate only when omitted
    ✅ get returns None for a missing id; delete always delegates
    ✅ search picks the lookup matching the supplied parameters
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from case_api.exceptions import ValidationError
from case_api.models.case import Case
from case_api.schemas.case import CaseCreate
from case_api.services.case_service import CaseService


def make_case(case_id, case_number=12345, title="Case1", description=None):
    return Case(
        id=case_id,
        case_number=case_number,
        title=title,
        description=description,
        created_date=datetime(2024, 1, 15, 10, 30),
    )


def patched_repository():
    """Patch CaseRepository in the service module; returns (patcher, repo)."""
    patcher = patch("case_api.services.case_service.CaseRepository")
    repo_cls = patcher.start()
    repo = MagicMock()
    repo_cls.return_value = repo
    return patcher, repo


class TestCaseServiceList:

    def setup_method(self):
        self.service = CaseService()
        self.patcher, self.repo = patched_repository()

    def teardown_method(self):
        self.patcher.stop()

    @pytest.mark.asyncio
    async def test_list_cases_returns_cases_in_id_order(self, mock_db_session):
        self.repo.find_all_ordered_by_id = AsyncMock(
            return_value=[make_case(1, title="Case1"), make_case(2, title="Case2")]
        )

        result = await self.service.list_cases(mock_db_session)

        assert [c.id for c in result] == [1, 2]
        assert [c.title for c in result] == ["Case1", "Case2"]

    @pytest.mark.asyncio
    async def test_list_cases_empty_store_returns_empty_list(self, mock_db_session):
        self.repo.find_all_ordered_by_id = AsyncMock(return_value=[])

        result = await self.service.list_cases(mock_db_session)

        assert result == []


class TestCaseServiceCreate:

    def setup_method(self):
        self.service = CaseService()
        self.patcher, self.repo = patched_repository()

        async def fake_insert(case):
            case.id = 1
            return case

        self.repo.insert = AsyncMock(side_effect=fake_insert)

    def teardown_method(self):
        self.patcher.stop()

    @pytest.mark.asyncio
    async def test_create_case_saves_case(self, mock_db_session):
        payload = CaseCreate(case_number=12345, title="Case1")

        result = await self.service.create_case(mock_db_session, payload)

        self.repo.insert.assert_awaited_once()
        saved = self.repo.insert.await_args.args[0]
        assert saved.case_number == 12345
        assert saved.title == "Case1"
        assert result.id == 1

    @pytest.mark.asyncio
    async def test_create_case_without_created_date_uses_now(self, mock_db_session):
        before = datetime.now(timezone.utc).replace(tzinfo=None)
        result = await self.service.create_case(
            mock_db_session, CaseCreate(case_number=1, title="T")
        )
        after = datetime.now(timezone.utc).replace(tzinfo=None)

        assert result.created_date.tzinfo is None
        assert before <= result.created_date <= after

    @pytest.mark.asyncio
    async def test_create_case_keeps_supplied_created_date(self, mock_db_session):
        supplied = datetime(2020, 5, 17, 8, 0)

        result = await self.service.create_case(
            mock_db_session,
            CaseCreate(case_number=1, title="T", created_date=supplied),
        )

        assert result.created_date == supplied

    @pytest.mark.asyncio
    async def test_create_case_converts_offset_created_date_to_utc(self, mock_db_session):
        supplied = datetime(2020, 5, 17, 8, 0, tzinfo=timezone(timedelta(hours=2)))

        result = await self.service.create_case(
            mock_db_session,
            CaseCreate(case_number=1, title="T", created_date=supplied),
        )

        assert result.created_date == datetime(2020, 5, 17, 6, 0)
        saved = self.repo.insert.await_args.args[0]
        assert saved.created_date.tzinfo is None

    @pytest.mark.asyncio
    async def test_create_case_accepts_camel_case_payload(self, mock_db_session):
        payload = CaseCreate.model_validate(
            {"caseNumber": 777, "title": "Camel", "description": "d"}
        )

        result = await self.service.create_case(mock_db_session, payload)

        assert result.case_number == 777
        assert result.description == "d"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, field",
        [
            (None, None),
            (CaseCreate(), "caseNumber"),
            (CaseCreate(title="No number"), "caseNumber"),
            (CaseCreate(case_number=0, title="Zero number"), "caseNumber"),
            (CaseCreate(case_number=12345), "title"),
            (CaseCreate(case_number=12345, title=""), "title"),
        ],
    )
    async def test_create_case_invalid_raises_and_saves_nothing(
        self, mock_db_session, payload, field
    ):
        with pytest.raises(ValidationError) as exc_info:
            await self.service.create_case(mock_db_session, payload)

        assert exc_info.value.field == field
        self.repo.insert.assert_not_called()


class TestCaseServiceGetDelete:

    def setup_method(self):
        self.service = CaseService()
        self.patcher, self.repo = patched_repository()

    def teardown_method(self):
        self.patcher.stop()

    @pytest.mark.asyncio
    async def test_get_case_returns_case(self, mock_db_session):
        self.repo.find_by_id = AsyncMock(return_value=make_case(1, title="Case1"))

        result = await self.service.get_case(mock_db_session, 1)

        self.repo.find_by_id.assert_awaited_once_with(1)
        assert result.id == 1
        assert result.title == "Case1"

    @pytest.mark.asyncio
    async def test_get_case_missing_returns_none(self, mock_db_session):
        self.repo.find_by_id = AsyncMock(return_value=None)

        assert await self.service.get_case(mock_db_session, 999) is None

    @pytest.mark.asyncio
    async def test_delete_case_delegates_to_repository(self, mock_db_session):
        self.repo.delete_by_id = AsyncMock(return_value=None)

        result = await self.service.delete_case(mock_db_session, 1)

        self.repo.delete_by_id.assert_awaited_once_with(1)
        assert result is None


class TestCaseServiceSearch:

    def setup_method(self):
        self.service = CaseService()
        self.patcher, self.repo = patched_repository()
        self.repo.find_all_ordered_by_id = AsyncMock(return_value=[])
        self.repo.find_by_case_number = AsyncMock(return_value=[])
        self.repo.find_by_title_contains = AsyncMock(return_value=[])
        self.repo.find_by_case_number_and_title_contains = AsyncMock(return_value=[])

    def teardown_method(self):
        self.patcher.stop()

    @pytest.mark.asyncio
    async def test_search_with_case_number_and_title(self, mock_db_session):
        case = make_case(1, case_number=12345, title="Case1")
        self.repo.find_by_case_number_and_title_contains.return_value = [case]

        result = await self.service.search_cases(mock_db_session, 12345, "Case1")

        self.repo.find_by_case_number_and_title_contains.assert_awaited_once_with(12345, "Case1")
        assert [c.id for c in result] == [1]

    @pytest.mark.asyncio
    async def test_search_with_only_case_number(self, mock_db_session):
        self.repo.find_by_case_number.return_value = [make_case(1)]

        result = await self.service.search_cases(mock_db_session, case_number=12345)

        self.repo.find_by_case_number.assert_awaited_once_with(12345)
        self.repo.find_by_title_contains.assert_not_called()
        assert len(result) == 1

    @pytest.mark.asyncio
    async def test_search_with_only_title(self, mock_db_session):
        self.repo.find_by_title_contains.return_value = [make_case(1)]

        result = await self.service.search_cases(mock_db_session, title="Case1")

        self.repo.find_by_title_contains.assert_awaited_once_with("Case1")
        self.repo.find_by_case_number.assert_not_called()
        assert len(result) == 1

    @pytest.mark.asyncio
    async def test_search_without_criteria_returns_all_cases(self, mock_db_session):
        self.repo.find_all_ordered_by_id.return_value = [
            make_case(1, case_number=12345),
            make_case(2, case_number=67890),
        ]

        result = await self.service.search_cases(mock_db_session)

        self.repo.find_all_ordered_by_id.assert_awaited_once()
        assert [c.id for c in result] == [1, 2]

    @pytest.mark.asyncio
    async def test_search_empty_title_counts_as_absent(self, mock_db_session):
        await self.service.search_cases(mock_db_session, case_number=5, title="")

        self.repo.find_by_case_number.assert_awaited_once_with(5)
        self.repo.find_by_case_number_and_title_contains.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_case_number_zero_counts_as_present(self, mock_db_session):
        await self.service.search_cases(mock_db_session, case_number=0)

        self.repo.find_by_case_number.assert_awaited_once_with(0)
        self.repo.find_all_ordered_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_search_no_results_returns_empty_list(self, mock_db_session):
        result = await self.service.search_cases(mock_db_session, 12345, "NonExistent")

        assert result == []
