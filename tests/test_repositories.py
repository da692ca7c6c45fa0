"""Tests for the SQLAlchemy repositories beneath the services."""
from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from legalcase.domain.models.case_client import CaseClient
from legalcase.domain.models.enums import CaseStatus, CaseType, HearingStatus, UserRole
from legalcase.domain.schemas.case import CaseCreate


def _case(case_repo, number="R-1", title="Repo case"):
    return case_repo.create(CaseCreate(case_number=number, title=title, type=CaseType.CIVIL))


class TestBaseRepository:
    def test_delete_unknown_id_returns_zero(self, case_repo):
        assert case_repo.delete(999) == 0

    def test_delete_existing_returns_one(self, case_repo):
        case = _case(case_repo)
        assert case_repo.delete(case.id) == 1
        assert case_repo.get_by_id(case.id) is None

    def test_get_by_none_id(self, case_repo):
        assert case_repo.get_by_id(None) is None

    def test_list_paging(self, case_repo):
        ids = [_case(case_repo, f"R-{i}", f"Case {i}").id for i in range(5)]
        assert [c.id for c in case_repo.list(skip=1, limit=2)] == ids[1:3]
        assert [c.id for c in case_repo.list()] == ids

    def test_update_applies_only_given_fields(self, case_repo):
        case = _case(case_repo)
        updated = case_repo.update(case, {"status": CaseStatus.CLOSED})
        assert updated.status == CaseStatus.CLOSED
        assert updated.title == "Repo case"

    def test_failed_commit_rolls_back(self, db, case_repo):
        _case(case_repo, "DUP")
        with pytest.raises(IntegrityError):
            _case(case_repo, "DUP", "Second")
        # The session is usable again after the rollback
        assert [c.case_number for c in case_repo.list()] == ["DUP"]


class TestUserRepository:
    def test_lookups(self, user_repo):
        user = user_repo.create(
            {
                "username": "clerk",
                "password_hash": "x",
                "email": "clerk@example.com",
                "name": "Carla",
                "surname": "Clerk",
                "role": UserRole.ASSISTANT,
            }
        )
        assert user_repo.get_by_username("clerk").id == user.id
        assert user_repo.get_by_email("clerk@example.com").id == user.id
        assert [u.id for u in user_repo.get_by_role(UserRole.ASSISTANT)] == [user.id]
        assert [u.id for u in user_repo.search_by_name("carl")] == [user.id]
        assert user.full_name == "Carla Clerk"


class TestCaseRepositoryLinks:
    def test_add_client_reports_whether_link_was_created(self, case_repo, client_repo):
        case = _case(case_repo)
        client = client_repo.create({"name": "Ana", "surname": "Silva"})

        assert case_repo.add_client(case, client) is True
        assert case_repo.add_client(case, client) is False
        assert [c.id for c in case.clients] == [client.id]
        assert [c.id for c in client.cases] == [case.id]

    def test_remove_client_refreshes_both_sides(self, case_repo, client_repo):
        case = _case(case_repo)
        client = client_repo.create({"name": "Ana", "surname": "Silva"})
        case_repo.add_client(case, client)

        assert case_repo.remove_client(case, client) is True
        assert case_repo.remove_client(case, client) is False
        assert list(case.clients) == []
        assert list(client.cases) == []

    def test_join_row_ids_are_not_reused(self, db, case_repo, client_repo):
        case = _case(case_repo)
        first = client_repo.create({"name": "Ana", "surname": "Silva"})
        second = client_repo.create({"name": "Bruno", "surname": "Costa"})
        case_repo.add_client(case, first)
        old_id = db.query(CaseClient.id).scalar()
        client_repo.delete(first.id)

        case_repo.add_client(case, second)

        assert db.query(CaseClient.id).scalar() > old_id


class TestHearingRepository:
    def _hearing(self, hearing_repo, case, when, status=HearingStatus.SCHEDULED):
        return hearing_repo.create(
            {"case_id": case.id, "hearing_date": when, "judge": "Judge", "status": status}
        )

    def test_upcoming_relative_to_given_now(self, case_repo, hearing_repo):
        case = _case(case_repo)
        now = datetime(2030, 1, 1, 12, 0)
        before = self._hearing(hearing_repo, case, datetime(2029, 12, 31, 12, 0))
        exactly = self._hearing(hearing_repo, case, now)
        after = self._hearing(hearing_repo, case, datetime(2030, 1, 1, 12, 1))
        self._hearing(hearing_repo, case, datetime(2030, 2, 1), HearingStatus.CANCELLED)

        upcoming = [h.id for h in hearing_repo.get_upcoming(now=now)]
        assert upcoming == [after.id]
        assert before.id not in upcoming
        assert exactly.id not in upcoming

    def test_date_range_bounds_are_inclusive(self, case_repo, hearing_repo):
        case = _case(case_repo)
        start, end = datetime(2030, 1, 1), datetime(2030, 1, 31, 23, 59)
        first = self._hearing(hearing_repo, case, start)
        last = self._hearing(hearing_repo, case, end)
        self._hearing(hearing_repo, case, datetime(2030, 2, 1))

        assert [h.id for h in hearing_repo.get_by_date_range(start, end)] == [first.id, last.id]

    def test_current_datetime_is_naive(self, hearing_repo):
        now = hearing_repo.get_current_datetime()
        assert now.tzinfo is None


class TestSearchWildcards:
    def test_percent_and_underscore_match_literally(self, case_repo, client_repo):
        percent = _case(case_repo, "W-1", "Settlement 100% paid")
        _case(case_repo, "W-2", "Settlement 1000 paid")
        underscore = _case(case_repo, "W-3", "file_a")
        _case(case_repo, "W-4", "fileXa")

        assert [c.id for c in case_repo.search_by_title("0%")] == [percent.id]
        assert [c.id for c in case_repo.search_by_title("e_a")] == [underscore.id]
        assert case_repo.search_by_title("%") == [percent]

        client = client_repo.create({"name": "Ana_Maria", "surname": "Silva"})
        client_repo.create({"name": "AnaXMaria", "surname": "Silva"})
        assert [c.id for c in client_repo.search_by_name("a_m")] == [client.id]

    def test_backslash_is_not_an_escape(self, case_repo):
        case = _case(case_repo, "W-5", r"C:\dossiers")
        assert [c.id for c in case_repo.search_by_title("\\d")] == [case.id]
        assert case_repo.search_by_title("d") == [case]
