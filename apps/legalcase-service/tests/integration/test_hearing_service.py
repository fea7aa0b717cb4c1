"""
Integration tests for hearing scheduling.
"""
from datetime import datetime, timedelta
from unittest.mock import Mock

import pytest

from legalcase.db import schemas
from legalcase.db.models import CaseType, HearingStatus
from legalcase.errors import InvalidArgumentError, NotFoundError
from legalcase.services import HearingService

NOW = datetime(2030, 1, 1, 12, 0, 0)


@pytest.fixture
def case(case_service):
    return case_service.create_case("C-1", "Smith v. Jones", CaseType.CIVIL)


def _schedule(hearing_service, case, when, **kwargs):
    return hearing_service.create_hearing(case.id, when, kwargs.pop("judge", "Judge Judy"), **kwargs)


class TestCreateHearing:
    def test_new_hearings_start_scheduled(self, hearing_service, case):
        hearing = hearing_service.create_hearing(
            case.id, datetime(2030, 2, 1, 10, 0, 0, 123456), "Judge Judy", location="Room 4", notes="Bring exhibits"
        )

        assert hearing.status == HearingStatus.SCHEDULED
        assert hearing.hearing_date == datetime(2030, 2, 1, 10, 0, 0)
        assert hearing.location == "Room 4"
        assert hearing.case.id == case.id
        assert schemas.Hearing.model_validate(hearing).status == HearingStatus.SCHEDULED

    def test_requires_case(self, hearing_service):
        with pytest.raises(NotFoundError):
            hearing_service.create_hearing(99, NOW, "Judge Judy")
        assert hearing_service.list_hearings() == []

    def test_requires_date(self, hearing_service, case):
        with pytest.raises(InvalidArgumentError, match="hearing_date"):
            hearing_service.create_hearing(case.id, None, "Judge Judy")


class TestRescheduleHearing:
    def test_reschedule_moves_date_and_appends_note(self, hearing_service, case):
        old_date = datetime(2030, 2, 1, 10, 0)
        new_date = datetime(2030, 2, 15, 11, 30)
        hearing = _schedule(hearing_service, case, old_date, notes="Bring exhibits")
        hearing_service.update_hearing_status(hearing.id, HearingStatus.POSTPONED)

        moved = hearing_service.reschedule_hearing(hearing.id, new_date)

        assert moved.hearing_date == new_date
        assert moved.status == HearingStatus.SCHEDULED
        assert moved.notes == (
            "Bring exhibits\n"
            "Hearing rescheduled from: 2030-02-01T10:00:00 to: 2030-02-15T11:30:00"
        )

    def test_reschedule_without_prior_notes(self, hearing_service, case):
        hearing = _schedule(hearing_service, case, datetime(2030, 2, 1, 10, 0))

        moved = hearing_service.reschedule_hearing(hearing.id, datetime(2030, 3, 1, 10, 0))

        assert moved.notes == "Hearing rescheduled from: 2030-02-01T10:00:00 to: 2030-03-01T10:00:00"

    def test_repeated_reschedules_keep_history(self, hearing_service, case):
        hearing = _schedule(hearing_service, case, datetime(2030, 2, 1, 10, 0))

        hearing_service.reschedule_hearing(hearing.id, datetime(2030, 3, 1, 10, 0))
        moved = hearing_service.reschedule_hearing(hearing.id, datetime(2030, 4, 1, 10, 0))

        lines = moved.notes.splitlines()
        assert len(lines) == 2
        assert "2030-03-01T10:00:00 to: 2030-04-01T10:00:00" in lines[1]

    def test_reschedule_requires_date_before_store_access(self):
        db = Mock()

        with pytest.raises(InvalidArgumentError):
            HearingService(db).reschedule_hearing(1, None)
        assert db.mock_calls == []

    def test_reschedule_accepts_iso_string(self, hearing_service, case):
        hearing = _schedule(hearing_service, case, datetime(2030, 1, 1, 10, 0))

        moved = hearing_service.reschedule_hearing(hearing.id, "2030-02-01T10:00:00.250")

        assert moved.hearing_date == datetime(2030, 2, 1, 10, 0)
        assert moved.notes.endswith("to: 2030-02-01T10:00:00")

    @pytest.mark.parametrize("new_date", ["next tuesday", object()])
    def test_reschedule_rejects_malformed_date_before_store_access(self, new_date):
        db = Mock()

        with pytest.raises(InvalidArgumentError):
            HearingService(db).reschedule_hearing(1, new_date)
        assert db.mock_calls == []

    def test_reschedule_missing_hearing(self, hearing_service):
        with pytest.raises(NotFoundError):
            hearing_service.reschedule_hearing(5, NOW)


class TestUpdateHearing:
    def test_update_overwrites_given_fields(self, hearing_service, case):
        hearing = _schedule(hearing_service, case, datetime(2030, 2, 1, 10, 0), location="Room 1")

        updated = hearing_service.update_hearing(
            hearing.id,
            hearing_date=datetime(2030, 2, 2, 9, 0),
            judge="Judge Dredd",
            location=None,
            status=HearingStatus.COMPLETED,
        )

        assert updated.hearing_date == datetime(2030, 2, 2, 9, 0)
        assert updated.judge == "Judge Dredd"
        assert updated.location is None
        assert updated.status == HearingStatus.COMPLETED

    def test_update_missing_hearing(self, hearing_service):
        with pytest.raises(NotFoundError):
            hearing_service.update_hearing(5, judge="Nobody")

    def test_delete(self, hearing_service, case):
        hearing = _schedule(hearing_service, case, NOW)

        hearing_service.delete_hearing(hearing.id)

        assert hearing_service.get_hearing(hearing.id) is None
        with pytest.raises(NotFoundError):
            hearing_service.delete_hearing(hearing.id)


class TestHearingQueries:
    def test_upcoming_is_future_non_cancelled_earliest_first(self, hearing_service, case):
        later = _schedule(hearing_service, case, NOW + timedelta(days=30))
        sooner = _schedule(hearing_service, case, NOW + timedelta(days=2))
        _schedule(hearing_service, case, NOW - timedelta(days=1))
        cancelled = _schedule(hearing_service, case, NOW + timedelta(days=1))
        hearing_service.update_hearing_status(cancelled.id, HearingStatus.CANCELLED)
        postponed = _schedule(hearing_service, case, NOW + timedelta(days=10))
        hearing_service.update_hearing_status(postponed.id, HearingStatus.POSTPONED)

        upcoming = hearing_service.get_upcoming_hearings(now=NOW)

        assert [h.id for h in upcoming] == [sooner.id, postponed.id, later.id]

    def test_upcoming_excludes_hearing_exactly_now(self, hearing_service, case):
        _schedule(hearing_service, case, NOW)

        assert hearing_service.get_upcoming_hearings(now=NOW) == []

    def test_upcoming_defaults_to_current_time(self, hearing_service, case):
        future = _schedule(hearing_service, case, datetime.now() + timedelta(days=365))
        _schedule(hearing_service, case, datetime.now() - timedelta(days=365))

        assert [h.id for h in hearing_service.get_upcoming_hearings()] == [future.id]

    def test_date_range_is_inclusive(self, hearing_service, case):
        start = datetime(2030, 2, 1, 0, 0)
        end = datetime(2030, 2, 28, 23, 59, 59)
        first = _schedule(hearing_service, case, start)
        last = _schedule(hearing_service, case, end)
        _schedule(hearing_service, case, start - timedelta(seconds=1))
        _schedule(hearing_service, case, end + timedelta(seconds=1))

        found = hearing_service.get_hearings_by_date_range(start, end)

        assert [h.id for h in found] == [first.id, last.id]

    def test_single_instant_range(self, hearing_service, case):
        hearing = _schedule(hearing_service, case, NOW)

        assert [h.id for h in hearing_service.get_hearings_by_date_range(NOW, NOW)] == [hearing.id]

    @pytest.mark.parametrize(
        "start,end",
        [(NOW, NOW - timedelta(seconds=1)), (None, NOW), (NOW, None)],
    )
    def test_invalid_range_fails_before_store_access(self, start, end):
        db = Mock()

        with pytest.raises(InvalidArgumentError):
            HearingService(db).get_hearings_by_date_range(start, end)
        assert db.mock_calls == []

    def test_date_range_accepts_iso_strings(self, hearing_service, case):
        hearing = _schedule(hearing_service, case, datetime(2030, 1, 15, 9, 30))

        found = hearing_service.get_hearings_by_date_range("2030-01-01T00:00:00", "2030-02-01T00:00:00")

        assert [h.id for h in found] == [hearing.id]

    @pytest.mark.parametrize(
        "start,end",
        [("not a date", NOW), (NOW, "not a date"), (object(), NOW)],
    )
    def test_malformed_range_fails_before_store_access(self, start, end):
        db = Mock()

        with pytest.raises(InvalidArgumentError):
            HearingService(db).get_hearings_by_date_range(start, end)
        assert db.mock_calls == []

    def test_upcoming_accepts_iso_string(self, hearing_service, case):
        future = _schedule(hearing_service, case, NOW + timedelta(days=1))
        _schedule(hearing_service, case, NOW - timedelta(days=1))

        assert [h.id for h in hearing_service.get_upcoming_hearings(now=NOW.isoformat())] == [future.id]

    def test_upcoming_rejects_malformed_now(self):
        db = Mock()

        with pytest.raises(InvalidArgumentError):
            HearingService(db).get_upcoming_hearings(now="soon")
        assert db.mock_calls == []

    def test_hearings_for_case_and_status(self, hearing_service, case_service, case):
        other = case_service.create_case("C-2", "Other", CaseType.FAMILY)
        mine = _schedule(hearing_service, case, NOW)
        theirs = _schedule(hearing_service, other, NOW)
        hearing_service.update_hearing_status(theirs.id, HearingStatus.COMPLETED)

        assert [h.id for h in hearing_service.list_hearings_for_case(case.id)] == [mine.id]
        assert [h.id for h in hearing_service.list_hearings_by_status(HearingStatus.COMPLETED)] == [theirs.id]
        with pytest.raises(NotFoundError):
            hearing_service.list_hearings_for_case(999)

    def test_list_ordered_by_date(self, hearing_service, case):
        late = _schedule(hearing_service, case, NOW + timedelta(days=5))
        early = _schedule(hearing_service, case, NOW)

        assert [h.id for h in hearing_service.list_hearings()] == [early.id, late.id]
        assert [h.id for h in hearing_service.list_hearings(descending=True)] == [late.id, early.id]
