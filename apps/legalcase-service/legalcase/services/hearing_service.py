"""
Hearing service: scheduling, rescheduling and hearing queries.

Hearing dates are naive local wall-clock datetimes at whole-second
precision; aware inputs are converted on the way in.
"""

import logging
from datetime import datetime
from typing import List, Optional

from pydantic import TypeAdapter
from sqlalchemy.orm import Session

from legalcase.db import models, schemas
from legalcase.db.repositories import cases as case_repo
from legalcase.db.repositories import hearings as hearing_repo
from legalcase.errors import InvalidArgumentError, NotFoundError
from legalcase.services.common import build_payload, require, resolve_changes, validate_value

logger = logging.getLogger(__name__)

RESCHEDULE_NOTE = "Hearing rescheduled from: {old} to: {new}"

_DATETIME = TypeAdapter(datetime)


def reschedule_note(old_date: datetime, new_date: datetime) -> str:
    return RESCHEDULE_NOTE.format(old=old_date.isoformat(), new=new_date.isoformat())


class HearingService:
    """Service class for hearing operations."""

    def __init__(self, db: Session):
        self.db = db

    def _require_hearing(self, hearing_id: int) -> models.Hearing:
        return require(hearing_repo.get_hearing(self.db, hearing_id), "Hearing", hearing_id)

    def create_hearing(
        self,
        case_id: int,
        hearing_date: datetime,
        judge: str,
        location: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> models.Hearing:
        """Schedule a hearing on an existing case. New hearings start SCHEDULED."""
        payload = build_payload(
            schemas.HearingCreate,
            case_id=case_id,
            hearing_date=hearing_date,
            judge=judge,
            location=location,
            notes=notes,
        )
        require(case_repo.get_case(self.db, case_id), "Case", case_id)
        hearing = hearing_repo.create_hearing(self.db, payload, status=models.HearingStatus.SCHEDULED)
        logger.info("Scheduled hearing %s for case %s at %s", hearing.id, case_id, hearing.hearing_date)
        return hearing

    def get_hearing(self, hearing_id: int) -> Optional[models.Hearing]:
        return hearing_repo.get_hearing(self.db, hearing_id)

    def list_hearings(self, *, descending: bool = False) -> List[models.Hearing]:
        return hearing_repo.get_hearings(self.db, descending=descending)

    def list_hearings_for_case(self, case_id: int) -> List[models.Hearing]:
        require(case_repo.get_case(self.db, case_id), "Case", case_id)
        return hearing_repo.get_hearings_by_case(self.db, case_id)

    def list_hearings_by_status(self, status: models.HearingStatus) -> List[models.Hearing]:
        return hearing_repo.get_hearings_by_status(self.db, status)

    def update_hearing(
        self,
        hearing_id: int,
        changes: Optional[schemas.HearingUpdate] = None,
        **fields,
    ) -> models.Hearing:
        """Overwrite every field the caller sets, the date included."""
        changes = resolve_changes(schemas.HearingUpdate, changes, fields)
        self._require_hearing(hearing_id)
        if hearing_repo.update_hearing(self.db, hearing_id, changes) == 0:
            raise NotFoundError("Hearing", hearing_id)
        logger.info("Updated hearing %s (%s)", hearing_id, ", ".join(sorted(changes.model_fields_set)))
        return self._require_hearing(hearing_id)

    def update_hearing_status(self, hearing_id: int, status: models.HearingStatus) -> models.Hearing:
        changes = build_payload(schemas.HearingUpdate, status=status)
        return self.update_hearing(hearing_id, changes)

    def reschedule_hearing(self, hearing_id: int, new_date: datetime) -> models.Hearing:
        """Move a hearing, force it back to SCHEDULED and record the move in its notes."""
        if new_date is None:
            raise InvalidArgumentError("New hearing date is required")
        new_date = build_payload(schemas.HearingUpdate, hearing_date=new_date).hearing_date
        hearing = self._require_hearing(hearing_id)
        old_date = hearing.hearing_date

        note = reschedule_note(old_date, new_date)
        notes = f"{hearing.notes}\n{note}" if hearing.notes else note
        changes = build_payload(
            schemas.HearingUpdate,
            hearing_date=new_date,
            status=models.HearingStatus.SCHEDULED,
            notes=notes,
        )
        if hearing_repo.update_hearing(self.db, hearing_id, changes) == 0:
            raise NotFoundError("Hearing", hearing_id)
        logger.info("Rescheduled hearing %s from %s to %s", hearing_id, old_date, new_date)
        return self._require_hearing(hearing_id)

    def get_hearings_by_date_range(self, start: datetime, end: datetime) -> List[models.Hearing]:
        """Hearings within [start, end], both ends inclusive."""
        if start is None or end is None:
            raise InvalidArgumentError("Both start and end dates are required")
        start = schemas.to_wall_clock(validate_value(_DATETIME, start, "start"))
        end = schemas.to_wall_clock(validate_value(_DATETIME, end, "end"))
        if start > end:
            raise InvalidArgumentError(f"Start date {start.isoformat()} is after end date {end.isoformat()}")
        return hearing_repo.get_hearings_by_date_range(self.db, start, end)

    def get_upcoming_hearings(self, now: Optional[datetime] = None) -> List[models.Hearing]:
        """Hearings after ``now`` (default: the current local time) that are not
        cancelled, earliest first."""
        if now is None:
            now = datetime.now()
        else:
            now = schemas.to_wall_clock(validate_value(_DATETIME, now, "now"))
        return hearing_repo.get_upcoming_hearings(self.db, now)

    def delete_hearing(self, hearing_id: int) -> None:
        self._require_hearing(hearing_id)
        if hearing_repo.delete_hearing(self.db, hearing_id) == 0:
            raise NotFoundError("Hearing", hearing_id)
        logger.info("Deleted hearing %s", hearing_id)
