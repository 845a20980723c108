from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.locks import EmployeeLocks, KeyedLock
from ..core.constants import DEFAULT_HISTORY_DAYS
from ..core.enums import AttendanceType
from ..core.exceptions import StoreUnavailable, ValidationError
from ..employees.model import Employee
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceStateMachine:
    """Decide IN/OUT for an identified employee and append the record.

    Holds no state of its own: the direction is derived from the last record
    of the employee's local day. Decisions for one employee are serialized
    through `locks` so two stations scanning the same finger cannot both read
    the same "last record".
    """

    def __init__(
        self,
        records: AttendanceRepository,
        *,
        locks: EmployeeLocks | None = None,
        assume_in_on_store_error: bool = False,
        clock: Callable[[], datetime] = now_local,
    ):
        self._records = records
        self._locks = locks or KeyedLock()
        self._assume_in = bool(assume_in_on_store_error)
        self._clock = clock

    def record_event(self, employee: Employee, *, now: datetime | None = None) -> AttendanceRecord:
        now = now or self._clock()
        today = now.date()

        with self._locks.hold(employee.employee_id):
            record_type = self._next_type(employee.employee_id, today)
            record = self._records.insert_record(employee.employee_id, record_type, now)

        logger.info(
            "Recorded %s for employee %s at %s",
            record.type.value, employee.employee_id, record.timestamp.isoformat(),
        )
        return record

    def _next_type(self, employee_id: int, today: date) -> AttendanceType:
        try:
            last = self._records.find_last_record_for_day(employee_id, today)
        except StoreUnavailable:
            if not self._assume_in:
                raise
            logger.warning(
                "Last record lookup failed for employee %s; assuming %s",
                employee_id, AttendanceType.IN.value,
            )
            return AttendanceType.IN

        if last is None:
            return AttendanceType.IN
        return last.type.toggled()

    def history(
        self,
        employee_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        end = end or self._clock().date()
        start = start or end - timedelta(days=DEFAULT_HISTORY_DAYS - 1)
        if start > end:
            raise ValidationError("Start date must not be after end date")
        return self._records.list_records(employee_id, start=start, end=end)
