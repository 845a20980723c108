from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceType
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def find_last_record_for_day(self, employee_id: int, day: date) -> Optional[AttendanceRecord]:
        """Newest record (by timestamp) for the employee on `day`."""

        raise NotImplementedError

    def insert_record(self, employee_id: int, type: AttendanceType, timestamp: datetime) -> AttendanceRecord:
        raise NotImplementedError

    def list_records(self, employee_id: int, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        """Records with start <= local_date <= end, oldest first."""

        raise NotImplementedError
