from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import AttendanceType


@dataclass(frozen=True)
class AttendanceRecord:
    """One time-clock event. Never edited once written."""

    record_id: int
    employee_id: int
    type: AttendanceType
    timestamp: datetime
    local_date: date

    def to_dict(self) -> dict:
        return {
            "record_id": self.record_id,
            "employee_id": self.employee_id,
            "type": self.type.value,
            "timestamp": self.timestamp.isoformat(),
            "local_date": self.local_date.isoformat(),
        }
