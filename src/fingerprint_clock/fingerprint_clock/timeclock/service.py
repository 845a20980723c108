from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..attendance.service import AttendanceStateMachine
from ..common.notifications import NullNotifier, StatusNotifier
from ..core.exceptions import DomainError
from ..employees.model import Employee
from ..fingerprints.model import MatchResult
from ..identification.service import IdentificationWorkflow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClockResult:
    success: bool
    message: str
    employee: Optional[Employee] = None
    record: Optional[AttendanceRecord] = None
    match: Optional[MatchResult] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        out: dict = {"success": self.success, "message": self.message}
        if self.employee is not None:
            out["employee"] = self.employee.to_dict()
        if self.record is not None:
            out["record"] = self.record.to_dict()
        if self.match is not None:
            out["match"] = self.match.to_dict()
        if self.error is not None:
            out["error"] = self.error
        return out


class TimeClockService:
    """Use case: scan a finger, identify the employee, punch the clock."""

    def __init__(
        self,
        identification: IdentificationWorkflow,
        attendance: AttendanceStateMachine,
        *,
        notifier: StatusNotifier | None = None,
    ):
        self._identification = identification
        self._attendance = attendance
        self._notifier = notifier or NullNotifier()

    def clock(self, *, now: datetime | None = None) -> ClockResult:
        found = self._identification.identify()
        if not found.success or found.employee is None:
            return ClockResult(success=False, message=found.message, error=found.error)

        employee = found.employee
        try:
            record = self._attendance.record_event(employee, now=now)
        except DomainError as e:
            logger.error("Could not record attendance for employee %s: %s", employee.employee_id, e)
            self._notifier.notify(f"Could not record attendance: {e}")
            return ClockResult(
                success=False,
                message=str(e),
                employee=employee,
                match=found.match,
                error=e.code,
            )

        self._notifier.notify(f"Authentication successful! Welcome, {employee.name}")
        return ClockResult(
            success=True,
            message=f"Attendance recorded. Type: {record.type.value}",
            employee=employee,
            record=record,
            match=found.match,
        )
