from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from ..common.datetime_utils import Sleeper, now_local, real_sleep
from ..common.notifications import NullNotifier, StatusNotifier
from ..core.constants import CAPTURE_TIMEOUT_MS, CONFIRMATION_PAUSE_MS
from ..core.exceptions import ConfirmationMismatch, DomainError, DuplicateTemplate
from ..employees.model import Employee, EmployeeProfile
from ..employees.repository import EmployeeRepository
from ..fingerprints.capture import CaptureSession
from ..fingerprints.matcher import TemplateMatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnrollmentResult:
    success: bool
    message: str
    employee: Optional[Employee] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        out: dict = {"success": self.success, "message": self.message}
        if self.employee is not None:
            out["employee"] = self.employee.to_dict()
        if self.error is not None:
            out["error"] = self.error
        return out


class EnrollmentWorkflow:
    """Use case: register a new employee's fingerprint.

    Two captures of the same finger must agree under the fuzzy matcher before
    anything is written; uniqueness is then checked by exact template
    equality and committed under a lock (compare-and-commit).
    """

    def __init__(
        self,
        capture: CaptureSession,
        employees: EmployeeRepository,
        *,
        matcher: TemplateMatcher | None = None,
        notifier: StatusNotifier | None = None,
        sleeper: Sleeper = real_sleep,
        clock: Callable[[], datetime] = now_local,
        capture_timeout_ms: int = CAPTURE_TIMEOUT_MS,
        confirmation_pause_ms: int = CONFIRMATION_PAUSE_MS,
    ):
        self._capture = capture
        self._employees = employees
        self._matcher = matcher or TemplateMatcher()
        self._notifier = notifier or NullNotifier()
        self._sleep = sleeper
        self._clock = clock
        self._timeout_ms = int(capture_timeout_ms)
        self._pause_ms = int(confirmation_pause_ms)
        self._commit_lock = threading.Lock()

    def enroll(self, profile: EmployeeProfile) -> EnrollmentResult:
        try:
            employee = self._enroll(profile)
        except DomainError as e:
            logger.warning("Enrollment failed (%s): %s", e.code, e)
            self._notifier.notify(f"Enrollment failed: {e}")
            return EnrollmentResult(success=False, message=str(e), error=e.code)

        logger.info("Enrolled employee %s (%s)", employee.employee_id, employee.name)
        self._notifier.notify("Employee enrolled successfully!")
        return EnrollmentResult(
            success=True,
            message="Employee enrolled successfully!",
            employee=employee,
        )

    def _enroll(self, profile: EmployeeProfile) -> Employee:
        profile = profile.normalized()

        # both captures and the pause between them belong to the same finger
        with self._capture.reserved():
            self._notifier.notify("Starting enrollment of a new fingerprint...")
            first = self._capture.capture(self._timeout_ms)

            self._notifier.notify("Place the same finger again to confirm...")
            self._sleep(self._pause_ms / 1000.0)
            second = self._capture.capture(self._timeout_ms)

        verdict = self._matcher.compare(first, second)
        logger.debug("Confirmation score %.2f", verdict.score)
        if not verdict.matched:
            raise ConfirmationMismatch("The captured fingerprints do not match. Try again.")

        with self._commit_lock:
            if self._employees.find_active_by_exact_template(first.raw) is not None:
                raise DuplicateTemplate("An employee with this fingerprint is already enrolled")
            return self._employees.insert_employee(profile, first, enrolled_at=self._clock())
