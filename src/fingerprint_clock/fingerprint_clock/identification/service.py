from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..common.notifications import NullNotifier, StatusNotifier
from ..core.constants import CAPTURE_TIMEOUT_MS
from ..core.exceptions import DomainError, NoMatch
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..fingerprints.capture import CaptureSession
from ..fingerprints.matcher import TemplateMatcher
from ..fingerprints.model import MatchResult, Template

logger = logging.getLogger(__name__)

EXACT_MATCH = MatchResult(matched=True, score=100.0)


@dataclass(frozen=True)
class IdentificationResult:
    success: bool
    message: str
    employee: Optional[Employee] = None
    match: Optional[MatchResult] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        out: dict = {"success": self.success, "message": self.message}
        if self.employee is not None:
            out["employee"] = self.employee.to_dict()
        if self.match is not None:
            out["match"] = self.match.to_dict()
        if self.error is not None:
            out["error"] = self.error
        return out


class IdentificationWorkflow:
    """1:N search of a fresh capture over the active employees."""

    def __init__(
        self,
        capture: CaptureSession,
        employees: EmployeeRepository,
        *,
        matcher: TemplateMatcher | None = None,
        notifier: StatusNotifier | None = None,
        capture_timeout_ms: int = CAPTURE_TIMEOUT_MS,
    ):
        self._capture = capture
        self._employees = employees
        self._matcher = matcher or TemplateMatcher()
        self._notifier = notifier or NullNotifier()
        self._timeout_ms = int(capture_timeout_ms)

    def identify(self) -> IdentificationResult:
        try:
            self._notifier.notify("Place your finger for authentication...")
            template = self._capture.capture(self._timeout_ms)
            employee, match = self.search(template)
        except DomainError as e:
            logger.warning("Identification failed (%s): %s", e.code, e)
            self._notifier.notify(f"Identification failed: {e}")
            return IdentificationResult(success=False, message=str(e), error=e.code)

        return IdentificationResult(
            success=True,
            message=f"Identified {employee.name}",
            employee=employee,
            match=match,
        )

    def search(self, template: Template) -> Tuple[Employee, MatchResult]:
        """Exact lookup first, then first-match-wins fuzzy scan.

        Candidates are scanned in the repository's order (employee_id
        ascending), so the winner is reproducible when several templates
        clear the threshold.
        """

        employee = self._employees.find_active_by_exact_template(template.raw)
        if employee is not None:
            logger.info("Exact template match: employee %s", employee.employee_id)
            return employee, EXACT_MATCH

        candidates = [e for e in self._employees.list_active() if e.template.raw]
        if not candidates:
            raise NoMatch("No employees enrolled")

        for candidate in candidates:
            result = self._matcher.compare(template, candidate.template)
            if result.matched:
                logger.info(
                    "Fuzzy match: employee %s (score %.2f)",
                    candidate.employee_id, result.score,
                )
                return candidate, result

        logger.info("No match among %d candidates", len(candidates))
        raise NoMatch("Fingerprint not recognised")
