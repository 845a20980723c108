from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..fingerprints.model import Template
from .model import Employee, EmployeeProfile


class EmployeeRepository(Protocol):
    """Employee storage. Services depend on this protocol, never on a concrete database."""

    def find_active_by_exact_template(self, raw: bytes) -> Optional[Employee]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        """All active employees, ordered by employee_id ascending."""

        raise NotImplementedError

    def insert_employee(self, profile: EmployeeProfile, template: Template, *, enrolled_at: datetime) -> Employee:
        """Persist a new active employee.

        Must raise DuplicateTemplate if an active employee already owns
        `template.raw` at commit time.
        """

        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError
