from __future__ import annotations

import logging

from ..core.exceptions import EmployeeNotFound
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: look up and soft-delete employees (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise EmployeeNotFound("Employee does not exist")
        return employee

    def deactivate(self, employee_id: int) -> Employee:
        employee = self.get(employee_id)
        if employee.active:
            self._employees.set_active(employee.employee_id, is_active=False)
            logger.info("Deactivated employee %s", employee.employee_id)
        return self.get(employee.employee_id)
