from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.validators import optional_email, optional_text, require_non_empty
from ..fingerprints.model import Template


@dataclass(frozen=True)
class EmployeeProfile:
    """Enrollment input: who is being registered."""

    name: str
    role: Optional[str] = None
    department: Optional[str] = None
    email: Optional[str] = None

    def normalized(self) -> "EmployeeProfile":
        return EmployeeProfile(
            name=require_non_empty(self.name, "Name"),
            role=optional_text(self.role),
            department=optional_text(self.department),
            email=optional_email(self.email),
        )


@dataclass(frozen=True)
class Employee:
    """An enrolled employee. Plain data; no database access."""

    employee_id: int
    name: str
    role: Optional[str]
    department: Optional[str]
    email: Optional[str]
    template: Template
    enrolled_at: datetime
    active: bool = True

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "role": self.role,
            "department": self.department,
            "email": self.email,
            "active": self.active,
            "enrolled_at": self.enrolled_at.isoformat(),
            "template_format": self.template.format.value,
        }
