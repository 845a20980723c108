from __future__ import annotations

import hashlib
from datetime import datetime
from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.enums import TemplateFormat
from ..core.exceptions import DuplicateTemplate, StoreUnavailable
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key
from ..fingerprints.model import Template
from .model import Employee, EmployeeProfile
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, name, role, department, email,
    template_format, template_raw, template_captured_at,
    active, enrolled_at
"""


def template_hash(raw: bytes) -> str:
    return hashlib.sha256(raw).hexdigest()


def _row_to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(row["employee_id"]),
        name=row["name"],
        role=row.get("role"),
        department=row.get("department"),
        email=row.get("email"),
        template=Template(
            format=TemplateFormat(row["template_format"]),
            raw=bytes(row.get("template_raw") or b""),
            captured_at=row["template_captured_at"],
        ),
        active=bool(row.get("active", True)),
        enrolled_at=row["enrolled_at"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_active_by_exact_template(self, raw: bytes) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            # hash narrows via the index, raw comparison rules out collisions
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE active_template_hash=%s AND template_raw=%s
                LIMIT 1
                """,
                (template_hash(raw), raw),
            )
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE active=1
                ORDER BY employee_id ASC
                """
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def insert_employee(
        self,
        profile: EmployeeProfile,
        template: Template,
        *,
        enrolled_at: datetime,
    ) -> Employee:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employees(
                        name, role, department, email,
                        template_format, template_raw, template_hash, template_captured_at,
                        active, enrolled_at
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,1,%s)
                    """,
                    (
                        profile.name,
                        profile.role,
                        profile.department,
                        profile.email,
                        template.format.value,
                        template.raw,
                        template_hash(template.raw),
                        template.captured_at,
                        enrolled_at,
                    ),
                )
                employee_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateTemplate("An employee with this fingerprint is already enrolled") from e
            raise StoreUnavailable("Could not save employee") from e

        return Employee(
            employee_id=employee_id,
            name=profile.name,
            role=profile.role,
            department=profile.department,
            email=profile.email,
            template=template,
            active=True,
            enrolled_at=enrolled_at,
        )

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s",
                (int(employee_id),),
            )
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "UPDATE employees SET active=%s WHERE employee_id=%s",
                    (1 if is_active else 0, int(employee_id)),
                )
                return cur.rowcount > 0
        except mysql.connector.IntegrityError as e:
            if is_duplicate_key(e):
                raise DuplicateTemplate("Another active employee owns this fingerprint") from e
            raise StoreUnavailable("Could not update employee") from e
