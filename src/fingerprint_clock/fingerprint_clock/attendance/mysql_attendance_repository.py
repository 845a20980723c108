from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.enums import AttendanceType
from ..core.exceptions import StoreUnavailable
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _row_to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        type=AttendanceType(r["record_type"]),
        timestamp=r["recorded_at"],
        local_date=r["local_date"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_last_record_for_day(self, employee_id: int, day: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, employee_id, record_type, recorded_at, local_date
                FROM attendance_records
                WHERE employee_id=%s AND local_date=%s
                ORDER BY recorded_at DESC, record_id DESC
                LIMIT 1
                """,
                (int(employee_id), day),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def insert_record(self, employee_id: int, type: AttendanceType, timestamp: datetime) -> AttendanceRecord:
        local_date = timestamp.date()
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(employee_id, record_type, recorded_at, local_date)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(employee_id), type.value, timestamp, local_date),
                )
                record_id = int(cur.lastrowid)
        except mysql.connector.IntegrityError as e:
            raise StoreUnavailable("Could not save attendance record") from e

        return AttendanceRecord(
            record_id=record_id,
            employee_id=int(employee_id),
            type=type,
            timestamp=timestamp,
            local_date=local_date,
        )

    def list_records(self, employee_id: int, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, employee_id, record_type, recorded_at, local_date
                FROM attendance_records
                WHERE employee_id=%s AND local_date BETWEEN %s AND %s
                ORDER BY recorded_at ASC, record_id ASC
                """,
                (int(employee_id), start, end),
            )
            return [_row_to_record(r) for r in fetchall(cur)]
