from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceStateMachine
from .common.datetime_utils import Sleeper, real_sleep
from .common.locks import EmployeeLocks, KeyedLock
from .common.notifications import RecentStatusNotifier
from .core.constants import (
    BYTE_TOLERANCE,
    CAPTURE_TIMEOUT_MS,
    CONFIRMATION_PAUSE_MS,
    DEFAULT_READER_ID,
    DEFAULT_STATUS_HISTORY,
    MATCH_THRESHOLD,
)
from .core.enums import TemplateFormat
from .database.connection import DBConfig, DatabaseConnection
from .database.mysql_locks import MySQLNamedLocks
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .enrollment.service import EnrollmentWorkflow
from .fingerprints.capture import CaptureSession
from .fingerprints.matcher import TemplateMatcher
from .fingerprints.push_device import PushCaptureDevice
from .identification.service import IdentificationWorkflow
from .timeclock.service import TimeClockService


@dataclass(frozen=True)
class ClockOptions:
    reader_ids: Sequence[str] = (DEFAULT_READER_ID,)
    template_format: TemplateFormat = TemplateFormat.PNG
    capture_timeout_ms: int = CAPTURE_TIMEOUT_MS
    confirmation_pause_ms: int = CONFIRMATION_PAUSE_MS
    match_threshold: float = MATCH_THRESHOLD
    byte_tolerance: int = BYTE_TOLERANCE
    assume_in_on_store_error: bool = False
    use_db_locks: bool = True
    status_history: int = DEFAULT_STATUS_HISTORY

    @classmethod
    def from_settings(cls, settings) -> "ClockOptions":
        readers = getattr(settings, "READER_IDS", None) or [DEFAULT_READER_ID]
        return cls(
            reader_ids=tuple(readers),
            template_format=TemplateFormat(getattr(settings, "TEMPLATE_FORMAT", TemplateFormat.PNG.value)),
            capture_timeout_ms=int(getattr(settings, "CAPTURE_TIMEOUT_MS", CAPTURE_TIMEOUT_MS)),
            confirmation_pause_ms=int(getattr(settings, "CONFIRMATION_PAUSE_MS", CONFIRMATION_PAUSE_MS)),
            match_threshold=float(getattr(settings, "MATCH_THRESHOLD", MATCH_THRESHOLD)),
            byte_tolerance=int(getattr(settings, "BYTE_TOLERANCE", BYTE_TOLERANCE)),
            assume_in_on_store_error=bool(getattr(settings, "ATTENDANCE_ASSUME_IN_ON_STORE_ERROR", False)),
            use_db_locks=bool(getattr(settings, "USE_DB_LOCKS", True)),
            status_history=int(getattr(settings, "STATUS_HISTORY", DEFAULT_STATUS_HISTORY)),
        )


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    device: PushCaptureDevice
    notifier: RecentStatusNotifier
    capture_session: CaptureSession
    matcher: TemplateMatcher

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    employee_service: EmployeeService
    enrollment: EnrollmentWorkflow
    identification: IdentificationWorkflow
    attendance: AttendanceStateMachine
    timeclock: TimeClockService

    options: ClockOptions = field(default_factory=ClockOptions)


def wire(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    options: ClockOptions,
    locks: EmployeeLocks | None = None,
    sleeper: Sleeper = real_sleep,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Assemble services around already-built repositories."""

    device = PushCaptureDevice(options.reader_ids)
    notifier = RecentStatusNotifier(maxlen=options.status_history)
    capture_session = CaptureSession(device, notifier=notifier, template_format=options.template_format)
    matcher = TemplateMatcher(threshold=options.match_threshold, tolerance=options.byte_tolerance)

    enrollment = EnrollmentWorkflow(
        capture_session,
        employees_repo,
        matcher=matcher,
        notifier=notifier,
        sleeper=sleeper,
        capture_timeout_ms=options.capture_timeout_ms,
        confirmation_pause_ms=options.confirmation_pause_ms,
    )
    identification = IdentificationWorkflow(
        capture_session,
        employees_repo,
        matcher=matcher,
        notifier=notifier,
        capture_timeout_ms=options.capture_timeout_ms,
    )
    attendance = AttendanceStateMachine(
        attendance_repo,
        locks=locks or KeyedLock(),
        assume_in_on_store_error=options.assume_in_on_store_error,
    )
    timeclock = TimeClockService(identification, attendance, notifier=notifier)

    return Container(
        conn=conn,
        device=device,
        notifier=notifier,
        capture_session=capture_session,
        matcher=matcher,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_service=EmployeeService(employees_repo),
        enrollment=enrollment,
        identification=identification,
        attendance=attendance,
        timeclock=timeclock,
        options=options,
    )


def build_container(*, db_config: dict, options: ClockOptions | None = None) -> Container:
    options = options or ClockOptions()
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    locks: EmployeeLocks
    if options.use_db_locks:
        locks = MySQLNamedLocks(conn, prefix="fpclock.attendance")
    else:
        locks = KeyedLock()

    return wire(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        options=options,
        locks=locks,
        conn=conn,
    )
