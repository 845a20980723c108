from __future__ import annotations

from datetime import datetime, timedelta

from src.fingerprint_clock.fingerprint_clock.attendance.service import AttendanceStateMachine
from src.fingerprint_clock.fingerprint_clock.core.enums import AttendanceType
from src.fingerprint_clock.fingerprint_clock.employees.model import EmployeeProfile
from src.fingerprint_clock.fingerprint_clock.enrollment.service import EnrollmentWorkflow
from src.fingerprint_clock.fingerprint_clock.fingerprints.capture import CaptureSession
from src.fingerprint_clock.fingerprint_clock.identification.service import IdentificationWorkflow
from src.fingerprint_clock.fingerprint_clock.timeclock.service import TimeClockService
from tests.fakes import InMemoryEmployees, InMemoryRecords, RecordingNotifier, RecordingSleeper, ScriptedDevice


def _build(samples, employees=None, records=None):
    device = ScriptedDevice(samples)
    notifier = RecordingNotifier()
    session = CaptureSession(device, notifier=notifier)
    employees = employees if employees is not None else InMemoryEmployees()
    records = records if records is not None else InMemoryRecords()
    enrollment = EnrollmentWorkflow(session, employees, notifier=notifier, sleeper=RecordingSleeper(), capture_timeout_ms=50)
    identification = IdentificationWorkflow(session, employees, notifier=notifier, capture_timeout_ms=50)
    clock = TimeClockService(identification, AttendanceStateMachine(records), notifier=notifier)
    return enrollment, clock, records, notifier


def test_enroll_then_clock_in_and_out(fixed_now):
    enrollment, clock, records, notifier = _build(
        [bytes([10, 20, 30]), bytes([12, 18, 33]), bytes([10, 20, 30]), bytes([10, 20, 30])]
    )

    enrolled = enrollment.enroll(EmployeeProfile(name="Ana"))
    first = clock.clock(now=fixed_now)
    second = clock.clock(now=fixed_now + timedelta(hours=8))

    assert enrolled.success is True
    assert first.success is True
    assert first.employee.employee_id == enrolled.employee.employee_id
    assert first.match.score == 100
    assert first.record.type == AttendanceType.IN
    assert first.message == "Attendance recorded. Type: IN"
    assert second.record.type == AttendanceType.OUT
    assert len(records.records) == 2
    assert "Authentication successful! Welcome, Ana" in notifier.messages


def test_unrecognised_finger_records_nothing(fixed_now):
    employees = InMemoryEmployees()
    employees.add("Ana", [10, 20, 30])
    _, clock, records, _ = _build([bytes([200, 100, 0])], employees)

    result = clock.clock(now=fixed_now)

    assert result.success is False
    assert result.error == "NoMatch"
    assert records.records == []


def test_store_outage_while_recording_is_a_failed_result(fixed_now):
    employees = InMemoryEmployees()
    employees.add("Ana", [10, 20, 30])
    _, clock, _, _ = _build([bytes([10, 20, 30])], employees, InMemoryRecords(fail_lookup=True))

    result = clock.clock(now=fixed_now)

    assert result.success is False
    assert result.error == "StoreUnavailable"
    assert result.employee.name == "Ana"
    assert result.record is None
    assert result.to_dict()["error"] == "StoreUnavailable"


def test_clock_uses_current_time_by_default():
    employees = InMemoryEmployees()
    employees.add("Ana", [10, 20, 30])
    _, clock, _, _ = _build([bytes([10, 20, 30])], employees)

    before = datetime.now()
    result = clock.clock()

    assert result.success is True
    assert result.record.timestamp >= before
