"""In-memory collaborators shared by the test modules."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence

from src.fingerprint_clock.fingerprint_clock.attendance.model import AttendanceRecord
from src.fingerprint_clock.fingerprint_clock.core.enums import AttendanceType, TemplateFormat
from src.fingerprint_clock.fingerprint_clock.core.exceptions import DeviceError, DuplicateTemplate, StoreUnavailable
from src.fingerprint_clock.fingerprint_clock.employees.model import Employee, EmployeeProfile
from src.fingerprint_clock.fingerprint_clock.fingerprints.model import Template


def make_template(raw, *, captured_at: Optional[datetime] = None) -> Template:
    return Template(
        format=TemplateFormat.PNG,
        raw=bytes(raw),
        captured_at=captured_at or datetime(2026, 2, 1, 9, 0, 0),
    )


class ScriptedDevice:
    """Delivers the next scripted sample as soon as acquisition starts.

    A `None` entry delivers nothing, so the capture times out.
    """

    def __init__(self, samples: Sequence[Optional[bytes]] = (), *, readers=("reader-0",), fail_start: bool = False):
        self._samples = list(samples)
        self._readers = list(readers)
        self.fail_start = fail_start
        self.listener = None
        self.starts = 0
        self.stops = 0

    def enumerate(self) -> List[str]:
        return list(self._readers)

    def start_acquisition(self, listener) -> None:
        if self.fail_start:
            raise DeviceError("Reader unplugged")
        self.starts += 1
        self.listener = listener
        sample = self._samples.pop(0) if self._samples else None
        if sample is not None:
            listener(bytes(sample))

    def stop_acquisition(self) -> None:
        self.stops += 1
        self.listener = None


class RecordingNotifier:
    def __init__(self):
        self.messages: List[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class RecordingSleeper:
    def __init__(self):
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class InMemoryEmployees:
    def __init__(self):
        self._by_id: Dict[int, Employee] = {}
        self._id = 0
        self.inserts = 0
        self.fail = False

    def _check(self) -> None:
        if self.fail:
            raise StoreUnavailable("Database is unavailable")

    def add(self, name: str, raw, *, active: bool = True) -> Employee:
        self._id += 1
        employee = Employee(
            employee_id=self._id,
            name=name,
            role=None,
            department=None,
            email=None,
            template=make_template(raw),
            enrolled_at=datetime(2026, 1, 1, 8, 0, 0),
            active=active,
        )
        self._by_id[employee.employee_id] = employee
        return employee

    def find_active_by_exact_template(self, raw: bytes) -> Optional[Employee]:
        self._check()
        for e in self.list_active():
            if e.template.raw == raw:
                return e
        return None

    def list_active(self) -> Sequence[Employee]:
        self._check()
        return [self._by_id[k] for k in sorted(self._by_id) if self._by_id[k].active]

    def insert_employee(self, profile: EmployeeProfile, template: Template, *, enrolled_at: datetime) -> Employee:
        self._check()
        if any(e.template.raw == template.raw for e in self.list_active()):
            raise DuplicateTemplate("An employee with this fingerprint is already enrolled")
        self._id += 1
        self.inserts += 1
        employee = Employee(
            employee_id=self._id,
            name=profile.name,
            role=profile.role,
            department=profile.department,
            email=profile.email,
            template=template,
            enrolled_at=enrolled_at,
            active=True,
        )
        self._by_id[employee.employee_id] = employee
        return employee

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        self._check()
        return self._by_id.get(employee_id)

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        self._check()
        e = self._by_id.get(employee_id)
        if not e:
            return False
        self._by_id[employee_id] = Employee(
            employee_id=e.employee_id,
            name=e.name,
            role=e.role,
            department=e.department,
            email=e.email,
            template=e.template,
            enrolled_at=e.enrolled_at,
            active=is_active,
        )
        return True


@dataclass
class InMemoryRecords:
    records: List[AttendanceRecord] = field(default_factory=list)
    fail_lookup: bool = False
    lookup_delay: float = 0.0
    _guard: threading.Lock = field(default_factory=threading.Lock)

    def find_last_record_for_day(self, employee_id: int, day: date) -> Optional[AttendanceRecord]:
        if self.fail_lookup:
            raise StoreUnavailable("Database query failed")
        with self._guard:
            same_day = [r for r in self.records if r.employee_id == employee_id and r.local_date == day]
        if self.lookup_delay:
            # widen the read-then-write window
            time.sleep(self.lookup_delay)
        if not same_day:
            return None
        return max(same_day, key=lambda r: (r.timestamp, r.record_id))

    def insert_record(self, employee_id: int, type: AttendanceType, timestamp: datetime) -> AttendanceRecord:
        with self._guard:
            record = AttendanceRecord(
                record_id=len(self.records) + 1,
                employee_id=employee_id,
                type=type,
                timestamp=timestamp,
                local_date=timestamp.date(),
            )
            self.records.append(record)
            return record

    def list_records(self, employee_id: int, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        with self._guard:
            rows = [r for r in self.records if r.employee_id == employee_id and start <= r.local_date <= end]
        return sorted(rows, key=lambda r: (r.timestamp, r.record_id))


def feed_when_listening(device, samples: Sequence[bytes], *, timeout: float = 5.0) -> threading.Thread:
    """Push each sample into a PushCaptureDevice once a capture is listening."""

    def run() -> None:
        for sample in samples:
            deadline = time.monotonic() + timeout
            while not device.acquiring:
                if time.monotonic() > deadline:
                    return
                time.sleep(0.005)
            device.push_sample(bytes(sample))

    t = threading.Thread(target=run, daemon=True)
    t.start()
    return t

