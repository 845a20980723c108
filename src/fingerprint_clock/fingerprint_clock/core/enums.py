from __future__ import annotations

from enum import Enum


class TemplateFormat(str, Enum):
    """Encoding of a captured sample (metadata only, never compared)."""

    PNG = "PNG"
    RAW = "RAW"
    WSQ = "WSQ"
    INTERMEDIATE = "INTERMEDIATE"


class AttendanceType(str, Enum):
    """Direction of a time-clock event."""

    IN = "IN"
    OUT = "OUT"

    def toggled(self) -> "AttendanceType":
        return AttendanceType.OUT if self is AttendanceType.IN else AttendanceType.IN
