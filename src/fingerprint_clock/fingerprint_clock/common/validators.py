from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def optional_email(value: Optional[str], field_name: str = "Email") -> Optional[str]:
    value = optional_text(value)
    if value is not None and not _EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} is not a valid address")
    return value
