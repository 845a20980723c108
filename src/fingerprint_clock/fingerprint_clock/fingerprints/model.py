from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from datetime import datetime

from ..core.enums import TemplateFormat
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class Template:
    """Captured fingerprint sample.

    `raw` is the comparison payload; `format` only describes how the reader
    encoded it.
    """

    format: TemplateFormat
    raw: bytes
    captured_at: datetime

    @property
    def raw_b64(self) -> str:
        return base64.b64encode(self.raw).decode("ascii")

    @classmethod
    def from_base64(cls, value: str, *, format: TemplateFormat, captured_at: datetime) -> "Template":
        return cls(format=format, raw=decode_sample(value), captured_at=captured_at)


@dataclass(frozen=True)
class MatchResult:
    matched: bool
    score: float

    def to_dict(self) -> dict:
        return {"matched": self.matched, "score": round(self.score, 2)}


def decode_sample(value: str) -> bytes:
    """Decode a base64 (standard or url-safe, padding optional) sample."""

    text = (value or "").strip()
    if not text:
        raise ValidationError("Sample is empty")
    text = text.replace("-", "+").replace("_", "/")
    text += "=" * (-len(text) % 4)
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationError("Sample is not valid base64") from e
