from __future__ import annotations

import time
from datetime import date, datetime
from typing import Callable

# Sleeper takes seconds, like time.sleep.
Sleeper = Callable[[float], None]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def real_sleep(seconds: float) -> None:
    time.sleep(seconds)
