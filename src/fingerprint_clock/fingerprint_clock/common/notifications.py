"""Status notification sinks.

Notifications are advisory: they tell an operator screen what the reader is
doing and never feed back into workflow decisions.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Deque, List, Protocol

from .datetime_utils import now_local

STATUS_LOGGER_NAME = "fingerprint_clock.status"


class StatusNotifier(Protocol):
    def notify(self, message: str) -> None:
        raise NotImplementedError


class NullNotifier:
    def notify(self, message: str) -> None:
        return None


class LoggingNotifier:
    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger(STATUS_LOGGER_NAME)

    def notify(self, message: str) -> None:
        self._logger.info("Status: %s", message)


@dataclass(frozen=True)
class StatusMessage:
    message: str
    at: datetime

    def to_dict(self) -> dict:
        return {"message": self.message, "at": self.at.isoformat()}


class RecentStatusNotifier(LoggingNotifier):
    """Logs every message and keeps the last few for the status endpoint."""

    def __init__(self, maxlen: int = 50, logger: logging.Logger | None = None):
        super().__init__(logger)
        self._messages: Deque[StatusMessage] = deque(maxlen=max(1, int(maxlen)))
        self._lock = threading.Lock()

    def notify(self, message: str) -> None:
        super().notify(message)
        with self._lock:
            self._messages.append(StatusMessage(message=message, at=now_local()))

    def recent(self) -> List[StatusMessage]:
        with self._lock:
            return list(self._messages)
