from __future__ import annotations

import logging
import threading
from typing import List, Optional, Sequence

from ..core.exceptions import DeviceError
from .device import SampleListener

logger = logging.getLogger(__name__)


class PushCaptureDevice:
    """Reader fed from outside the process.

    A scanner agent running next to the physical reader posts each sample to
    the API; `push_sample` hands it to whichever capture is listening.
    """

    def __init__(self, reader_ids: Sequence[str]):
        self._reader_ids = [r for r in reader_ids if r]
        self._lock = threading.Lock()
        self._listener: Optional[SampleListener] = None

    def enumerate(self) -> List[str]:
        return list(self._reader_ids)

    def start_acquisition(self, listener: SampleListener) -> None:
        with self._lock:
            if not self._reader_ids:
                raise DeviceError("No fingerprint reader configured")
            if self._listener is not None:
                raise DeviceError("Reader is already acquiring")
            self._listener = listener
        logger.debug("Acquisition started")

    def stop_acquisition(self) -> None:
        with self._lock:
            was_listening = self._listener is not None
            self._listener = None
        if was_listening:
            logger.debug("Acquisition stopped")

    @property
    def acquiring(self) -> bool:
        with self._lock:
            return self._listener is not None

    def push_sample(self, raw: bytes) -> bool:
        """Deliver one sample. Returns False when no capture is waiting."""

        with self._lock:
            listener = self._listener
            # one sample per acquisition
            self._listener = None
        if listener is None or listener(raw) is False:
            logger.info("Sample dropped: no capture is waiting")
            return False
        return True
