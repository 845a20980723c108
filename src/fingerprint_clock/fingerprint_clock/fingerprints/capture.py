from __future__ import annotations

import logging
import threading
from concurrent import futures
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Iterator, Optional

from ..common.datetime_utils import now_local
from ..common.notifications import NullNotifier, StatusNotifier
from ..core.constants import CAPTURE_TIMEOUT_MS
from ..core.enums import TemplateFormat
from ..core.exceptions import CaptureCancelled, CaptureTimeout, DeviceError, SessionBusy
from .device import CaptureDevice
from .model import Template

logger = logging.getLogger(__name__)


class CaptureSession:
    """One bounded-time interaction with a reader at a time.

    Each capture owns a single-use completion handle (a Future); the device
    only ever sees a listener bound to that handle, so two captures can never
    resolve each other.

    A multi-capture flow (enrollment) holds the session with `reserved()`;
    captures from any other thread then fail with SessionBusy until it ends.
    """

    def __init__(
        self,
        device: CaptureDevice,
        *,
        notifier: StatusNotifier | None = None,
        template_format: TemplateFormat = TemplateFormat.PNG,
        clock: Callable[[], datetime] = now_local,
    ):
        self._device = device
        self._notifier = notifier or NullNotifier()
        self._format = template_format
        self._clock = clock
        self._state_lock = threading.Lock()
        self._pending: Optional[futures.Future] = None
        self._owner: Optional[int] = None
        self._reader: Optional[str] = None

    @property
    def reader(self) -> Optional[str]:
        return self._reader

    @property
    def busy(self) -> bool:
        with self._state_lock:
            return self._pending is not None or self._owner is not None

    @contextmanager
    def reserved(self) -> Iterator["CaptureSession"]:
        """Hold the reader for the calling thread across several captures."""

        me = threading.get_ident()
        with self._state_lock:
            if self._pending is not None or self._owner is not None:
                raise SessionBusy("The fingerprint reader is in use")
            self._owner = me
        try:
            yield self
        finally:
            with self._state_lock:
                self._owner = None

    def select_reader(self) -> str:
        """Pick the first reader the device reports."""

        try:
            readers = self._device.enumerate()
        except DeviceError:
            self._notifier.notify("Could not detect fingerprint readers.")
            raise
        except Exception as e:
            self._notifier.notify("Could not detect fingerprint readers.")
            raise DeviceError(f"Reader enumeration failed: {e}") from e

        if not readers:
            self._notifier.notify("No fingerprint reader found. Connect a device.")
            raise DeviceError("No fingerprint reader found")

        self._reader = readers[0]
        self._notifier.notify(f"Reader selected: {self._reader}")
        return self._reader

    def capture(self, timeout_ms: int = CAPTURE_TIMEOUT_MS) -> Template:
        handle: futures.Future = futures.Future()
        with self._state_lock:
            if self._pending is not None:
                raise SessionBusy("A capture is already in progress")
            if self._owner is not None and self._owner != threading.get_ident():
                raise SessionBusy("The fingerprint reader is in use")
            self._pending = handle

        started = False
        try:
            if self._reader is None:
                self.select_reader()

            def on_sample(raw: bytes) -> bool:
                try:
                    handle.set_result(bytes(raw))
                except futures.InvalidStateError:
                    # already resolved, timed out or cancelled
                    return False
                return True

            self._notifier.notify("Place your finger on the reader...")
            try:
                self._device.start_acquisition(on_sample)
            except DeviceError:
                raise
            except Exception as e:
                raise DeviceError(f"Could not start acquisition: {e}") from e
            started = True

            try:
                raw = handle.result(timeout=max(0, int(timeout_ms)) / 1000.0)
            except futures.CancelledError:
                self._notifier.notify("Capture cancelled.")
                raise CaptureCancelled("Fingerprint capture was cancelled") from None
            except futures.TimeoutError:
                # a cancelled handle refuses samples that arrive from now on
                if handle.cancel():
                    self._device.stop_acquisition()
                    started = False
                    self._notifier.notify("Capture timed out.")
                    raise CaptureTimeout(
                        f"No fingerprint captured within {max(0, int(timeout_ms)) / 1000:g} seconds"
                    ) from None
                raw = handle.result()

            self._device.stop_acquisition()
            started = False

            template = Template(format=self._format, raw=raw, captured_at=self._clock())
            self._notifier.notify("Fingerprint captured.")
            logger.debug("Captured %d bytes from %s", len(raw), self._reader)
            return template
        finally:
            if started:
                self._device.stop_acquisition()
            with self._state_lock:
                self._pending = None

    def cancel(self) -> bool:
        """Cancel the pending capture, if any."""

        with self._state_lock:
            handle = self._pending
        if handle is None:
            return False
        return handle.cancel()
