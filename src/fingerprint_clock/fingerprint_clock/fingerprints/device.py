from __future__ import annotations

from typing import Callable, List, Optional, Protocol

SampleListener = Callable[[bytes], Optional[bool]]


class CaptureDevice(Protocol):
    """Fingerprint reader boundary.

    After `start_acquisition` the device calls `listener` at most once with
    the raw sample bytes; a listener returning False did not take the sample
    (its capture already ended). `stop_acquisition` must detach the listener; it is
    called on every exit path and must tolerate being called when idle.
    """

    def enumerate(self) -> List[str]:
        raise NotImplementedError

    def start_acquisition(self, listener: SampleListener) -> None:
        raise NotImplementedError

    def stop_acquisition(self) -> None:
        raise NotImplementedError
