"""Example: drive the workflows without Flask.

Feeds the push device from a background thread, the way the scanner agent
does over HTTP.
"""

import importlib
import threading
import time

from config import get_settings_module

from src.fingerprint_clock.fingerprint_clock.container import ClockOptions, build_container
from src.fingerprint_clock.fingerprint_clock.employees.model import EmployeeProfile


def _feed(device, samples, delay=0.5):
    for sample in samples:
        while not device.acquiring:
            time.sleep(0.05)
        time.sleep(delay)
        device.push_sample(sample)


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, options=ClockOptions.from_settings(settings))

    threading.Thread(target=_feed, args=(container.device, [bytes([10, 20, 30]), bytes([12, 18, 33])]), daemon=True).start()
    print(container.enrollment.enroll(EmployeeProfile(name="Ana", department="HR")).to_dict())

    threading.Thread(target=_feed, args=(container.device, [bytes([10, 20, 30])]), daemon=True).start()
    print(container.timeclock.clock().to_dict())


if __name__ == "__main__":
    main()
