from __future__ import annotations

import pytest

from src.fingerprint_clock.fingerprint_clock.core.exceptions import DeviceError, ValidationError
from src.fingerprint_clock.fingerprint_clock.fingerprints.model import Template, decode_sample
from src.fingerprint_clock.fingerprint_clock.fingerprints.push_device import PushCaptureDevice


def test_push_without_listener_is_rejected():
    assert PushCaptureDevice(["r1"]).push_sample(b"\x01") is False


def test_one_sample_per_acquisition():
    device = PushCaptureDevice(["r1"])
    received = []
    device.start_acquisition(received.append)

    assert device.push_sample(b"\x01") is True
    assert device.push_sample(b"\x02") is False
    assert received == [b"\x01"]


def test_double_start_is_a_device_error():
    device = PushCaptureDevice(["r1"])
    device.start_acquisition(lambda raw: None)

    with pytest.raises(DeviceError):
        device.start_acquisition(lambda raw: None)


def test_start_without_readers_fails():
    with pytest.raises(DeviceError):
        PushCaptureDevice([]).start_acquisition(lambda raw: None)


def test_stop_when_idle_is_harmless():
    device = PushCaptureDevice(["r1"])
    device.stop_acquisition()
    assert device.acquiring is False


def test_decode_sample_accepts_url_safe_without_padding():
    assert decode_sample("_-8") == b"\xff\xef"
    assert decode_sample("AQID") == b"\x01\x02\x03"


@pytest.mark.parametrize("value", ["", "   ", "not base64!"])
def test_decode_sample_rejects_garbage(value):
    with pytest.raises(ValidationError):
        decode_sample(value)


def test_template_base64_round_trip(fixed_now):
    from src.fingerprint_clock.fingerprint_clock.core.enums import TemplateFormat

    template = Template.from_base64("CgwU", format=TemplateFormat.RAW, captured_at=fixed_now)

    assert template.raw == bytes([10, 12, 20])
    assert template.raw_b64 == "CgwU"
