"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from lppcodec import LppType


@pytest.fixture
def uplink_payload() -> bytes:
    """One record of every registered type, channels 1-12."""
    return bytes(
        [
            1, LppType.DIGITAL_INPUT, 255,
            2, LppType.DIGITAL_OUTPUT, 100,
            3, LppType.ANALOG_INPUT, 21, 74,
            4, LppType.ANALOG_OUTPUT, 234, 182,
            5, LppType.LUMINOSITY, 1, 244,
            6, LppType.PRESENCE, 50,
            7, LppType.TEMPERATURE, 255, 100,
            8, LppType.RELATIVE_HUMIDITY, 160,
            9, LppType.ACCELEROMETER, 254, 88, 0, 15, 6, 130,
            10, LppType.BAROMETRIC_PRESSURE, 41, 239,
            11, LppType.GYROMETER, 1, 99, 2, 49, 254, 102,
            12, LppType.GPS, 7, 253, 135, 0, 190, 245, 0, 8, 106,
        ]
    )  # fmt: skip


@pytest.fixture
def downlink_payload() -> bytes:
    """Two downlink records followed by the sentinel."""
    return bytes([1, 0, 100, 2, 234, 182, 255])
