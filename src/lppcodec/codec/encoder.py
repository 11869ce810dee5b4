"""CayenneLPP payload encoder.

This module provides the Encoder class, an append-only byte buffer with one
method per CayenneLPP sensor type. Every method applies the inverse of the
decoder's scaling and writes the same big-endian layout the decoder expects.

Values outside a type's wire range are not rejected: the scaled integer is
truncated to the wire width, so it wraps using two's complement. Only
non-finite floats (NaN, infinity) raise EncodeError, and the buffer is left
unchanged when they do.
"""

from __future__ import annotations

import logging
from typing import cast

from ..config import DEFAULT_CONFIG, CodecConfig
from .bytepack import Writable, pack_uint, to_wire_int
from .registry import PORT_SCALE, PORT_SIZE, REGISTRY, LppType

logger = logging.getLogger(__name__)


class Encoder:
    """Builds a CayenneLPP payload by appending typed records.

    The buffer only grows; the sole way to discard content is reset(). An
    Encoder must not be shared between threads without external locking.

    Examples:
        ```python
        from lppcodec import Encoder, decode_uplink

        encoder = Encoder()
        encoder.add_temperature(1, 21.5).add_relative_humidity(2, 48.0)
        encoder.add_gps(3, 52.3655, 4.8885, 21.54)

        payload = encoder.bytes()
        msg = decode_uplink(payload)
        ```
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize an empty encoder.

        Args:
            config: Codec configuration (defaults to DEFAULT_CONFIG)
        """
        self._config = config or DEFAULT_CONFIG
        self._buf = bytearray()
        self._capacity = 0
        self.grow(self._config.initial_capacity)

    # Buffer management

    def grow(self, n: int) -> None:
        """Hint that at least n more bytes will be appended.

        Args:
            n: Number of additional bytes expected

        Raises:
            ValueError: If n is negative
        """
        if n < 0:
            raise ValueError(f"grow requires a non-negative size, got {n}")
        self._capacity = max(self._capacity, len(self._buf) + n)

    def capacity(self) -> int:
        """Return the current capacity hint in bytes."""
        return max(self._capacity, len(self._buf))

    def bytes(self) -> bytes:
        """Return a read-only copy of the bytes written so far."""
        return bytes(self._buf)

    def reset(self) -> None:
        """Discard all written bytes; the capacity hint is kept."""
        logger.debug("encoder: reset, discarding %d bytes", len(self._buf))
        self._buf.clear()

    def write_to(self, sink: Writable) -> int:
        """Write all current bytes to a binary sink.

        Args:
            sink: Object with a ``write(bytes)`` method

        Returns:
            Number of bytes written

        Raises:
            OSError: Whatever the sink raises is propagated unchanged
        """
        data = bytes(self._buf)
        written = sink.write(data)
        return len(data) if written is None else written

    def __len__(self) -> int:
        return len(self._buf)

    def __bytes__(self) -> bytes:
        return self.bytes()

    # Record writers

    def _append(self, channel: int, lpp_type: LppType, payload: bytes) -> Encoder:
        self._buf.append(channel & 0xFF)
        self._buf.append(lpp_type)
        self._buf.extend(payload)
        return self

    def _scalar(self, channel: int, lpp_type: LppType, value: float) -> Encoder:
        spec = REGISTRY[lpp_type]
        raw = to_wire_int(value, cast(int, spec.scale), spec.size)
        return self._append(channel, lpp_type, pack_uint(raw, spec.size))

    def _xyz(self, channel: int, lpp_type: LppType, x: float, y: float, z: float) -> Encoder:
        spec = REGISTRY[lpp_type]
        scale = cast(int, spec.scale)
        payload = b"".join(pack_uint(to_wire_int(axis, scale, 2), 2) for axis in (x, y, z))
        return self._append(channel, lpp_type, payload)

    def add_port(self, channel: int, value: float) -> Encoder:
        """Append an untagged downlink record: channel and value x100 as 2 bytes."""
        raw = to_wire_int(value, PORT_SCALE, PORT_SIZE)
        self._buf.append(channel & 0xFF)
        self._buf.extend(pack_uint(raw, PORT_SIZE))
        return self

    def add_digital_input(self, channel: int, value: int) -> Encoder:
        return self._scalar(channel, LppType.DIGITAL_INPUT, value)

    def add_digital_output(self, channel: int, value: int) -> Encoder:
        return self._scalar(channel, LppType.DIGITAL_OUTPUT, value)

    def add_analog_input(self, channel: int, value: float) -> Encoder:
        """Append an analog input reading with 0.01 resolution."""
        return self._scalar(channel, LppType.ANALOG_INPUT, value)

    def add_analog_output(self, channel: int, value: float) -> Encoder:
        """Append an analog output reading with 0.01 resolution."""
        return self._scalar(channel, LppType.ANALOG_OUTPUT, value)

    def add_luminosity(self, channel: int, lux: int) -> Encoder:
        """Append an illuminance reading in lux (unsigned 16-bit)."""
        return self._scalar(channel, LppType.LUMINOSITY, lux)

    def add_presence(self, channel: int, value: int) -> Encoder:
        return self._scalar(channel, LppType.PRESENCE, value)

    def add_temperature(self, channel: int, celsius: float) -> Encoder:
        """Append a temperature in degrees Celsius with 0.1 resolution."""
        return self._scalar(channel, LppType.TEMPERATURE, celsius)

    def add_relative_humidity(self, channel: int, rh: float) -> Encoder:
        """Append a relative humidity percentage with 0.5 resolution."""
        return self._scalar(channel, LppType.RELATIVE_HUMIDITY, rh)

    def add_accelerometer(self, channel: int, x: float, y: float, z: float) -> Encoder:
        """Append an acceleration vector in g with 0.001 resolution per axis."""
        return self._xyz(channel, LppType.ACCELEROMETER, x, y, z)

    def add_barometric_pressure(self, channel: int, hpa: float) -> Encoder:
        """Append a barometric pressure in hPa with 0.1 resolution."""
        return self._scalar(channel, LppType.BAROMETRIC_PRESSURE, hpa)

    def add_gyrometer(self, channel: int, x: float, y: float, z: float) -> Encoder:
        """Append an angular rate vector in degrees/s with 0.01 resolution per axis."""
        return self._xyz(channel, LppType.GYROMETER, x, y, z)

    def add_gps(self, channel: int, latitude: float, longitude: float, meters: float) -> Encoder:
        """Append a GPS fix.

        Latitude and longitude are stored with 0.0001 degree resolution and
        altitude with 0.01 m resolution, each as a 24-bit two's-complement
        big-endian integer (high, mid, low byte).
        """
        scales = cast("tuple[int, int, int]", REGISTRY[LppType.GPS].scale)
        payload = b"".join(
            pack_uint(to_wire_int(value, scale, 3), 3)
            for value, scale in zip((latitude, longitude, meters), scales)
        )
        return self._append(channel, LppType.GPS, payload)
