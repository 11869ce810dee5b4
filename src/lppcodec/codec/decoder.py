"""CayenneLPP stream decoder.

This module provides the Decoder class that turns a CayenneLPP byte stream into
an UplinkMessage or DownlinkMessage, plus module-level convenience functions
that accept either raw bytes or a readable binary stream.

Uplink records are ``[channel:1][type:1][payload:N]`` with N fixed per type.
Downlink records are ``[channel:1][value:2]`` and the stream may be terminated
early by the sentinel byte in channel position.
"""

from __future__ import annotations

import io
import logging
from typing import Mapping, Union

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import DecodeError
from ..models.fields import LppValue
from ..models.messages import DownlinkMessage, UplinkMessage
from .bytepack import ByteReader, Readable, unpack_int
from .registry import PORT_SCALE, PORT_SIZE, REGISTRY, LppType, lookup

logger = logging.getLogger(__name__)

Source = Union[bytes, bytearray, memoryview, Readable]

_GPS_PREFIX = REGISTRY[LppType.GPS].name + "_"


class Decoder:
    """Decodes CayenneLPP records from a readable binary stream.

    A Decoder owns the read cursor of its stream; decode calls on the same
    instance must not run concurrently. Any error aborts the call and no partial
    message is returned.

    Examples:
        ```python
        import io
        from lppcodec import Decoder

        decoder = Decoder(io.BytesIO(bytes([7, 103, 0xFF, 0x64])))
        msg = decoder.decode_uplink()
        assert msg["temperature_7"] == -15.6
        ```
    """

    def __init__(self, stream: Readable, config: CodecConfig | None = None) -> None:
        """Initialize a decoder over the given stream.

        Args:
            stream: Binary stream to read records from
            config: Codec configuration (defaults to DEFAULT_CONFIG)
        """
        self._reader = ByteReader(stream)
        self._config = config or DEFAULT_CONFIG

    def decode_uplink(self) -> UplinkMessage:
        """Decode type-tagged records until the stream is exhausted.

        Returns:
            UplinkMessage mapping ``{type_name}_{channel}`` to decoded values.
            A later record with the same type and channel overwrites an earlier one.

        Raises:
            UnknownTypeError: If a header carries an unregistered type code
            UnexpectedEndError: If the stream ends inside a header or payload
        """
        values: dict[str, LppValue] = {}

        while True:
            offset = self._reader.position()
            try:
                header = self._reader.read_header(2)
                if header is None:
                    logger.debug("uplink: end of stream after %d records", len(values))
                    break

                channel, code = header[0], header[1]
                spec = lookup(code, channel)
                value = spec.decode(self._reader.read_exact(spec.size))
            except DecodeError as e:
                logger.debug("uplink: decode failed at offset %d: %s", offset, e)
                raise

            key = spec.key(channel)
            if key in values:
                logger.debug("uplink: %s repeated at offset %d, overwriting", key, offset)
            values[key] = value
            logger.debug("uplink: %s = %r", key, value)

        return UplinkMessage(values=values)

    def decode_downlink(self) -> DownlinkMessage:
        """Decode untagged channel/value records until exhaustion or the sentinel.

        Returns:
            DownlinkMessage mapping channel numbers to values divided by 100.

        Raises:
            UnexpectedEndError: If the stream ends inside a 2-byte value
        """
        values: dict[int, float] = {}
        sentinel = self._config.downlink_sentinel

        while True:
            offset = self._reader.position()
            header = self._reader.read_header(1)
            if header is None:
                logger.debug("downlink: end of stream after %d records", len(values))
                break

            channel = header[0]
            if channel == sentinel:
                logger.debug("downlink: sentinel 0x%02x at offset %d", sentinel, offset)
                break

            try:
                raw = self._reader.read_exact(PORT_SIZE)
            except DecodeError as e:
                logger.debug("downlink: decode failed at offset %d: %s", offset, e)
                raise

            values[channel] = unpack_int(raw, signed=True) / PORT_SCALE
            logger.debug("downlink: channel %d = %r", channel, values[channel])

        return DownlinkMessage(values=values)


def _as_stream(source: Source) -> Readable:
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source))
    return source


def decode_uplink(source: Source, config: CodecConfig | None = None) -> UplinkMessage:
    """Decode an uplink payload from bytes or a readable binary stream.

    Raises:
        UnknownTypeError: If a header carries an unregistered type code
        UnexpectedEndError: If the payload is truncated
    """
    return Decoder(_as_stream(source), config).decode_uplink()


def decode_downlink(source: Source, config: CodecConfig | None = None) -> DownlinkMessage:
    """Decode a downlink payload from bytes or a readable binary stream.

    Raises:
        UnexpectedEndError: If the payload is truncated
    """
    return Decoder(_as_stream(source), config).decode_downlink()


def find_location(values: Mapping[str, LppValue]) -> str | None:
    """Return the first GPS key in a decoded value mapping, or None.

    Example:
        >>> find_location({"temperature_1": 21.5, "gps_12": (52.3655, 4.8885, 21.54)})
        'gps_12'
    """
    for key in values:
        if key.startswith(_GPS_PREFIX):
            return key
    return None
