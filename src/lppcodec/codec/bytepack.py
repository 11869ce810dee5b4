"""Byte-level reading and fixed-point packing utilities.

This module provides the low-level primitives shared by the decoder and encoder:
an exact-length reader over a binary stream, and helpers that convert between
scaled application values and big-endian wire integers. All multi-byte
integers are big-endian.
"""

from __future__ import annotations

import math
from typing import Protocol

from ..exceptions import EncodeError, UnexpectedEndError


class Readable(Protocol):
    """Anything with a ``read(n)`` method returning bytes (files, BytesIO, sockets)."""

    def read(self, size: int = -1, /) -> bytes: ...


class Writable(Protocol):
    """Anything with a ``write(b)`` method accepting bytes."""

    def write(self, data: bytes, /) -> int | None: ...


class ByteReader:
    """Reads exact-length chunks from a binary stream.

    Short reads from the underlying stream are retried until either the requested
    number of bytes has arrived or the stream reports end of input. Errors raised
    by the stream itself propagate unchanged.

    Example:
        >>> reader = ByteReader(io.BytesIO(b"\\x03\\x02\\x15\\x4a"))
        >>> reader.read_header(2)
        b'\\x03\\x02'
        >>> reader.read_exact(2)
        b'\\x15J'
        >>> reader.read_header(2) is None
        True
    """

    def __init__(self, stream: Readable) -> None:
        """Initialize a reader over the given stream.

        Args:
            stream: Binary stream to read from
        """
        self._stream = stream
        self._position = 0

    def _fill(self, num_bytes: int) -> bytes:
        buf = bytearray()
        while len(buf) < num_bytes:
            chunk = self._stream.read(num_bytes - len(buf))
            if not chunk:
                break
            buf.extend(chunk)
        self._position += len(buf)
        return bytes(buf)

    def read_exact(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            The bytes read

        Raises:
            UnexpectedEndError: If the stream ends before num_bytes are available
        """
        data = self._fill(num_bytes)
        if len(data) < num_bytes:
            raise UnexpectedEndError(num_bytes, len(data))
        return data

    def read_header(self, num_bytes: int) -> bytes | None:
        """Read a record header of num_bytes bytes, allowing a clean end of stream.

        Returns:
            The header bytes, or None if the stream was already exhausted

        Raises:
            UnexpectedEndError: If the stream ends partway through the header
        """
        data = self._fill(num_bytes)
        if not data:
            return None
        if len(data) < num_bytes:
            raise UnexpectedEndError(num_bytes, len(data))
        return data

    def position(self) -> int:
        """Return the number of bytes consumed so far."""
        return self._position


def to_wire_int(value: float, scale: int, size: int) -> int:
    """Scale a value and truncate it to an unsigned wire integer of size bytes.

    The scaled value is rounded to the nearest integer and then masked to the
    wire width, so out-of-range inputs wrap using two's complement instead of
    raising or clamping. NaN, infinity and values whose scaled form overflows
    a float have no wire integer and are rejected.

    Args:
        value: Application value (e.g. degrees Celsius)
        scale: Fixed-point scale factor (e.g. 10 for 0.1 resolution)
        size: Wire width in bytes

    Returns:
        Unsigned integer in [0, 2**(8*size))

    Raises:
        EncodeError: If the scaled value is not finite

    Example:
        >>> to_wire_int(-15.6, 10, 2)
        65380
    """
    scaled = value * scale
    if isinstance(scaled, float) and not math.isfinite(scaled):
        raise EncodeError(f"cayennelpp: cannot encode non-finite value {value!r}")
    return round(scaled) & ((1 << (8 * size)) - 1)


def pack_uint(value: int, size: int) -> bytes:
    """Pack an unsigned integer (already masked) as size big-endian bytes."""
    return value.to_bytes(size, byteorder="big")


def unpack_int(data: bytes, signed: bool) -> int:
    """Unpack a big-endian integer of len(data) bytes."""
    return int.from_bytes(data, byteorder="big", signed=signed)


def sign_extend_24(data: bytes) -> int:
    """Sign-extend a 3-byte big-endian two's-complement value.

    The three bytes are placed in the most significant positions of a 32-bit
    signed integer and arithmetically shifted right by 8 bits, which keeps the
    sign of negative coordinates.

    Example:
        >>> sign_extend_24(b"\\xf2\\x96\\x0a")
        -879094
    """
    if len(data) != 3:
        raise ValueError(f"sign_extend_24 requires exactly 3 bytes, got {len(data)}")
    return int.from_bytes(data + b"\x00", byteorder="big", signed=True) >> 8
