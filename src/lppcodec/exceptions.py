"""Exception hierarchy for lppcodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from LppError for easy catching of any lppcodec-specific error.

Stream I/O failures (``OSError`` and friends raised by the underlying reader or
writer) are not wrapped and propagate unchanged.
"""

from __future__ import annotations


class LppError(Exception):
    """Base exception for all lppcodec errors."""

    pass


class DecodeError(LppError):
    """Raised when decoding a CayenneLPP stream fails.

    Any DecodeError aborts the whole decode call; no partial message is returned.
    """

    pass


class UnknownTypeError(DecodeError):
    """Raised when an uplink record header carries a type code with no registry entry.

    Attributes:
        type_code: The offending type byte
        channel: Channel byte of the record, if known
    """

    def __init__(self, type_code: int, channel: int | None = None) -> None:
        self.type_code = type_code
        self.channel = channel
        if channel is None:
            message = f"cayennelpp: unknown type 0x{type_code:02x}"
        else:
            message = f"cayennelpp: unknown type 0x{type_code:02x} on channel {channel}"
        super().__init__(message)


class UnexpectedEndError(DecodeError):
    """Raised when the stream ends in the middle of a record header or payload.

    This is distinct from a clean end of stream at a record boundary, which
    terminates decoding normally.

    Attributes:
        expected: Number of bytes the read required
        received: Number of bytes actually available
    """

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"cayennelpp: unexpected end of input (need {expected} bytes, got {received})"
        )


class EncodeError(LppError):
    """Raised when a value cannot be written to the wire.

    Only non-finite floats (NaN, infinity) are rejected. Finite values outside
    a type's range wrap to the wire width instead.
    """

    pass
