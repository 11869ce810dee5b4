"""Unit tests for byte-level reading and packing."""

from __future__ import annotations

import io

import pytest

from lppcodec import EncodeError
from lppcodec.codec.bytepack import (
    ByteReader,
    pack_uint,
    sign_extend_24,
    to_wire_int,
    unpack_int,
)
from lppcodec.exceptions import UnexpectedEndError


class TestByteReader:
    """Test ByteReader."""

    def test_read_exact(self) -> None:
        """Test exact reads and position tracking."""
        reader = ByteReader(io.BytesIO(b"\x01\x02\x03"))

        assert reader.read_exact(2) == b"\x01\x02"
        assert reader.position() == 2
        assert reader.read_exact(1) == b"\x03"

    def test_read_exact_short(self) -> None:
        """Test a short stream raises UnexpectedEndError."""
        reader = ByteReader(io.BytesIO(b"\x01"))

        with pytest.raises(UnexpectedEndError) as exc_info:
            reader.read_exact(2)

        assert (exc_info.value.expected, exc_info.value.received) == (2, 1)

    def test_read_exact_empty(self) -> None:
        """Test read_exact treats an empty stream as truncation."""
        with pytest.raises(UnexpectedEndError):
            ByteReader(io.BytesIO(b"")).read_exact(1)

    def test_read_header_clean_end(self) -> None:
        """Test read_header returns None at end of stream."""
        assert ByteReader(io.BytesIO(b"")).read_header(2) is None

    def test_read_header_partial(self) -> None:
        """Test a partial header raises UnexpectedEndError."""
        with pytest.raises(UnexpectedEndError):
            ByteReader(io.BytesIO(b"\x01")).read_header(2)


class TestPacking:
    """Test fixed-point and integer helpers."""

    def test_to_wire_int_positive(self) -> None:
        """Test scaling and rounding."""
        assert to_wire_int(54.5, 100, 2) == 5450
        assert to_wire_int(3.55, 100, 2) == 355

    def test_to_wire_int_negative(self) -> None:
        """Test negative values become two's complement."""
        assert to_wire_int(-15.6, 10, 2) == 0xFF64
        assert to_wire_int(-87.9094, 10000, 3) == 0xF2960A

    def test_to_wire_int_wraps(self) -> None:
        """Test values beyond the width wrap."""
        assert to_wire_int(256, 1, 1) == 0
        assert to_wire_int(65536 + 5, 1, 2) == 5

    def test_to_wire_int_non_finite(self) -> None:
        """Test NaN, infinity and float overflow after scaling are rejected."""
        with pytest.raises(EncodeError):
            to_wire_int(float("nan"), 10, 2)
        with pytest.raises(EncodeError):
            to_wire_int(float("-inf"), 1, 1)
        with pytest.raises(EncodeError):
            to_wire_int(1e308, 10000, 3)
        assert to_wire_int(10**30, 1, 1) == 0

    def test_pack_unpack(self) -> None:
        """Test big-endian packing."""
        assert pack_uint(0x154A, 2) == b"\x15\x4a"
        assert unpack_int(b"\xea\xb6", signed=True) == -5450
        assert unpack_int(b"\xea\xb6", signed=False) == 0xEAB6

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            (b"\x07\xfd\x87", 523655),
            (b"\xf2\x96\x0a", -879094),
            (b"\xff\xff\xff", -1),
            (b"\x80\x00\x00", -(1 << 23)),
            (b"\x7f\xff\xff", (1 << 23) - 1),
        ],
    )
    def test_sign_extend_24(self, data: bytes, expected: int) -> None:
        """Test 24-bit sign extension."""
        assert sign_extend_24(data) == expected

    def test_sign_extend_24_length(self) -> None:
        """Test sign_extend_24 requires three bytes."""
        with pytest.raises(ValueError):
            sign_extend_24(b"\x00\x00")
