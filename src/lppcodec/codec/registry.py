"""CayenneLPP type registry.

This module holds the fixed table of sensor types: for every type code it
records the key name used in decoded messages, the payload width in bytes,
the fixed-point scale factor and the rule that turns payload bytes into a value.
The numeric codes follow the IPSO object IDs used by the CayenneLPP format
(object ID minus 3200) and are part of the wire contract.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping, Union

from ..exceptions import UnknownTypeError
from ..models.fields import LppValue
from .bytepack import sign_extend_24, unpack_int

Scale = Union[int, tuple[int, int, int]]


class LppType(enum.IntEnum):
    """Type codes carried in the second byte of an uplink record header."""

    DIGITAL_INPUT = 0
    DIGITAL_OUTPUT = 1
    ANALOG_INPUT = 2
    ANALOG_OUTPUT = 3
    LUMINOSITY = 101
    PRESENCE = 102
    TEMPERATURE = 103
    RELATIVE_HUMIDITY = 104
    ACCELEROMETER = 113
    BAROMETRIC_PRESSURE = 115
    GYROMETER = 134
    GPS = 136


def _decode_raw(payload: bytes, scale: int) -> int:
    return unpack_int(payload, signed=False)


def _decode_unsigned(payload: bytes, scale: int) -> float:
    return unpack_int(payload, signed=False) / scale


def _decode_signed(payload: bytes, scale: int) -> float:
    return unpack_int(payload, signed=True) / scale


def _decode_signed_xyz(payload: bytes, scale: int) -> tuple[float, float, float]:
    x, y, z = (unpack_int(payload[i : i + 2], signed=True) / scale for i in range(0, 6, 2))
    return (x, y, z)


def _decode_gps(payload: bytes, scale: tuple[int, int, int]) -> tuple[float, float, float]:
    lat_scale, lon_scale, alt_scale = scale
    return (
        sign_extend_24(payload[0:3]) / lat_scale,
        sign_extend_24(payload[3:6]) / lon_scale,
        sign_extend_24(payload[6:9]) / alt_scale,
    )


@dataclass(frozen=True)
class TypeSpec:
    """Descriptor for one CayenneLPP type.

    Attributes:
        lpp_type: Type code
        name: Key prefix used in decoded uplink messages (e.g. "temperature")
        size: Payload width in bytes
        scale: Fixed-point factor; a 3-tuple for GPS (latitude, longitude, altitude)
        decoder: Function turning exactly ``size`` payload bytes into a value
    """

    lpp_type: LppType
    name: str
    size: int
    scale: Scale
    decoder: Callable[[bytes, Any], LppValue]

    def decode(self, payload: bytes) -> LppValue:
        """Apply this type's decode rule to a payload of exactly ``size`` bytes."""
        if len(payload) != self.size:
            raise ValueError(
                f"{self.name}: payload must be {self.size} bytes, got {len(payload)}"
            )
        return self.decoder(payload, self.scale)

    def key(self, channel: int) -> str:
        """Return the uplink message key for this type on the given channel."""
        return f"{self.name}_{channel}"


_SPECS = (
    TypeSpec(LppType.DIGITAL_INPUT, "digital_input", 1, 1, _decode_raw),
    TypeSpec(LppType.DIGITAL_OUTPUT, "digital_output", 1, 1, _decode_raw),
    TypeSpec(LppType.ANALOG_INPUT, "analog_input", 2, 100, _decode_signed),
    TypeSpec(LppType.ANALOG_OUTPUT, "analog_output", 2, 100, _decode_signed),
    TypeSpec(LppType.LUMINOSITY, "luminosity", 2, 1, _decode_raw),
    TypeSpec(LppType.PRESENCE, "presence", 1, 1, _decode_raw),
    TypeSpec(LppType.TEMPERATURE, "temperature", 2, 10, _decode_signed),
    TypeSpec(LppType.RELATIVE_HUMIDITY, "relative_humidity", 1, 2, _decode_unsigned),
    TypeSpec(LppType.ACCELEROMETER, "accelerometer", 6, 1000, _decode_signed_xyz),
    TypeSpec(LppType.BAROMETRIC_PRESSURE, "barometric_pressure", 2, 10, _decode_signed),
    TypeSpec(LppType.GYROMETER, "gyrometer", 6, 100, _decode_signed_xyz),
    TypeSpec(LppType.GPS, "gps", 9, (10000, 10000, 100), _decode_gps),
)

REGISTRY: Mapping[LppType, TypeSpec] = MappingProxyType({spec.lpp_type: spec for spec in _SPECS})

# Scale of the untagged downlink value written by Encoder.add_port.
PORT_SCALE = 100
PORT_SIZE = 2


def lookup(code: int, channel: int | None = None) -> TypeSpec:
    """Return the TypeSpec registered for a type code.

    Args:
        code: Type byte from a record header
        channel: Channel byte of the record, used only for the error message

    Raises:
        UnknownTypeError: If the code has no registry entry
    """
    try:
        return REGISTRY[LppType(code)]
    except ValueError:
        raise UnknownTypeError(code, channel) from None
