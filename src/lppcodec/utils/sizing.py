"""Payload size calculation utilities.

This module provides functions to calculate the encoded size of CayenneLPP
payloads without actually encoding them, e.g. to check a frame fits the
maximum payload size of the radio link before building it.
"""

from __future__ import annotations

from typing import Iterable

from ..codec.registry import PORT_SIZE, REGISTRY, LppType, lookup

HEADER_SIZE = 2  # channel + type code


def record_size(lpp_type: LppType | int) -> int:
    """Calculate the encoded size of one uplink record in bytes.

    Args:
        lpp_type: Type code of the record

    Returns:
        Header plus payload size in bytes

    Raises:
        UnknownTypeError: If the type code is not registered

    Example:
        >>> record_size(LppType.TEMPERATURE)
        4
        >>> record_size(LppType.GPS)
        11
    """
    return HEADER_SIZE + lookup(lpp_type).size


def uplink_size(types: Iterable[LppType | int]) -> int:
    """Calculate the encoded size of an uplink payload made of the given records.

    Example:
        >>> uplink_size([LppType.TEMPERATURE, LppType.RELATIVE_HUMIDITY])
        7
    """
    return sum(record_size(t) for t in types)


def downlink_size(count: int, terminated: bool = False) -> int:
    """Calculate the encoded size of a downlink payload with count records.

    Args:
        count: Number of channel/value records
        terminated: If True, include the trailing sentinel byte

    Example:
        >>> downlink_size(2, terminated=True)
        7
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    return count * (1 + PORT_SIZE) + (1 if terminated else 0)


def max_record_size() -> int:
    """Return the size of the largest single uplink record (a GPS fix)."""
    return max(HEADER_SIZE + spec.size for spec in REGISTRY.values())
