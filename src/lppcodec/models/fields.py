"""Field type aliases for CayenneLPP values.

This module provides the annotated types used by the message models and the
codec: the 8-bit channel identifier and the closed union of decoded values.
"""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import Field

# Per-message sensor instance identifier, one unsigned byte on the wire.
Channel = Annotated[int, Field(ge=0, le=255)]

# x/y/z for accelerometer and gyrometer, latitude/longitude/altitude for GPS.
Vector3 = tuple[float, float, float]

# Plain integers (digital I/O, presence, luminosity), scaled floats, or a vector.
LppValue = Union[int, float, Vector3]
