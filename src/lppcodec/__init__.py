"""lppcodec: CayenneLPP payload codec

A Python library for the CayenneLPP (Cayenne Low Power Payload) format, the
compact channel-tagged encoding used to pack typed sensor readings into the
small payloads of constrained wireless links such as LoRaWAN.

Key Features:
- Uplink decoding of all standard sensor types, including signed GPS fixes
- Sentinel-terminated downlink decoding
- Append-only payload encoder with one method per sensor type
- Pydantic-based decoded message models
- No transport assumptions: works on bytes or any readable binary stream

Quick Start:
    >>> from lppcodec import Encoder, decode_uplink
    >>>
    >>> encoder = Encoder()
    >>> encoder.add_temperature(7, -15.6).add_gps(12, 52.3655, 4.8885, 21.54)
    >>> msg = decode_uplink(encoder.bytes())
    >>> msg["temperature_7"]
    -15.6
    >>> msg.got_location()
    'gps_12'
"""

from __future__ import annotations

from .codec import (
    REGISTRY,
    Decoder,
    Encoder,
    LppType,
    TypeSpec,
    decode_downlink,
    decode_uplink,
    find_location,
    lookup,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    LppError,
    UnexpectedEndError,
    UnknownTypeError,
)
from .models import DownlinkMessage, LppValue, UplinkMessage
from .utils import downlink_size, max_record_size, record_size, uplink_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Decoder",
    "Encoder",
    "decode_uplink",
    "decode_downlink",
    "find_location",
    # Type registry
    "LppType",
    "TypeSpec",
    "REGISTRY",
    "lookup",
    # Messages
    "UplinkMessage",
    "DownlinkMessage",
    "LppValue",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "LppError",
    "DecodeError",
    "UnknownTypeError",
    "UnexpectedEndError",
    "EncodeError",
    # Sizing
    "record_size",
    "uplink_size",
    "downlink_size",
    "max_record_size",
    # Version
    "__version__",
]
