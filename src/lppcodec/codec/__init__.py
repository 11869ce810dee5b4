"""CayenneLPP codec for lppcodec.

This module provides the type registry and the stream decoder and payload
encoder built on it.
"""

from __future__ import annotations

from .decoder import Decoder, decode_downlink, decode_uplink, find_location
from .encoder import Encoder
from .registry import REGISTRY, LppType, TypeSpec, lookup

__all__ = [
    "Decoder",
    "Encoder",
    "decode_uplink",
    "decode_downlink",
    "find_location",
    "LppType",
    "TypeSpec",
    "REGISTRY",
    "lookup",
]
