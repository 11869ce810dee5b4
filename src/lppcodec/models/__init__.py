"""Pydantic models for decoded CayenneLPP messages.

This module provides the message containers returned by the decoder and the
field type aliases they are built from.
"""

from __future__ import annotations

from .base import LppModel
from .fields import Channel, LppValue, Vector3
from .messages import DownlinkMessage, UplinkMessage

__all__ = [
    "LppModel",
    "Channel",
    "LppValue",
    "Vector3",
    "UplinkMessage",
    "DownlinkMessage",
]
