"""Utility functions for lppcodec.

This module provides payload size calculation helpers.
"""

from __future__ import annotations

from .sizing import HEADER_SIZE, downlink_size, max_record_size, record_size, uplink_size

__all__ = [
    "HEADER_SIZE",
    "record_size",
    "uplink_size",
    "downlink_size",
    "max_record_size",
]
