"""Decoded CayenneLPP message models.

UplinkMessage holds type-tagged sensor readings keyed by ``{type_name}_{channel}``;
DownlinkMessage holds untagged actuator values keyed by channel number.
"""

from __future__ import annotations

from typing import ItemsView, KeysView

from pydantic import Field

from .base import LppModel
from .fields import Channel, LppValue


class UplinkMessage(LppModel):
    """Result of decoding an uplink (device to network) payload.

    Example:
        >>> msg = decode_uplink(bytes([3, 2, 0x15, 0x4A, 7, 103, 0xFF, 0x64]))
        >>> msg["analog_input_3"]
        54.5
        >>> dict(msg.values)
        {'analog_input_3': 54.5, 'temperature_7': -15.6}
    """

    values: dict[str, LppValue] = Field(default_factory=dict)

    def __getitem__(self, key: str) -> LppValue:
        return self.values[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __len__(self) -> int:
        return len(self.values)

    def get(self, key: str, default: LppValue | None = None) -> LppValue | None:
        return self.values.get(key, default)

    def keys(self) -> KeysView[str]:
        return self.values.keys()

    def items(self) -> ItemsView[str, LppValue]:
        return self.values.items()

    def got_location(self) -> str | None:
        """Return the key of the GPS reading in this message, or None if there is none."""
        # Import here to avoid circular dependency
        from ..codec.decoder import find_location

        return find_location(self.values)


class DownlinkMessage(LppModel):
    """Result of decoding a downlink (network to device) payload.

    Values are the signed 16-bit wire integers divided by 100.
    """

    values: dict[Channel, float] = Field(default_factory=dict)

    def __getitem__(self, channel: int) -> float:
        return self.values[channel]

    def __contains__(self, channel: object) -> bool:
        return channel in self.values

    def __len__(self) -> int:
        return len(self.values)

    def get(self, channel: int, default: float | None = None) -> float | None:
        return self.values.get(channel, default)

    def keys(self) -> KeysView[int]:
        return self.values.keys()

    def items(self) -> ItemsView[int, float]:
        return self.values.items()
