"""Configuration for the CayenneLPP codec.

The codec has no environment or file based settings; everything tunable lives
in the CodecConfig dataclass passed to a Decoder or Encoder.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    """Tunable parameters shared by Decoder and Encoder.

    Attributes:
        downlink_sentinel: Channel byte that terminates a downlink stream (default 0xFF).
            The sentinel is consumed and never reported as a channel.

        initial_capacity: Byte count the Encoder pre-sizes its buffer hint to (default 0).
            A typical LoRaWAN payload at SF12 is limited to 51 bytes, so a hint of
            51 covers a full uplink frame.

    Examples:
        ```python
        from lppcodec import CodecConfig, Decoder, Encoder

        encoder = Encoder(CodecConfig(initial_capacity=51))
        decoder = Decoder(stream, CodecConfig(downlink_sentinel=0xFE))
        ```
    """

    downlink_sentinel: int = 0xFF
    initial_capacity: int = 0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0 <= self.downlink_sentinel <= 0xFF:
            raise ValueError(
                f"downlink_sentinel must be a byte value 0-255, got {self.downlink_sentinel}"
            )

        if self.initial_capacity < 0:
            raise ValueError(f"initial_capacity must be >= 0, got {self.initial_capacity}")


DEFAULT_CONFIG = CodecConfig()
