#!/usr/bin/env python3
"""Basic usage example for lppcodec.

This example demonstrates:
1. Building an uplink payload with the Encoder
2. Decoding it back into an UplinkMessage
3. Building and decoding a downlink payload
4. Calculating payload sizes before encoding
"""

from __future__ import annotations

import io

from lppcodec import Encoder, LppType, decode_downlink, decode_uplink, uplink_size


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("lppcodec Basic Usage Example")
    print("=" * 60)
    print()

    # Plan the payload
    print("1. Planning an uplink frame...")
    planned = [LppType.TEMPERATURE, LppType.RELATIVE_HUMIDITY, LppType.GPS]
    print(f"   Records: {', '.join(t.name.lower() for t in planned)}")
    print(f"   Expected size: {uplink_size(planned)} bytes")
    print()

    # Encode sensor readings
    print("2. Encoding sensor readings...")
    encoder = Encoder()
    encoder.add_temperature(1, 21.7)
    encoder.add_relative_humidity(2, 48.5)
    encoder.add_gps(3, 42.3519, -87.9094, 10.0)
    payload = encoder.bytes()

    print(f"   Encoded size: {len(payload)} bytes")
    print(f"   Hex: {payload.hex()}")
    print()

    # Decode the uplink
    print("3. Decoding uplink...")
    msg = decode_uplink(payload)
    for key, value in msg.items():
        print(f"   {key}: {value}")

    location = msg.got_location()
    if location is not None:
        lat, lon, alt = msg[location]
        print(f"   Location ({location}): {lat:.4f}, {lon:.4f} at {alt:.2f} m")
    print()

    # Downlink: raw port values terminated by 0xFF
    print("4. Building a downlink...")
    encoder.reset()
    encoder.add_port(1, 1.0).add_port(2, -54.5)
    sink = io.BytesIO()
    encoder.write_to(sink)
    sink.write(b"\xff")

    downlink = decode_downlink(sink.getvalue())
    for channel, value in downlink.items():
        print(f"   channel {channel}: {value}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
