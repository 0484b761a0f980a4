"""Version-7 time-ordered value generation.

Layout: 48-bit unix_ts_ms | 4-bit version(7) | 12-bit rand_a
        | 2-bit variant(10) | 62-bit rand_b
"""

from __future__ import annotations

import os
import time

from core.constants import UUID_BYTE_LENGTH


def uuid7_bytes(timestamp_ms: int | None = None) -> bytes:
    """Build the 16 big-endian bytes of a version-7 value.

    Args:
        timestamp_ms: Optional millisecond epoch; current time when omitted.

    Returns:
        Sixteen bytes with version and variant bits set.
    """
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    value = bytearray(UUID_BYTE_LENGTH)
    value[0:6] = (timestamp_ms & 0xFFFF_FFFF_FFFF).to_bytes(6, byteorder="big")
    value[6:16] = os.urandom(10)
    value[6] = (value[6] & 0x0F) | 0x70
    value[8] = (value[8] & 0x3F) | 0x80
    return bytes(value)
