"""Unit tests for version-7 value generation."""

from __future__ import annotations

from codec.uuid7 import uuid7_bytes


def test_uuid7_bytes_embeds_timestamp() -> None:
    """The first six bytes should hold the millisecond timestamp."""
    value = uuid7_bytes(1_700_000_000_123)

    assert int.from_bytes(value[:6], byteorder="big") == 1_700_000_000_123


def test_uuid7_bytes_sets_version_and_variant() -> None:
    """Version nibble should be 7 and variant bits should be 10."""
    value = uuid7_bytes()

    assert value[6] >> 4 == 7 and value[8] >> 6 == 0b10
