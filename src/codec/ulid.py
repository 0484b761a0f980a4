"""Crockford-style base-32 identifier encoding and decoding.

Identifiers are 26 characters wide and carry a 128-bit value whose
top 48 bits are a millisecond timestamp, so lexicographic order of
identifiers follows creation time.
"""

from __future__ import annotations

from core.constants import (
    BASE32_ALPHABET,
    IDENTIFIER_LENGTH,
    TIMESTAMP_CHAR_COUNT,
    UUID_BYTE_LENGTH,
    UUID_TIME_ORDERED_VERSION,
    UUID_VERSION_BYTE_INDEX,
)
from core.errors import InvalidCharacterError
from codec.uuid7 import uuid7_bytes

_BASE32_VALUE = {symbol: index for index, symbol in enumerate(BASE32_ALPHABET)}


def encode(value: int, length: int) -> str:
    """Encode an unsigned integer as exactly ``length`` base-32 symbols.

    Args:
        value: Integer to encode; negative values are clamped to zero.
        length: Number of output symbols.

    Returns:
        Encoded string, most significant symbol first, left-padded with ``0``.
    """
    remaining = max(value, 0)
    symbols: list[str] = []
    for _ in range(length):
        remaining, digit = divmod(remaining, 32)
        symbols.append(BASE32_ALPHABET[digit])
    return "".join(reversed(symbols))


def decode(text: str) -> int:
    """Decode a base-32 string into an unsigned integer.

    Args:
        text: Encoded identifier or identifier fragment.

    Returns:
        Decoded integer value.

    Raises:
        InvalidCharacterError: If a symbol is outside the alphabet.
    """
    accumulator = 0
    for symbol in text:
        index = _BASE32_VALUE.get(symbol)
        if index is None:
            raise InvalidCharacterError(symbol)
        accumulator = (accumulator << 5) | index
    return accumulator


def generate() -> str:
    """Return a fresh identifier built from a version-7 value."""
    value = int.from_bytes(uuid7_bytes(), byteorder="big")
    return encode(value, IDENTIFIER_LENGTH)


def to_uuid_bytes(identifier: str) -> bytes:
    """Convert an identifier into its 16 big-endian bytes.

    Raises:
        InvalidCharacterError: If a symbol is outside the alphabet.
    """
    value = decode(identifier) & ((1 << (8 * UUID_BYTE_LENGTH)) - 1)
    return value.to_bytes(UUID_BYTE_LENGTH, byteorder="big")


def validate(identifier: str) -> bool:
    """Return whether ``identifier`` is a well-formed version-7 identifier.

    Never raises: wrong length, unknown symbols, and a version nibble
    other than 7 all yield ``False``.
    """
    if len(identifier) != IDENTIFIER_LENGTH:
        return False
    try:
        value_bytes = to_uuid_bytes(identifier)
    except InvalidCharacterError:
        return False
    version = (value_bytes[UUID_VERSION_BYTE_INDEX] >> 4) & 0x0F
    return version == UUID_TIME_ORDERED_VERSION


def timestamp_of(identifier: str) -> int:
    """Extract the embedded millisecond epoch timestamp.

    Only the first ten symbols are read; they cover the top 50 bits of
    the encoded value, the lowest 48 of which are the timestamp.

    Args:
        identifier: Identifier string, matched case-insensitively.

    Returns:
        Milliseconds since the unix epoch.

    Raises:
        InvalidCharacterError: If a time symbol is outside the alphabet.
    """
    return decode(identifier[:TIMESTAMP_CHAR_COUNT].upper())
