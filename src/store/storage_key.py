"""Date-partitioned storage key derivation.

Keys are derived only from the identifier, never from document content:
``{YYYY}/{MM}/{DD}/{identifier}.json`` in UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone

from codec.ulid import timestamp_of
from core.constants import DOCUMENT_EXTENSION


def partition_prefix(timestamp_ms: int) -> str:
    """Return the ``YYYY/MM/DD`` partition for a millisecond timestamp."""
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return f"{moment.year:04d}/{moment.month:02d}/{moment.day:02d}"


def storage_key(document_id: str) -> str:
    """Derive the storage key for an identifier.

    Args:
        document_id: Document identifier.

    Returns:
        Relative key such as ``2025/11/10/01K9....json``.

    Raises:
        InvalidCharacterError: If the identifier time symbols are invalid.
    """
    return f"{partition_prefix(timestamp_of(document_id))}/{document_id}{DOCUMENT_EXTENSION}"


def identifier_from_key(key: str) -> str:
    """Return the identifier encoded in a key or file name."""
    file_name = key.rsplit("/", 1)[-1]
    return file_name.removesuffix(DOCUMENT_EXTENSION)
