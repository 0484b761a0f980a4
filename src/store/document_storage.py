"""Storage contract shared by all document backends."""

from __future__ import annotations

import json
from typing import Protocol

from core.errors import BoostBoxStoreError
from core.types import Document


class DocumentStorage(Protocol):
    """Persist and fetch documents keyed by identifier.

    Implementations must tolerate concurrent callers using distinct
    identifiers. Writes to the same identifier are last-write-wins.
    """

    def store(self, document_id: str, document: Document) -> None:
        """Persist ``document`` under ``document_id``, replacing any previous one.

        Raises:
            BoostBoxStoreError: If the backend write fails.
        """

    def retrieve(self, document_id: str) -> Document:
        """Return the document stored under ``document_id``.

        Raises:
            DocumentNotFoundError: If nothing is stored for the identifier.
            BoostBoxStoreError: For any other backend failure.
        """

    def list_all(self) -> list[Document]:
        """Return every readable document, newest identifier first.

        Unreadable or malformed entries are skipped.
        """


def tag_document(document_id: str, document: Document) -> Document:
    """Return a copy of ``document`` whose ``id`` field equals ``document_id``."""
    return {**document, "id": document_id}


def sort_newest_first(entries: list[tuple[str, Document]]) -> list[Document]:
    """Order ``(key_identifier, document)`` pairs by identifier descending."""
    return [document for _, document in sorted(entries, key=lambda entry: entry[0], reverse=True)]


def parse_document(content: str | bytes, location: str) -> Document:
    """Parse JSON content into a document mapping.

    Args:
        content: Raw JSON text or UTF-8 bytes.
        location: Path or key used in error messages.

    Returns:
        Parsed document.

    Raises:
        BoostBoxStoreError: If content is not a JSON object.
    """
    try:
        payload = json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise BoostBoxStoreError(f"Failed to parse document at {location}: {error}.") from error
    if not isinstance(payload, dict):
        raise BoostBoxStoreError(
            f"Failed to parse document at {location}: expected JSON object at top level."
        )
    return payload
