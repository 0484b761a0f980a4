"""Submission and lookup orchestration.

This module wires the identifier codec, the storage backend, and the
description formatter into the flows an HTTP layer exposes, using only
plain values so no framework types leak in.
"""

from __future__ import annotations

from core.config import BoostBoxConfig
from core.constants import BOOST_PATH_SEGMENT
from core.errors import InvalidIdentifierError
from core.logging_config import get_logger
from core.types import Document, SubmissionResult
from codec.ulid import generate, validate
from payment.description import format_description
from store.document_storage import DocumentStorage, tag_document

_LOGGER = get_logger(__name__)


def boost_url(base_url: str, document_id: str) -> str:
    """Return the public URL for a stored document."""
    return f"{base_url.rstrip('/')}/{BOOST_PATH_SEGMENT}/{document_id}"


class BoostService:
    """Primary entry point for storing and reading payment metadata."""

    def __init__(self, config: BoostBoxConfig, storage: DocumentStorage) -> None:
        self._config = config
        self._storage = storage

    def submit(self, document: Document) -> SubmissionResult:
        """Assign an identifier, persist the document, and describe it.

        Args:
            document: Validated payment metadata; ``action`` is required,
                ``message`` is optional.

        Returns:
            Identifier, public URL, and payment description.

        Raises:
            BoostBoxStoreError: If persistence fails.
        """
        document_id = generate()
        url = boost_url(self._config.base_url, document_id)
        tagged = tag_document(document_id, document)
        desc = format_description(
            str(tagged.get("action", "")),
            url,
            _optional_text(tagged.get("message")),
        )
        self._storage.store(document_id, tagged)
        _LOGGER.info("document_submitted", document_id=document_id, url=url)
        return SubmissionResult(id=document_id, url=url, desc=desc)

    def lookup(self, document_id: str) -> Document:
        """Fetch a stored document by identifier.

        Raises:
            InvalidIdentifierError: If the identifier is malformed.
            DocumentNotFoundError: If nothing is stored for it.
        """
        if not validate(document_id):
            raise InvalidIdentifierError(f"Identifier '{document_id}' is not a valid ULID.")
        return self._storage.retrieve(document_id)

    def list_boosts(self) -> list[Document]:
        """Return every stored document, newest first."""
        return self._storage.list_all()


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
