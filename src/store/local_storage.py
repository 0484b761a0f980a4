"""Filesystem document backend.

Documents live at ``{root}/{YYYY}/{MM}/{DD}/{identifier}.json`` as UTF-8
JSON. Writes replace file content in place; they are not atomic.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.constants import DOCUMENT_EXTENSION
from core.errors import BoostBoxStoreError, DocumentNotFoundError
from core.logging_config import get_logger
from core.types import Document
from store.document_storage import parse_document, sort_newest_first, tag_document
from store.storage_key import identifier_from_key, storage_key

_LOGGER = get_logger(__name__)


class LocalStorage:
    """Filesystem-backed document store."""

    def __init__(self, root_path: Path) -> None:
        self._root_path = Path(root_path)

    @property
    def root_path(self) -> Path:
        return self._root_path

    def store(self, document_id: str, document: Document) -> None:
        """Write a document under its date partition.

        Args:
            document_id: Document identifier.
            document: Document payload; stored with ``id`` set.

        Raises:
            BoostBoxStoreError: If the directory or file cannot be written.
        """
        file_path = self._document_path(document_id)
        payload = json.dumps(tag_document(document_id, document), ensure_ascii=False)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(payload, encoding="utf-8")
        except OSError as error:
            raise BoostBoxStoreError(
                f"Failed to write document {document_id} to {file_path}: {error}. "
                "Check that the storage root is writable."
            ) from error
        _LOGGER.debug("document_stored", document_id=document_id, path=str(file_path))

    def retrieve(self, document_id: str) -> Document:
        """Read a document by identifier.

        Raises:
            DocumentNotFoundError: If no file exists for the identifier.
            BoostBoxStoreError: If the file cannot be read or parsed.
        """
        file_path = self._document_path(document_id)
        try:
            content = file_path.read_text(encoding="utf-8")
        except FileNotFoundError as error:
            raise DocumentNotFoundError(document_id) from error
        except OSError as error:
            raise BoostBoxStoreError(
                f"Failed to read document {document_id} from {file_path}: {error}."
            ) from error
        return parse_document(content, str(file_path))

    def list_all(self) -> list[Document]:
        """Walk the root tree and return every parseable document, newest first."""
        entries: list[tuple[str, Document]] = []
        for file_path in self._walk(self._root_path):
            try:
                document = parse_document(file_path.read_text(encoding="utf-8"), str(file_path))
            except (OSError, UnicodeDecodeError, BoostBoxStoreError) as error:
                _LOGGER.warning("document_skipped", path=str(file_path), reason=str(error))
                continue
            entries.append((identifier_from_key(file_path.name), document))
        return sort_newest_first(entries)

    def _walk(self, directory: Path) -> list[Path]:
        """Collect document files below ``directory`` recursively.

        Symlinked directories are not followed, so each file is seen once.
        """
        try:
            children = sorted(directory.iterdir())
        except OSError:
            return []
        found: list[Path] = []
        for child in children:
            if child.is_dir() and not child.is_symlink():
                found.extend(self._walk(child))
            elif child.is_file() and child.name.endswith(DOCUMENT_EXTENSION):
                found.append(child)
        return found

    def _document_path(self, document_id: str) -> Path:
        return self._root_path / storage_key(document_id)
