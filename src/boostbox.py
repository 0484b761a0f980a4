"""Public SDK surface for BoostBox.

This module provides a stable import path for library users.
It re-exports the codec, storage backends, and service entry points.
"""

from __future__ import annotations

from codec.ulid import decode, encode, generate, timestamp_of, validate
from core.config import BoostBoxConfig, S3Settings
from core.errors import (
    BoostBoxError,
    BoostBoxStoreError,
    DocumentNotFoundError,
    InvalidCharacterError,
    InvalidIdentifierError,
)
from core.types import Document, SubmissionResult
from payment.description import format_description
from service.boost_service import BoostService, boost_url
from store.document_storage import DocumentStorage
from store.local_storage import LocalStorage
from store.s3_storage import S3Storage
from store.storage_factory import make_storage
from store.storage_key import storage_key

__all__ = [
    "BoostBoxConfig",
    "BoostBoxError",
    "BoostBoxStoreError",
    "BoostService",
    "Document",
    "DocumentNotFoundError",
    "DocumentStorage",
    "InvalidCharacterError",
    "InvalidIdentifierError",
    "LocalStorage",
    "S3Settings",
    "S3Storage",
    "SubmissionResult",
    "boost_url",
    "decode",
    "encode",
    "format_description",
    "generate",
    "make_storage",
    "storage_key",
    "timestamp_of",
    "validate",
]
