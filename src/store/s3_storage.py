"""Object-store document backend.

This module stores documents in an S3-compatible bucket under the
date-partitioned key, one object per document, through boto3.
"""

from __future__ import annotations

import json
from typing import Any

from core.config import S3Settings
from core.constants import DOCUMENT_CONTENT_TYPE, DOCUMENT_EXTENSION
from core.errors import BoostBoxDependencyError, BoostBoxStoreError, DocumentNotFoundError
from core.logging_config import get_logger
from core.types import Document
from store.document_storage import parse_document, sort_newest_first, tag_document
from store.storage_key import identifier_from_key, storage_key

_LOGGER = get_logger(__name__)
_MISSING_KEY_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


def create_s3_client(settings: S3Settings) -> Any:
    """Create a boto3 S3 client for the configured endpoint.

    Args:
        settings: Object-store connection settings.

    Returns:
        Boto3 S3 client using path-style addressing.

    Raises:
        BoostBoxDependencyError: If boto3 is missing.
    """
    try:
        import boto3
        from botocore.config import Config
    except ImportError as error:
        raise BoostBoxDependencyError(
            "S3 storage requires boto3, but it is not installed. "
            "Install boto3 or set BB_STORAGE=FS."
        ) from error
    session = boto3.session.Session(
        aws_access_key_id=settings.access_key,
        aws_secret_access_key=settings.secret_key,
        region_name=settings.region,
    )
    return session.client(
        "s3",
        endpoint_url=settings.endpoint,
        config=Config(s3={"addressing_style": "path"}),
    )


class S3Storage:
    """S3-compatible object store implementation.

    ``list_all`` pages through the bucket listing and then issues one GET
    per key, so it costs O(n) round trips.
    """

    def __init__(self, client: Any, bucket: str) -> None:
        """Initialize the backend.

        Args:
            client: Boto3 S3 client or a compatible object.
            bucket: Bucket holding the documents.
        """
        self._client = client
        self._bucket = bucket

    @classmethod
    def from_settings(cls, settings: S3Settings) -> "S3Storage":
        return cls(create_s3_client(settings), settings.bucket)

    def store(self, document_id: str, document: Document) -> None:
        """Upload a document with a single PUT.

        Raises:
            BoostBoxStoreError: If the upload fails.
        """
        key = storage_key(document_id)
        body = json.dumps(tag_document(document_id, document), ensure_ascii=False)
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=body.encode("utf-8"),
                ContentType=DOCUMENT_CONTENT_TYPE,
            )
        except Exception as error:
            raise BoostBoxStoreError(
                f"Failed to upload document {document_id} to s3://{self._bucket}/{key}: {error}. "
                "Check S3 credentials and endpoint."
            ) from error
        _LOGGER.debug("document_stored", document_id=document_id, key=key)

    def retrieve(self, document_id: str) -> Document:
        """Fetch a document with a single GET.

        Raises:
            DocumentNotFoundError: If the key does not exist.
            BoostBoxStoreError: For any other failure.
        """
        key = storage_key(document_id)
        try:
            body = self._get_object_body(key)
        except Exception as error:
            if _error_code(error) in _MISSING_KEY_CODES:
                raise DocumentNotFoundError(document_id) from error
            raise BoostBoxStoreError(
                f"Failed to download document {document_id} from s3://{self._bucket}/{key}: {error}."
            ) from error
        return parse_document(body, f"s3://{self._bucket}/{key}")

    def list_all(self) -> list[Document]:
        """Return every readable document in the bucket, newest first.

        Raises:
            BoostBoxStoreError: If the key listing itself fails.
        """
        entries: list[tuple[str, Document]] = []
        for key in self._list_document_keys():
            try:
                document = parse_document(self._get_object_body(key), f"s3://{self._bucket}/{key}")
            except Exception as error:
                _LOGGER.warning("document_skipped", key=key, reason=str(error))
                continue
            entries.append((identifier_from_key(key), document))
        return sort_newest_first(entries)

    def _list_document_keys(self) -> list[str]:
        try:
            paginator = self._client.get_paginator("list_objects_v2")
            keys = [
                item["Key"]
                for page in paginator.paginate(Bucket=self._bucket)
                for item in page.get("Contents", [])
            ]
        except Exception as error:
            raise BoostBoxStoreError(
                f"Failed to list documents in s3://{self._bucket}: {error}."
            ) from error
        return [key for key in keys if key.endswith(DOCUMENT_EXTENSION)]

    def _get_object_body(self, key: str) -> bytes:
        response = self._client.get_object(Bucket=self._bucket, Key=key)
        return response["Body"].read()


def _error_code(error: Exception) -> str | None:
    """Extract the S3 error code from a botocore ClientError, if any."""
    response = getattr(error, "response", None)
    if not isinstance(response, dict):
        return None
    code = response.get("Error", {}).get("Code")
    return str(code) if code is not None else None
