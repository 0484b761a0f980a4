"""Core constants used across BoostBox modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_ROOT_PATH = Path("boosts")
DEFAULT_ENV = "PROD"
SUPPORTED_ENVS = ("DEV", "STAGING", "PROD")
DEFAULT_STORAGE_KIND = "FS"
SUPPORTED_STORAGE_KINDS = ("FS", "S3")
DEFAULT_PORT = 8080

BASE32_ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
IDENTIFIER_LENGTH = 26
TIMESTAMP_CHAR_COUNT = 10
UUID_BYTE_LENGTH = 16
UUID_VERSION_BYTE_INDEX = 6
UUID_TIME_ORDERED_VERSION = 7

DOCUMENT_EXTENSION = ".json"
DOCUMENT_CONTENT_TYPE = "application/json"
BOOST_PATH_SEGMENT = "boost"

DESCRIPTION_PREFIX = "rss::payment::"
DESCRIPTION_RESERVED_CHARS = 16
DESCRIPTION_HARD_LIMIT = 639
DESCRIPTION_MIN_MESSAGE_CHARS = 3
DESCRIPTION_ELLIPSIS = "..."
