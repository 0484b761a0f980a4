"""BoostBox exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class BoostBoxError(Exception):
    """Base exception for all BoostBox failures."""


class BoostBoxConfigError(BoostBoxError):
    """Raised for invalid runtime configuration."""


class InvalidCharacterError(BoostBoxError, ValueError):
    """Raised when an identifier contains a symbol outside the base-32 alphabet."""

    def __init__(self, character: str) -> None:
        super().__init__(f"Invalid base-32 character: {character!r}")
        self.character = character


class InvalidIdentifierError(BoostBoxError):
    """Raised when a caller supplies a malformed identifier."""


class BoostBoxStoreError(BoostBoxError):
    """Raised for storage backend I/O and network failures."""


class DocumentNotFoundError(BoostBoxStoreError):
    """Raised when no document exists for an identifier."""

    def __init__(self, document_id: str) -> None:
        super().__init__(f"No document stored for id '{document_id}'.")
        self.document_id = document_id


class BoostBoxDependencyError(BoostBoxError):
    """Raised when an optional runtime dependency is missing."""
