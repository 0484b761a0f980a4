"""Shared typed models.

This module defines the document alias and immutable result models
exchanged between the storage, payment, and service layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

Document = Dict[str, Any]


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of persisting a new document.

    Attributes:
        id: Identifier assigned to the document.
        url: Public URL at which the document can be fetched.
        desc: Bounded payment description embedding the URL.
    """

    id: str
    url: str
    desc: str
