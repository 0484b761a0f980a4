"""Bounded payment description formatting.

The rendered string goes into a payment invoice description field whose
total length is capped at 639 characters.
"""

from __future__ import annotations

from core.constants import (
    DESCRIPTION_ELLIPSIS,
    DESCRIPTION_HARD_LIMIT,
    DESCRIPTION_MIN_MESSAGE_CHARS,
    DESCRIPTION_PREFIX,
    DESCRIPTION_RESERVED_CHARS,
)


def format_description(action: str, url: str, message: str | None = None) -> str:
    """Render ``rss::payment::{action} {url} {message}`` within the field limit.

    Args:
        action: Payment action token such as ``boost`` or ``stream``.
        url: Public URL of the stored document.
        message: Optional free-text message; truncated to fit.

    Returns:
        Description string with no trailing whitespace. Truncated messages
        end in ``...``; remainders shorter than three characters are dropped.
    """
    head = f"{DESCRIPTION_PREFIX}{action} {url}"
    if not message:
        return head
    budget = max(0, DESCRIPTION_HARD_LIMIT - DESCRIPTION_RESERVED_CHARS - len(url) - len(action))
    truncated = message[:budget]
    if len(truncated) < DESCRIPTION_MIN_MESSAGE_CHARS:
        return head
    if len(truncated) < len(message):
        truncated = truncated[: -len(DESCRIPTION_ELLIPSIS)] + DESCRIPTION_ELLIPSIS
    return f"{head} {truncated}"
