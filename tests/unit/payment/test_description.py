"""Unit tests for bounded payment description formatting."""

from __future__ import annotations

from payment.description import format_description


def test_basic_format_has_payment_prefix() -> None:
    assert format_description("boost", "https://example.com", "msg").startswith("rss::payment::")


def test_empty_message_returns_bare_form() -> None:
    """Empty message should produce action and URL only."""
    assert format_description("buy", "https://example.com", "") == (
        "rss::payment::buy https://example.com"
    )


def test_missing_message_matches_empty_message() -> None:
    assert format_description("buy", "https://example.com", None) == format_description(
        "buy", "https://example.com", ""
    )


def test_short_message_passes_through() -> None:
    assert format_description("buy", "https://example.com", "hello world") == (
        "rss::payment::buy https://example.com hello world"
    )


def test_huge_message_never_exceeds_field_limit() -> None:
    """Output should respect the 639 character ceiling."""
    description = format_description(
        "stream",
        "https://very-long-domain.example.com/path/to/item",
        "word " * 1000,
    )

    assert len(description) <= 639


def test_truncated_message_ends_with_ellipsis() -> None:
    """Messages longer than the budget should end in an ellipsis."""
    action = "buy"
    url = "https://example.com"
    budget = 623 - len(action) - len(url)

    description = format_description(action, url, "x" * (budget + 10))

    assert description.endswith("...") and len(description) == 639


def test_message_fitting_budget_exactly_is_not_truncated() -> None:
    action = "buy"
    url = "https://example.com"
    message = "y" * (623 - len(action) - len(url))

    assert format_description(action, url, message).endswith("yyy")


def test_tiny_budget_drops_message() -> None:
    """A remainder of two characters or fewer should be dropped."""
    url = "https://example.com/" + "p" * (623 - 3 - 20 - 2)

    assert format_description("buy", url, "long message") == f"rss::payment::buy {url}"


def test_exhausted_budget_drops_message() -> None:
    url = "https://example.com/" + "p" * 700

    assert format_description("buy", url, "hello") == f"rss::payment::buy {url}"


def test_no_trailing_whitespace() -> None:
    for message in ("msg", "", None):
        assert not format_description("a", "b", message).endswith(" ")
