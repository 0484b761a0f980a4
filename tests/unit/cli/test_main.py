"""Unit tests for CLI command handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import main
from codec.ulid import generate, validate
from tests.fixture_paths import fixture_path


@pytest.fixture(autouse=True)
def _filesystem_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BB_STORAGE", "FS")
    monkeypatch.setenv("BB_BASE_URL", "https://boost.example.com")


def _stdout_lines(capsys: pytest.CaptureFixture[str]) -> list[str]:
    return capsys.readouterr().out.strip().splitlines()


def test_cli_new_id_prints_valid_identifier(capsys) -> None:
    exit_code = main(["new-id"])
    lines = _stdout_lines(capsys)

    assert exit_code == 0 and validate(lines[-1])


def test_cli_validate_exit_codes() -> None:
    assert main(["validate", generate()]) == 0 and main(["validate", "abc123"]) == 1


def test_cli_timestamp_prints_utc_time(capsys) -> None:
    exit_code = main(["timestamp", generate()])
    lines = _stdout_lines(capsys)

    assert exit_code == 0 and lines[-1].endswith("+00:00")


def test_cli_describe_formats_message(capsys) -> None:
    exit_code = main(["describe", "boost", "https://example.com", "--message", "hello"])
    lines = _stdout_lines(capsys)

    assert exit_code == 0 and lines[-1] == "rss::payment::boost https://example.com hello"


def test_cli_submit_get_and_list(tmp_path: Path, capsys) -> None:
    """Submitted document should be retrievable and listed."""
    root = ["--root-path", str(tmp_path)]

    assert main([*root, "submit", str(fixture_path("boost_sample.json"))]) == 0
    submitted = dict(
        line.split("=", 1) for line in _stdout_lines(capsys) if line.startswith(("id=", "url="))
    )
    assert main([*root, "get", submitted["id"]]) == 0
    get_output = capsys.readouterr().out
    assert main([*root, "list"]) == 0
    listed = _stdout_lines(capsys)

    assert submitted["url"] == f"https://boost.example.com/boost/{submitted['id']}"
    assert '"feed_title": "Example Podcast"' in get_output
    assert submitted["id"] in listed


def test_cli_get_unknown_identifier_fails(tmp_path: Path, capsys) -> None:
    exit_code = main(["--root-path", str(tmp_path), "get", generate()])

    assert exit_code == 1 and "No document stored" in capsys.readouterr().err


def test_cli_submit_rejects_non_object_document(tmp_path: Path) -> None:
    document_path = tmp_path / "doc.json"
    document_path.write_text("[1, 2, 3]", encoding="utf-8")

    assert main(["--root-path", str(tmp_path / "store"), "submit", str(document_path)]) == 1
