"""BoostBox CLI entry points.
This module exposes identifier, storage, and description commands.
It maps argparse commands onto codec and service calls.
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from datetime import datetime, timezone
import json
from pathlib import Path
import sys
from typing import Any, Sequence

from codec.ulid import generate, timestamp_of, validate
from core.config import BoostBoxConfig
from core.errors import BoostBoxError, DocumentNotFoundError, InvalidIdentifierError
from core.logging_config import configure_logging
from payment.description import format_description
from service.boost_service import BoostService
from store.storage_factory import make_storage


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="boostbox", description="BoostBox metadata CLI")
    parser.add_argument("--root-path", help="Override BB_FS_ROOT_PATH for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_identifier_commands(subparsers)
    _add_submit_command(subparsers)
    _add_get_command(subparsers)
    subparsers.add_parser("list", help="List stored document ids, newest first")
    _add_describe_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the BoostBox CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "new-id":
        print(generate())
        return 0
    if args.command == "validate":
        return 0 if validate(args.id) else 1
    if args.command == "timestamp":
        return _run_timestamp_command(args)
    if args.command == "describe":
        print(format_description(args.action, args.url, args.message))
        return 0
    service = _build_service(args.root_path)
    if args.command == "submit":
        return _run_submit_command(service, args)
    if args.command == "get":
        return _run_get_command(service, args)
    if args.command == "list":
        for document in service.list_boosts():
            print(document.get("id", "-"))
        return 0
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_service(root_path: str | None) -> BoostService:
    """Build service with optional root-path override.

    Args:
        root_path: Optional override path.

    Returns:
        Service bound to the configured storage backend.
    """
    config = BoostBoxConfig.from_env()
    if root_path:
        config = replace(config, root_path=Path(root_path).expanduser().resolve())
    configure_logging(config)
    return BoostService(config, make_storage(config))


def _run_timestamp_command(args: argparse.Namespace) -> int:
    if not validate(args.id):
        print(f"invalid id: {args.id}", file=sys.stderr)
        return 1
    moment = datetime.fromtimestamp(timestamp_of(args.id) / 1000, tz=timezone.utc)
    print(moment.isoformat())
    return 0


def _run_submit_command(service: BoostService, args: argparse.Namespace) -> int:
    """Handle submit command.

    Args:
        service: Submission service.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    try:
        document = json.loads(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as error:
        print(f"cannot read document {args.file}: {error}", file=sys.stderr)
        return 1
    if not isinstance(document, dict):
        print(f"document {args.file} must be a JSON object", file=sys.stderr)
        return 1
    result = service.submit(document)
    print(f"id={result.id}")
    print(f"url={result.url}")
    print(f"desc={result.desc}")
    return 0


def _run_get_command(service: BoostService, args: argparse.Namespace) -> int:
    """Handle get command.

    Args:
        service: Lookup service.
        args: Parsed CLI args.

    Returns:
        Exit code; 1 when the id is invalid or unknown.
    """
    try:
        document = service.lookup(args.id)
    except (InvalidIdentifierError, DocumentNotFoundError) as error:
        print(str(error), file=sys.stderr)
        return 1
    print(json.dumps(document, indent=2, ensure_ascii=False))
    return 0


def _add_identifier_commands(subparsers: Any) -> None:
    """Register identifier subcommands."""
    subparsers.add_parser("new-id", help="Print a fresh identifier")
    validate_parser = subparsers.add_parser("validate", help="Exit 0 when an identifier is valid")
    validate_parser.add_argument("id", help="Identifier to check")
    timestamp_parser = subparsers.add_parser(
        "timestamp",
        help="Print the UTC creation time embedded in an identifier",
    )
    timestamp_parser.add_argument("id", help="Identifier to inspect")


def _add_submit_command(subparsers: Any) -> None:
    """Register submit subcommand."""
    parser = subparsers.add_parser("submit", help="Store a JSON document and print its id")
    parser.add_argument("file", help="Path to a JSON object file")


def _add_get_command(subparsers: Any) -> None:
    """Register get subcommand."""
    parser = subparsers.add_parser("get", help="Print a stored document")
    parser.add_argument("id", help="Document identifier")


def _add_describe_command(subparsers: Any) -> None:
    """Register describe subcommand."""
    parser = subparsers.add_parser("describe", help="Format a payment description")
    parser.add_argument("action", help="Payment action, e.g. boost")
    parser.add_argument("url", help="Document URL")
    parser.add_argument("--message", help="Optional message to embed")
