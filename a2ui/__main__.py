"""CLI entry point for a2ui.

Usage:
    python -m a2ui validate messages.jsonl --strict
    python -m a2ui validate message.json --schema --json
    cat messages.jsonl | python -m a2ui validate - --protocol 0.9
    python -m a2ui catalog --json

Exit codes for ``validate``: 0 when valid, 1 when invalid, 2 when the input
(or the schema directory) cannot be read.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from a2ui.config import (
    EnvVar,
    get_default_validation_options,
    get_environment,
    get_protocol_version,
)
from a2ui.conformance import SchemaLoadError, SchemaValidationResult, SchemaValidator
from a2ui.core.log import get_logger, setup_logging
from a2ui.messages import detect_version, jsonl_to_messages
from a2ui.schema import ProtocolVersion, export_catalog_summary
from a2ui.validation import ValidationResult, validate_message, validate_messages

logger = get_logger("a2ui.cli")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_UNREADABLE = 2


def _read_input(path: str) -> Any:
    """Load a message, an array of messages, or JSON Lines from a path or stdin.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not valid JSON or JSON Lines.
    """
    if path == "-":
        text = sys.stdin.read()
        is_jsonl = False
    else:
        file_path = Path(path)
        text = file_path.read_text(encoding="utf-8")
        is_jsonl = file_path.suffix.lower() == ".jsonl"

    if is_jsonl:
        return jsonl_to_messages(text)
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        # stdin may carry JSON Lines
        if path == "-":
            return jsonl_to_messages(text)
        raise


def _print_result(result: ValidationResult, label: str) -> None:
    status = "valid" if result.valid else "invalid"
    print(f"{label}: {status} ({len(result.errors)} errors, {len(result.warnings)} warnings)")
    for issue in result.errors:
        print(f"  ERROR   {issue.code.value} {issue.path or '-'}: {issue.message}")
    for issue in result.warnings:
        print(f"  WARNING {issue.code.value} {issue.path or '-'}: {issue.message}")


def _schema_check(payload: Any, pinned: bool) -> SchemaValidationResult:
    """Cross-check against the v0.9 schemas.

    Unless v0.9 is pinned, messages inferred as v0.8 are skipped. Batch paths
    keep each message's original index.

    Raises:
        SchemaLoadError: If the schema documents cannot be loaded.
    """
    validator = SchemaValidator()
    messages = payload if isinstance(payload, list) else [payload]
    checked = SchemaValidationResult()
    skipped = []
    for index, message in enumerate(messages):
        if not pinned and detect_version(message) == ProtocolVersion.V0_8:
            skipped.append(index)
            continue
        for error in validator.validate_server_message(message).errors:
            if isinstance(payload, list):
                suffix = "" if error.path == "/" else error.path
                error.path = f"/messages/{index}{suffix}"
            checked.errors.append(error)
    if skipped:
        logger.warning(
            f"Schema cross-check covers v0.9 only; skipped {len(skipped)} "
            f"v0.8 message(s) at {skipped}"
        )
    return checked


def cmd_validate(args: argparse.Namespace) -> int:
    """Handle the validate command."""
    try:
        payload = _read_input(args.path)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.error(f"Cannot read {args.path}: {e}")
        return EXIT_UNREADABLE

    try:
        version = get_protocol_version(args.protocol)
    except ValueError as e:
        logger.error(str(e))
        return EXIT_UNREADABLE

    options = get_default_validation_options(
        strict=args.strict, allowed_components=args.allow
    )
    workers = get_environment(EnvVar.A2UI_MAX_WORKERS, override=args.workers)

    if isinstance(payload, list):
        result = validate_messages(
            payload, options, version=version, max_workers=workers
        )
    else:
        result = validate_message(payload, options, version=version)

    schema_result = None
    if args.schema:
        if version == ProtocolVersion.V0_8:
            logger.warning("Schema cross-check covers v0.9 only; skipped")
        else:
            try:
                schema_result = _schema_check(payload, pinned=version is not None)
            except SchemaLoadError as e:
                logger.error(str(e))
                return EXIT_UNREADABLE

    valid = result.valid and (schema_result is None or schema_result.valid)

    if args.json:
        report: dict[str, Any] = result.to_dict()
        report["valid"] = valid
        if schema_result is not None:
            report["schema"] = schema_result.to_dict()
        print(json.dumps(report, indent=2))
    else:
        _print_result(result, args.path)
        if schema_result is not None:
            status = "valid" if schema_result.valid else "invalid"
            print(f"schema: {status} ({len(schema_result.errors)} errors)")
            for error in schema_result.errors:
                print(f"  SCHEMA  {error.keyword} {error.path}: {error.message}")

    return EXIT_VALID if valid else EXIT_INVALID


def cmd_catalog(args: argparse.Namespace) -> int:
    """Handle the catalog command."""
    summary = export_catalog_summary()
    if args.json:
        print(json.dumps(summary, indent=2))
        return 0

    print("Standard components:\n")
    for component in summary["components"].values():
        required = ", ".join(component["required"]) or "-"
        print(f"  {component['type']} ({component['category']})")
        print(f"    Required: {required}")
        print(f"    Description: {component['description']}")
    print(f"\nProtocol versions: {', '.join(summary['protocol_versions'])}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m a2ui",
        description="Validate A2UI protocol messages",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a message, an array of messages, or JSON Lines",
    )
    validate_parser.add_argument(
        "path",
        type=str,
        help="Path to a .json or .jsonl file, or - for stdin",
    )
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Enable advisory warnings (default: A2UI_STRICT)",
    )
    validate_parser.add_argument(
        "--allow",
        nargs="+",
        metavar="KIND",
        default=None,
        help="Custom component kinds accepted in strict mode",
    )
    validate_parser.add_argument(
        "--protocol",
        "-p",
        type=str,
        default=None,
        help="Pin the protocol version, 0.8 or 0.9 (default: inferred)",
    )
    validate_parser.add_argument(
        "--schema",
        action="store_true",
        help="Also cross-check against the v0.9 JSON Schemas",
    )
    validate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    validate_parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=None,
        help="Thread pool size for batches (default: A2UI_MAX_WORKERS)",
    )
    validate_parser.set_defaults(func=cmd_validate)

    # catalog command
    catalog_parser = subparsers.add_parser(
        "catalog",
        help="List the standard component catalog",
    )
    catalog_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the catalog as JSON",
    )
    catalog_parser.set_defaults(func=cmd_catalog)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the a2ui CLI.

    Args:
        argv: Command-line arguments. If None, uses sys.argv.

    Returns:
        int: Exit code.
    """
    load_dotenv()
    setup_logging(level=get_environment(EnvVar.A2UI_LOG_LEVEL))

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
