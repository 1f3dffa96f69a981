"""
Command-line interface for marshalkit.

Formats raw values, parses text forms back to raw values, and validates
JSON documents holding marshalkit values. Useful for checking what a config
value such as ``"1.5GB"`` or ``"90m"`` actually means before deploying it.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from marshalkit.core.encoding import dumps
from marshalkit.core.logger import configure_root_logger
from marshalkit.values import URL, Bytes, Checkbox, Duration, Mode, TextMarshaler

logger = logging.getLogger(__name__)

KINDS: Dict[str, Type[TextMarshaler]] = {
    "bytes": Bytes,
    "checkbox": Checkbox,
    "duration": Duration,
    "mode": Mode,
    "url": URL,
}

_BOOLEANS = {"true": True, "1": True, "false": False, "0": False}


def format_value(kind: str, raw: str) -> str:
    """
    Render a raw value in the text form of ``kind``.

    Args:
        kind: One of ``KINDS``
        raw: Integer (bytes, duration nanoseconds), integer literal such as
             ``0o644`` (mode), ``true``/``false`` (checkbox) or text (url)

    Returns:
        The canonical text form

    Raises:
        MarshalError: If the value cannot be represented

    Example:
        >>> format_value("bytes", "1048576")
        '1.0MB'
    """
    cls = KINDS[kind]
    if cls is URL:
        value = URL.unmarshal_text(raw)
    elif cls is Checkbox:
        if raw.lower() not in _BOOLEANS:
            raise Checkbox.error()
        value = Checkbox(_BOOLEANS[raw.lower()])
    else:
        try:
            number = int(raw, 0) if cls is Mode else int(raw)
        except ValueError:
            raise cls.error() from None
        value = cls.from_primitive(number)
    return value.marshal_text()


def parse_value(kind: str, text: str) -> str:
    """
    Parse the text form of ``kind`` and render the raw value it holds.

    Example:
        >>> parse_value("duration", "1m30s")
        '90000000000'
    """
    value = KINDS[kind].unmarshal_text(text)
    if isinstance(value, Checkbox):
        return "true" if value.bool() else "false"
    if isinstance(value, Mode):
        return oct(value.file_mode())
    if isinstance(value, URL):
        return value.marshal_text()
    return str(int(value))


def validate_document(config_path: str) -> Dict[str, Any]:
    """
    Validate a JSON document of marshalkit values.

    The document maps kind names to a JSON value or a list of them:

        {"bytes": ["1.0kB", "12kB"], "duration": "20h", "checkbox": false}

    Returns:
        The document with every value in canonical form

    Raises:
        FileNotFoundError: If the file doesn't exist
        MarshalError: If any value is invalid
        ValueError: If the document is not valid JSON or names unknown kinds
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, "r") as f:
        document = json.load(f)

    if not isinstance(document, dict):
        raise ValueError("Document must be a JSON object")

    logger.info(f"Validating document: {config_path}")

    result: Dict[str, Any] = {}
    for kind, entry in document.items():
        if kind not in KINDS:
            raise ValueError(f"Unknown kind: {kind}. Use one of {', '.join(KINDS)}")
        cls = KINDS[kind]
        if isinstance(entry, list):
            result[kind] = [cls.from_json_value(item) for item in entry]
        else:
            result[kind] = cls.from_json_value(entry)

    logger.info("Document is valid")
    return result


def cli(argv: Optional[List[str]] = None) -> int:
    """
    Command-line interface for marshalkit.

    Supports subcommands:
    - format: Render a raw value as text
    - parse: Parse text back to the raw value
    - validate: Check a JSON document of values

    Usage:
        marshalkit format bytes 1048576
        marshalkit parse duration 1h30m
        marshalkit validate /path/to/values.json
    """
    parser = argparse.ArgumentParser(
        prog="marshalkit",
        description="Format and parse human friendly sizes, durations, modes and urls"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for marshalkit messages"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to execute"
    )

    format_parser = subparsers.add_parser(
        "format",
        help="Render a raw value in text form"
    )
    format_parser.add_argument("kind", choices=list(KINDS))
    format_parser.add_argument("value", help="Raw value to render")

    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a text form to its raw value"
    )
    parse_parser.add_argument("kind", choices=list(KINDS))
    parse_parser.add_argument("text", help="Text form to parse")

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a JSON document of values"
    )
    validate_parser.add_argument(
        "config",
        help="Path to JSON document"
    )

    args = parser.parse_args(argv)
    configure_root_logger(args.log_level)

    try:
        if args.command == "format":
            print(format_value(args.kind, args.value))
        elif args.command == "parse":
            print(parse_value(args.kind, args.text))
        elif args.command == "validate":
            print(dumps(validate_document(args.config), indent=2))
        else:
            parser.print_help()
        return 0
    except (ValueError, FileNotFoundError) as e:
        # MarshalError and JSONDecodeError are both ValueErrors
        logger.error(f"{args.command} failed: {e}")
        return 1


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
