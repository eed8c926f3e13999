"""Command-line interface for strutil.

WHY: Quick checks of how a string will look after code page casing, what
its bytes are, or what a number formats to are easier from a shell than
from a REPL. The CLI wires the core functions behind one command.

HOW: argparse with one subcommand per operation. Results go to stdout,
either as plain text or (with --json) as a JSON object validated against
schemas/cli_result.schema.json before printing. Diagnostics go to stderr.

RULES:
- Subcommands: upper, lower, hex, to-string, from-string
- --encoding applies to every byte-oriented subcommand
- from-string is lenient unless --strict is given
- Exit codes: 0 = success, 1 = error (message on stderr)
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from strutil.config import DEFAULT_ENCODING, DEFAULT_HEX_SEPARATOR, LOG_LEVEL, validate_encoding
from strutil.core.casing import to_lower_case, to_upper_case
from strutil.core.conversion import from_string, from_string_checked, to_string
from strutil.core.hexenc import to_hex_string
from strutil.core.scalars import SCALAR_TYPES

logger = logging.getLogger(__name__)

_SCHEMA_PATH = Path(__file__).resolve().parent / "schemas" / "cli_result.schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _jsonable(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def run_command(args: argparse.Namespace) -> Dict[str, Any]:
    """Execute one parsed subcommand and return the result record.

    Raises:
        ValueError: On an unknown encoding, or a strict parse failure.
    """
    encoding = validate_encoding(args.encoding)
    record: Dict[str, Any] = {"operation": args.command, "input": args.text}

    if args.command == "upper":
        record["result"] = to_upper_case(args.text, encoding=encoding)
        record["encoding"] = encoding
    elif args.command == "lower":
        record["result"] = to_lower_case(args.text, encoding=encoding)
        record["encoding"] = encoding
    elif args.command == "hex":
        record["result"] = to_hex_string(
            args.text,
            separator=args.separator,
            encoding=encoding,
            trailing_separator=args.trailing,
        )
        record["encoding"] = encoding
    elif args.command == "to-string":
        value = from_string_checked(args.text, args.type)
        record["result"] = to_string(value, precision=args.precision, scalar_type=args.type)
        record["type"] = args.type
    elif args.command == "from-string":
        parse = from_string_checked if args.strict else from_string
        record["result"] = _jsonable(parse(args.text, args.type))
        record["type"] = args.type
    else:
        raise ValueError("Unknown command '{}'".format(args.command))

    logger.debug("%s(%r) -> %r", args.command, args.text, record["result"])
    return record


def render(record: Dict[str, Any], as_json: bool) -> str:
    """Render a result record as plain text or schema-validated JSON.

    Raises:
        jsonschema.ValidationError: If the record does not match the schema.
    """
    if not as_json:
        return str(record["result"])
    jsonschema.validate(instance=record, schema=_get_schema())
    return json.dumps(record, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separate from main() so tests can inspect the parser without running
    a command.
    """
    parser = argparse.ArgumentParser(
        prog="strutil",
        description="Code page aware case mapping, hex dumps and number formatting.",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Single-byte code page for text input (default: %(default)s).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a JSON object.",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level for stderr diagnostics (default: %(default)s).",
    )

    sub = parser.add_subparsers(dest="command", required=True)
    type_names = sorted(SCALAR_TYPES.keys())

    for name, help_text in (
        ("upper", "Uppercase text using the code page casing bands."),
        ("lower", "Lowercase text using the code page casing bands."),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("text")

    hex_cmd = sub.add_parser("hex", help="Dump the bytes of text as uppercase hex.")
    hex_cmd.add_argument("text")
    hex_cmd.add_argument(
        "--separator",
        default=DEFAULT_HEX_SEPARATOR,
        help="Text written after each byte (default: %(default)r).",
    )
    hex_cmd.add_argument(
        "--no-trailing",
        dest="trailing",
        action="store_false",
        help="Omit the separator after the last byte.",
    )

    to_cmd = sub.add_parser("to-string", help="Parse a number and format it with fixed precision.")
    to_cmd.add_argument("text")
    to_cmd.add_argument("--type", default="float", choices=type_names)
    to_cmd.add_argument(
        "--precision",
        type=int,
        default=0,
        help="Fractional digits; 0 means the type's full digit capacity.",
    )

    from_cmd = sub.add_parser("from-string", help="Parse the leading value of a type from text.")
    from_cmd.add_argument("text")
    from_cmd.add_argument("--type", default="int", choices=type_names)
    from_cmd.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of returning the type's default value.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m strutil`` and the ``strutil`` script.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(
            level=args.log_level.upper(),
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
        record = run_command(args)
        output = render(record, args.json)
    except (ValueError, jsonschema.ValidationError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
