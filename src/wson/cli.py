"""
Command line interface for WSON files.

    wson validate FILE [FILE ...]
    wson format FILE [-o OUT] [--indent N]
    wson convert FILE --to {json,yaml} [-o OUT]

FILE may be `-` to read standard input. Exit status is 0 on success and
1 if any file fails to parse or cannot be read/written.
"""

import argparse
import dataclasses
import sys
from typing import List, Optional

import wson
from wson.config import DEFAULT_INDENT, ParserOptions, SerializerOptions
from wson.convert import to_json, to_yaml
from wson.errors import WsonError
from wson.log import configure_logging, get_logger

logger = get_logger("cli")


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _write(text: str, output: Optional[str]) -> None:
    if output is None or output == "-":
        sys.stdout.write(text + "\n")
        return
    with open(output, "w", encoding="utf-8") as f:
        f.write(text + "\n")


def _parser_options(args: argparse.Namespace) -> ParserOptions:
    options = ParserOptions.from_env()
    if args.max_depth is not None:
        options = dataclasses.replace(options, max_depth=args.max_depth)
    if args.legacy_comments:
        options = dataclasses.replace(options, quote_aware=False)
    return options


def _cmd_validate(args: argparse.Namespace) -> int:
    options = _parser_options(args)
    failures = 0
    for path in args.files:
        try:
            wson.loads(_read(path), options=options)
        except (WsonError, OSError) as e:
            failures += 1
            print(f"{path}: {e}")
            continue
        print(f"{path}: OK")
    return 1 if failures else 0


def _cmd_format(args: argparse.Namespace) -> int:
    document = wson.loads(_read(args.file), options=_parser_options(args))
    serializer_options = SerializerOptions(
        indent=args.indent,
        max_depth=args.max_depth if args.max_depth is not None else SerializerOptions().max_depth,
    )
    _write(wson.dumps(document, options=serializer_options), args.output)
    return 0


def _cmd_convert(args: argparse.Namespace) -> int:
    document = wson.loads(_read(args.file), options=_parser_options(args))
    if args.to == "json":
        text = to_json(document)
    else:
        text = to_yaml(document).rstrip("\n")
    _write(text, args.output)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wson", description="Validate, format and convert WSON files")
    parser.add_argument("--max-depth", type=int, default=None, help="Maximum object/array nesting")
    parser.add_argument(
        "--legacy-comments",
        action="store_true",
        help="Strip comment markers even inside quoted strings",
    )
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None)

    sub = parser.add_subparsers(dest="command", required=True)

    p_validate = sub.add_parser("validate", help="Check that files parse")
    p_validate.add_argument("files", nargs="+", help="WSON files ('-' for stdin)")
    p_validate.set_defaults(func=_cmd_validate)

    p_format = sub.add_parser("format", help="Re-emit a file as canonical WSON")
    p_format.add_argument("file", help="WSON file ('-' for stdin)")
    p_format.add_argument("-o", "--output", default=None, help="Output path (default: stdout)")
    p_format.add_argument("--indent", type=int, default=DEFAULT_INDENT, help="Spaces per level")
    p_format.set_defaults(func=_cmd_format)

    p_convert = sub.add_parser("convert", help="Export a WSON file as JSON or YAML")
    p_convert.add_argument("file", help="WSON file ('-' for stdin)")
    p_convert.add_argument("--to", choices=["json", "yaml"], required=True)
    p_convert.add_argument("-o", "--output", default=None, help="Output path (default: stdout)")
    p_convert.set_defaults(func=_cmd_convert)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        return args.func(args)
    except (WsonError, OSError, ValueError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
