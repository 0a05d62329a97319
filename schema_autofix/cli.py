"""Command line entry point: repair a JSON-like file and report the changes."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .core.config import AutofixConfig
from .core.exceptions import ConfigurationError
from .core.jsonio import strict_loads
from .core.repair import JsonAutofixEngine
from .editor.buffer import locate_json_error
from .editor.schema_validation import validate_schema

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schema-autofix",
        description="Best-effort repair of near-JSON text (comments, trailing commas, "
        "single quotes, unquoted keys, missing commas).",
    )
    parser.add_argument("file", nargs="?", default="-", help="Input file; '-' or omitted reads stdin")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("-o", "--output", default=None, help="Write the repaired text here instead of stdout")
    target.add_argument("--in-place", action="store_true", help="Overwrite the input file")
    parser.add_argument("--check", action="store_true", help="Exit 1 if the result still is not valid JSON")
    parser.add_argument(
        "--validate-schema",
        action="store_true",
        help="Also require the result to be a field schema array (implies --check)",
    )
    parser.add_argument("--indent", type=int, default=None, help="Indentation for the reformatted JSON")
    parser.add_argument("-q", "--quiet", action="store_true", help="Do not print the change log")
    parser.add_argument("--log-level", default=None, help="Logging level (default from SCHEMA_AUTOFIX_LOG_LEVEL)")
    return parser


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.in_place and args.file == "-":
        parser.error("--in-place needs an input file")

    try:
        config = AutofixConfig.from_env()
        if args.indent is not None:
            config = replace(config, indent=args.indent)
        if args.log_level:
            config = replace(config, log_level=args.log_level.upper())
    except ConfigurationError as e:
        parser.error(str(e))

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        text = _read_input(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"schema-autofix: cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    result = JsonAutofixEngine(config=config).run(text)

    try:
        if args.in_place:
            Path(args.file).write_text(result.fixed, encoding="utf-8")
        elif args.output:
            Path(args.output).write_text(result.fixed, encoding="utf-8")
        else:
            print(result.fixed)
    except OSError as e:
        print(f"schema-autofix: cannot write output: {e}", file=sys.stderr)
        return 2

    if not args.quiet:
        if result.changes:
            for change in result.changes:
                print(f"- {change}", file=sys.stderr)
        else:
            print(result.summary(), file=sys.stderr)

    name = "<stdin>" if args.file == "-" else args.file
    if args.check or args.validate_schema:
        location = locate_json_error(result.fixed)
        if location is not None:
            print(f"{name}:{location.line}:{location.column}: {location.message}", file=sys.stderr)
            return 1

    if args.validate_schema:
        problems = validate_schema(strict_loads(result.fixed), source=result.fixed)
        for problem in problems:
            line = problem.line or 1
            print(f"{name}:{line}: {problem.describe()}", file=sys.stderr)
        if problems:
            return 1

    return 0
