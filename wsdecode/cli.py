from __future__ import annotations

import argparse
import sys
from pathlib import Path

from wsdecode.api import format_source, report_source
from wsdecode.config import OUTPUT_FORMATS, load_settings
from wsdecode.errors import DecodeError
from wsdecode.schemas import failure_from_error
from wsdecode.tokens import token_glyphs, tokenize


def _read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8", errors="replace")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="wsdecode")
    sub = parser.add_subparsers(dest="cmd", required=True)

    decode_p = sub.add_parser("decode", help="decode a program into an instruction listing")
    decode_p.add_argument("path", help="program file ('-' for stdin)")
    decode_p.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="output format (default: WSDECODE_FORMAT or text)",
    )

    tokens_p = sub.add_parser("tokens", help="print the filtered token stream as S/T/L")
    tokens_p.add_argument("path", help="program file ('-' for stdin)")

    args = parser.parse_args(argv)

    try:
        src = _read_source(args.path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"wsdecode: cannot read {args.path}: {e}", file=sys.stderr)
        return 2

    if args.cmd == "tokens":
        print(token_glyphs(tokenize(src)))
        return 0

    if args.cmd == "decode":
        try:
            settings = load_settings()
        except ValueError as e:
            print(f"wsdecode: invalid configuration: {e}", file=sys.stderr)
            return 2
        fmt = args.format or settings.output_format
        try:
            if fmt == "json":
                report = report_source(src=src, source=args.path, settings=settings)
                print(report.model_dump_json(indent=2))
            else:
                for line in format_source(src=src, settings=settings):
                    print(line)
        except DecodeError as e:
            if fmt == "json":
                print(failure_from_error(e, source=args.path).model_dump_json(indent=2))
            else:
                print(f"wsdecode: {args.path}: {e}", file=sys.stderr)
            return 1
        return 0

    raise AssertionError(f"unhandled cmd: {args.cmd}")
