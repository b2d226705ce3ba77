# -*- coding: utf-8 -*-
"""``thrift2json`` command line entry point."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .converter import ThriftParserError
from .document import parse_thrift_to_json, read_source
from .extractor import require_record_span

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thrift2json",
        description="Convert a record toString() dump into pretty-printed JSON",
    )
    parser.add_argument(
        "input_file",
        help="File holding the toString() output",
    )
    parser.add_argument(
        "-o", "--output",
        dest="output_file",
        help="Output JSON path (default: <input name>.json in the current directory)",
    )
    # -t / -n write the same flag, so the last one on the command line wins
    parser.add_argument(
        "-t", "--include-type",
        dest="include_type",
        action="store_true",
        default=True,
        help="Add a _type field with the record type name (default)",
    )
    parser.add_argument(
        "-n", "--no-type",
        dest="include_type",
        action="store_false",
        help="Leave out the _type field",
    )
    parser.add_argument(
        "-x", "--extract",
        action="store_true",
        help="Convert only the first complete Identifier(...) record found in the file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Debug logging",
    )
    return parser


def default_output_path(input_file: str) -> str:
    return f"{Path(input_file).stem}.json"


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    output_file = args.output_file or default_output_path(args.input_file)

    try:
        if args.extract:
            span = require_record_span(read_source(input_file=args.input_file))
            parse_thrift_to_json(input_text=span, output_file=output_file, include_type=args.include_type)
        else:
            parse_thrift_to_json(
                input_file=args.input_file,
                output_file=output_file,
                include_type=args.include_type,
            )
    except ThriftParserError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Converted {args.input_file} -> {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
