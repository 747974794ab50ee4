from __future__ import annotations

import argparse
import logging
import sys

from infix_tree.api import dump_source
from infix_tree.config import load_settings, parse_log_level
from infix_tree.errors import ParseError
from infix_tree.trace import InMemoryTrace


def _log_level(value: str) -> str:
    try:
        parse_log_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return value.strip().upper()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="infix-tree")
    parser.add_argument("--log-level", type=_log_level, default=None)
    sub = parser.add_subparsers(dest="cmd", required=True)

    dump_p = sub.add_parser("dump", help="print the tree dump of each expression")
    dump_p.add_argument("exprs", nargs="+", metavar="EXPR")

    trace_p = sub.add_parser("trace", help="print parse steps as JSON lines, then the dump")
    trace_p.add_argument("expr", metavar="EXPR")

    args = parser.parse_args(argv)

    if args.log_level is not None:
        level = parse_log_level(args.log_level)
    else:
        try:
            level = load_settings().log_level_number
        except ValueError as e:
            parser.error(str(e))
    logging.basicConfig(level=level, stream=sys.stderr)

    try:
        if args.cmd == "dump":
            for expr in args.exprs:
                print(dump_source(expr))
            return 0

        if args.cmd == "trace":
            trace = InMemoryTrace()
            text = dump_source(args.expr, trace=trace)
            sys.stdout.write(trace.to_jsonl())
            print(text)
            return 0
    except ParseError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    raise AssertionError(f"unhandled cmd: {args.cmd}")
