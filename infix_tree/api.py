from __future__ import annotations

from infix_tree.dump import dump
from infix_tree.parser import parse_expression
from infix_tree.trace import ParseTrace


def dump_source(text: str, *, trace: ParseTrace | None = None) -> str:
    return dump(parse_expression(text, trace=trace))
