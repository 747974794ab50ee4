from __future__ import annotations

from infix_tree.api import dump_source
from infix_tree.ast import (
    OPERATORS,
    BinaryExpression,
    Expression,
    ExpressionVisitor,
    Literal,
    ParenExpression,
    Variable,
)
from infix_tree.dump import DumpVisitor, dump
from infix_tree.errors import ParseError
from infix_tree.parser import PRECEDENCE, PrecedenceParser, parse_expression
from infix_tree.trace import InMemoryTrace, ParseStep, ParseTrace, StepKind

__all__ = [
    "__version__",
    # Tree model
    "Expression",
    "ExpressionVisitor",
    "Literal",
    "Variable",
    "BinaryExpression",
    "ParenExpression",
    "OPERATORS",
    # Parser
    "PrecedenceParser",
    "PRECEDENCE",
    "parse_expression",
    "ParseError",
    # Dump
    "DumpVisitor",
    "dump",
    "dump_source",
    # Trace
    "ParseTrace",
    "InMemoryTrace",
    "ParseStep",
    "StepKind",
]

__version__ = "0.1.0"
