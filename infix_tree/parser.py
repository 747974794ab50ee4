from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from infix_tree.ast import BinaryExpression, Expression, Literal, ParenExpression, Variable
from infix_tree.errors import ParseError
from infix_tree.trace import ParseStep, ParseTrace, StepKind

logger = logging.getLogger(__name__)

PRECEDENCE: Mapping[str, int] = MappingProxyType({"+": 1, "-": 1, "*": 2, "/": 2})

# Stands in for the top of an empty marker stack; never a key of PRECEDENCE.
NO_MARKER = "e"


class PrecedenceParser:
    """Operator-precedence parser over single-character tokens.

    One left-to-right scan drives two stacks: operands (finished subtrees) and
    markers (pending operators and open parentheses). An operator that does
    not bind tighter than the pending one first reduces it, then is looked at
    again against the new stack top, which makes equal tiers left-associative.

    Characters that are not digits, letters, operators or parentheses are
    skipped. Input that would pop an empty stack raises ParseError at that
    point. A trailing operator that is left over once a single operand
    remains is dropped, so ``"1+"`` parses to ``Literal('1')``.
    """

    def __init__(self, *, trace: ParseTrace | None = None) -> None:
        self._trace = trace

    def parse(self, text: str) -> Expression:
        operands: list[Expression] = []
        markers: list[str] = []

        i = 0
        while i < len(text):
            ch = text[i]
            if ch in PRECEDENCE:
                top = markers[-1] if markers else NO_MARKER
                if top in PRECEDENCE and PRECEDENCE[ch] <= PRECEDENCE[top]:
                    self._reduce(operands, markers, index=i)
                    # Do not advance: ch is compared against the new top.
                    continue
                markers.append(ch)
                self._record(i, ch, StepKind.PUSH_MARKER, operands, markers)
            elif ch == "(":
                markers.append(ch)
                self._record(i, ch, StepKind.PUSH_MARKER, operands, markers)
            elif ch == ")":
                while self._peek_marker(markers, index=i) != "(":
                    self._reduce(operands, markers, index=i)
                inner = self._pop_operand(operands, index=i)
                operands.append(ParenExpression(inner))
                markers.pop()
                self._record(i, ch, StepKind.WRAP_PAREN, operands, markers)
            elif ch.isdecimal():
                operands.append(Literal(ch))
                self._record(i, ch, StepKind.PUSH_OPERAND, operands, markers)
            elif ch.isalpha():
                operands.append(Variable(ch))
                self._record(i, ch, StepKind.PUSH_OPERAND, operands, markers)
            else:
                self._record(i, ch, StepKind.IGNORE, operands, markers)
            i += 1

        while markers and len(operands) > 1:
            self._reduce(operands, markers, index=None)

        if not operands:
            raise ParseError("no expression at end of input")
        result = operands.pop()
        logger.debug("parsed %r: %d operand(s) and %d marker(s) left over", text, len(operands), len(markers))
        return result

    def _reduce(self, operands: list[Expression], markers: list[str], *, index: int | None) -> None:
        op = self._peek_marker(markers, index=index)
        if op == "(":
            raise ParseError("unclosed '(' where an operator was expected", position=index)
        right = self._pop_operand(operands, index=index)
        left = self._pop_operand(operands, index=index)
        markers.pop()
        operands.append(BinaryExpression(left, right, op))
        logger.debug("reduce %r at %s (operands=%d)", op, index, len(operands))
        self._record(index, op, StepKind.REDUCE_BINARY, operands, markers)

    @staticmethod
    def _peek_marker(markers: list[str], *, index: int | None) -> str:
        if not markers:
            raise ParseError("marker stack is empty (unbalanced ')')", position=index)
        return markers[-1]

    @staticmethod
    def _pop_operand(operands: list[Expression], *, index: int | None) -> Expression:
        if not operands:
            raise ParseError("operand stack is empty (missing operand)", position=index)
        return operands.pop()

    def _record(
        self,
        index: int | None,
        ch: str,
        kind: StepKind,
        operands: list[Expression],
        markers: list[str],
    ) -> None:
        if self._trace is None:
            return
        self._trace.record(
            ParseStep(index=index, char=ch, kind=kind, operands=len(operands), markers=list(markers))
        )


def parse_expression(text: str, *, trace: ParseTrace | None = None) -> Expression:
    return PrecedenceParser(trace=trace).parse(text)
