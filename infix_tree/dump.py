from __future__ import annotations

from infix_tree.ast import BinaryExpression, Expression, Literal, ParenExpression, Variable


class DumpVisitor:
    """Writes a tree into an internal buffer; str() returns what was written.

    The buffer is never cleared, so use one visitor per dump.

    Traversal recurses through accept, about two frames per tree level, so
    trees nested deeper than roughly half of sys.getrecursionlimit() raise
    RecursionError. The parser itself has no depth limit.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def visit_literal(self, expression: Literal) -> None:
        self._parts.append(f"Literal({expression.value})")

    def visit_variable(self, expression: Variable) -> None:
        self._parts.append(f"Variable({expression.name})")

    def visit_binary(self, expression: BinaryExpression) -> None:
        self._parts.append("Binary(")
        expression.left.accept(self)
        self._parts.append(expression.operator)
        expression.right.accept(self)
        self._parts.append(")")

    def visit_paren(self, expression: ParenExpression) -> None:
        self._parts.append("Paren(")
        expression.operand.accept(self)
        self._parts.append(")")

    def __str__(self) -> str:
        return "".join(self._parts)


def dump(expression: Expression) -> str:
    visitor = DumpVisitor()
    expression.accept(visitor)
    return str(visitor)
