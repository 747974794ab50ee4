from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

OPERATORS = frozenset({"+", "-", "*", "/"})


class ExpressionVisitor(Protocol):
    def visit_literal(self, expression: Literal) -> Any: ...

    def visit_variable(self, expression: Variable) -> Any: ...

    def visit_binary(self, expression: BinaryExpression) -> Any: ...

    def visit_paren(self, expression: ParenExpression) -> Any: ...


class Expression:
    """Base of the closed node set: Literal, Variable, BinaryExpression, ParenExpression."""

    def accept(self, visitor: ExpressionVisitor) -> Any:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Literal(Expression):
    value: str

    def __post_init__(self) -> None:
        if len(self.value) != 1 or not self.value.isdecimal():
            raise ValueError(f"literal must be a single digit: {self.value!r}")

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_literal(self)


@dataclass(frozen=True, slots=True)
class Variable(Expression):
    name: str

    def __post_init__(self) -> None:
        if len(self.name) != 1 or not self.name.isalpha():
            raise ValueError(f"variable must be a single letter: {self.name!r}")

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_variable(self)


@dataclass(frozen=True, slots=True)
class BinaryExpression(Expression):
    left: Expression
    right: Expression
    operator: str

    def __post_init__(self) -> None:
        if self.operator not in OPERATORS:
            raise ValueError(f"unsupported operator: {self.operator!r}")

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_binary(self)


@dataclass(frozen=True, slots=True)
class ParenExpression(Expression):
    operand: Expression

    def accept(self, visitor: ExpressionVisitor) -> Any:
        return visitor.visit_paren(self)
