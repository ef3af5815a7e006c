"""Expression AST nodes for AdamScript."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class BinaryOperator(Enum):
    """The four arithmetic operators, keyed by their source spelling."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_lexeme(cls, lexeme: str) -> BinaryOperator | None:
        """Look up an operator by its source-level spelling."""
        for member in cls:
            if member.value == lexeme:
                return member
        return None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumericLiteralExpression:
    """Numeric literal: 42, 0, 1000000. Always held as a float."""

    value: float
    position: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class IdentifierExpression:
    """Identifier reference."""

    symbol: str
    position: int | None = field(default=None, compare=False)


@dataclass(frozen=True)
class BinaryExpression:
    """Binary operation: left op right. ``position`` is that of the operator."""

    left: Expression
    operator: BinaryOperator
    right: Expression
    position: int | None = field(default=None, compare=False)


# Closed set of expression variants the parser can produce.
Expression = Union[BinaryExpression, NumericLiteralExpression, IdentifierExpression]
