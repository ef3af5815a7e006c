"""AST node types for the AdamScript parser.

Expression nodes are defined in ``adamscript.core.expressions`` and re-exported
here for convenience.  This module adds statement- and program-level nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from adamscript.core.expressions import (
    BinaryExpression,
    BinaryOperator,
    Expression,
    IdentifierExpression,
    NumericLiteralExpression,
)

# Re-export expression nodes so consumers can import everything from
# ``adamscript.parser.ast_nodes``.
__all__ = [
    # Expression nodes (re-exported from core)
    "Expression",
    "BinaryOperator",
    "BinaryExpression",
    "NumericLiteralExpression",
    "IdentifierExpression",
    # Statement nodes
    "ExpressionStatement",
    "Statement",
    # Program node
    "Program",
    # Any node
    "Node",
]


# ---------------------------------------------------------------------------
# Statement nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExpressionStatement:
    """A statement consisting of a single expression."""

    expression: Expression
    position: int | None = field(default=None, compare=False)


# Union of all statement types the parser can produce.
Statement = Union[ExpressionStatement]


# ---------------------------------------------------------------------------
# Program node
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Program:
    """Top-level program: statements in source order."""

    statements: tuple[Statement, ...] = ()


# The five node variants, closed.
Node = Union[
    Program,
    ExpressionStatement,
    BinaryExpression,
    NumericLiteralExpression,
    IdentifierExpression,
]
