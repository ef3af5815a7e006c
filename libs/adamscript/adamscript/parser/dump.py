"""JSON dump of AdamScript syntax trees.

Each node becomes an object with a ``Kind`` discriminant plus its own fields::

    {"Kind": "BinaryExpression",
     "Left": {"Kind": "NumericLiteralExpression", "Value": 1},
     "Operator": "+",
     "Right": {"Kind": "IdentifierExpression", "Symbol": "x"}}

Tools reading these dumps depend on the exact field names and on
``Operator`` being a one-character string, so the shape is fixed by
``schemas/ast.schema.json``.  Node positions are not part of the dump.
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema

from adamscript.core.expressions import (
    BinaryExpression,
    BinaryOperator,
    Expression,
    IdentifierExpression,
    NumericLiteralExpression,
)
from adamscript.parser.ast_nodes import ExpressionStatement, Node, Program, Statement
from adamscript.parser.errors import InternalParserError

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "ast.schema.json"

# Beyond this magnitude an integral float is written in exponent form anyway.
_EXPONENT_THRESHOLD = 1e21


class AstDumpError(ValueError):
    """Raised when a dump does not describe a valid syntax tree."""

    def __init__(self, message: str, path: tuple[Any, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} (at {' -> '.join(str(p) for p in self.path)})"
        return self.message


# ---------------------------------------------------------------------------
# Node -> dict
# ---------------------------------------------------------------------------


def _number(value: float) -> float | int:
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return int(value)
    return value


def to_dict(node: Node) -> dict[str, Any]:
    """Convert *node* (and its subtree) to the dump representation."""
    if isinstance(node, Program):
        return {
            "Kind": "Program",
            "Statements": [to_dict(stmt) for stmt in node.statements],
        }
    elif isinstance(node, ExpressionStatement):
        return {"Kind": "ExpressionStatement", "Expression": to_dict(node.expression)}
    elif isinstance(node, BinaryExpression):
        return {
            "Kind": "BinaryExpression",
            "Left": to_dict(node.left),
            "Operator": node.operator.value,
            "Right": to_dict(node.right),
        }
    elif isinstance(node, NumericLiteralExpression):
        return {"Kind": "NumericLiteralExpression", "Value": _number(node.value)}
    elif isinstance(node, IdentifierExpression):
        return {"Kind": "IdentifierExpression", "Symbol": node.symbol}
    else:
        raise InternalParserError(f"cannot dump node of type {type(node).__name__}")


def to_json(node: Node, indent: int | None = 2) -> str:
    """Render *node* as JSON text."""
    return json.dumps(to_dict(node), indent=indent, ensure_ascii=False)


# ---------------------------------------------------------------------------
# dict -> Node
# ---------------------------------------------------------------------------


@lru_cache(maxsize=None)
def _load_schema() -> dict[str, Any]:
    with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_dump(data: Any) -> None:
    """Check *data* against the AST dump schema.

    Raises:
        AstDumpError: If *data* is not a valid dump.
    """
    try:
        jsonschema.validate(instance=data, schema=_load_schema())
    except jsonschema.ValidationError as e:
        raise AstDumpError(f"Invalid AST dump: {e.message}", tuple(e.absolute_path)) from e


def _expression(data: dict[str, Any]) -> Expression:
    kind = data["Kind"]
    if kind == "BinaryExpression":
        operator = BinaryOperator.from_lexeme(data["Operator"])
        if operator is None:
            raise AstDumpError(f"Unknown operator: {data['Operator']!r}")
        return BinaryExpression(
            left=_expression(data["Left"]),
            operator=operator,
            right=_expression(data["Right"]),
        )
    if kind == "NumericLiteralExpression":
        return NumericLiteralExpression(value=float(data["Value"]))
    if kind == "IdentifierExpression":
        return IdentifierExpression(symbol=data["Symbol"])
    raise AstDumpError(f"Expected an expression, got {kind!r}")


def _statement(data: dict[str, Any]) -> Statement:
    if data["Kind"] != "ExpressionStatement":
        raise AstDumpError(f"Expected a statement, got {data['Kind']!r}")
    return ExpressionStatement(expression=_expression(data["Expression"]))


def from_dict(data: Any) -> Node:
    """Rebuild a syntax tree from its dump representation.

    The dump is validated first; a ``null`` statement list (as written by
    older front ends for an empty program) is read as no statements.
    """
    validate_dump(data)
    kind = data["Kind"]
    if kind == "Program":
        return Program(statements=tuple(_statement(s) for s in data["Statements"] or ()))
    if kind == "ExpressionStatement":
        return _statement(data)
    return _expression(data)


def from_json(text: str) -> Node:
    """Parse JSON *text* and rebuild the syntax tree it describes."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AstDumpError(f"Invalid JSON: {e}") from e
    return from_dict(data)
