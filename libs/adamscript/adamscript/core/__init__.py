"""AdamScript core subpackage (Layer 1 -- no internal dependencies)."""

from adamscript.core.expressions import (
    BinaryExpression,
    BinaryOperator,
    Expression,
    IdentifierExpression,
    NumericLiteralExpression,
)

__all__ = [
    "BinaryOperator",
    "Expression",
    "BinaryExpression",
    "NumericLiteralExpression",
    "IdentifierExpression",
]
