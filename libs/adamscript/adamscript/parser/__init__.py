"""AdamScript parser subpackage (Layer 2 -- depends on core, diagnostics)."""

from adamscript.parser.ast_nodes import (
    BinaryExpression,
    BinaryOperator,
    Expression,
    ExpressionStatement,
    IdentifierExpression,
    Node,
    NumericLiteralExpression,
    Program,
    Statement,
)
from adamscript.parser.dump import AstDumpError, from_dict, from_json, to_dict, to_json, validate_dump
from adamscript.parser.errors import InternalParserError, ParseError
from adamscript.parser.lexer import Lexer, tokenize
from adamscript.parser.parser import Parser, parse
from adamscript.parser.tokens import Token, TokenKind

__all__ = [
    "TokenKind",
    "Token",
    "Lexer",
    "tokenize",
    "Program",
    "ExpressionStatement",
    "BinaryExpression",
    "BinaryOperator",
    "NumericLiteralExpression",
    "IdentifierExpression",
    "Expression",
    "Statement",
    "Node",
    "Parser",
    "parse",
    "ParseError",
    "InternalParserError",
    "to_dict",
    "to_json",
    "from_dict",
    "from_json",
    "validate_dump",
    "AstDumpError",
]
