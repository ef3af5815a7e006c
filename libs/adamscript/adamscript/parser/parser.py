"""Recursive-descent parser for AdamScript source code.

Grammar (left-associative, two precedence tiers)::

    Statement    := Expression
    AdditiveExpr := MultExpr ( ('+' | '-') MultExpr )*
    MultExpr     := PrimaryExpr ( ('*' | '/') PrimaryExpr )*
    PrimaryExpr  := NumericLiteral | Identifier | '(' AdditiveExpr ')'

Every primary expression, including a closed parenthesized group, must be
followed by an operator, ``)`` or end of input.  Anything else is reported at
that token, so a missing operator surfaces where it is missing rather than at
some later point.  The first error ends the parse.
"""

from __future__ import annotations

import logging
import math

from adamscript.core.expressions import (
    BinaryExpression,
    BinaryOperator,
    Expression,
    IdentifierExpression,
    NumericLiteralExpression,
)
from adamscript.diagnostics.collector import DiagnosticCollector
from adamscript.diagnostics.location import SourceLocation
from adamscript.parser.ast_nodes import ExpressionStatement, Program, Statement
from adamscript.parser.errors import InternalParserError, ParseError
from adamscript.parser.lexer import Lexer
from adamscript.parser.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

# Tokens allowed immediately after a primary expression.
_EXPRESSION_FOLLOWERS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.STAR,
        TokenKind.SLASH,
        TokenKind.RPAREN,
        TokenKind.EOF,
    }
)


class Parser:
    """Recursive-descent parser for AdamScript programs."""

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise InternalParserError("token stream must end with an EOF token")
        self._tokens = tokens
        self._pos = 0

    # ------------------------------------------------------------------
    # Token stream helpers
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        """Return the current token without consuming it."""
        return self._tokens[self._pos]

    def _at_end(self) -> bool:
        return self._peek().kind == TokenKind.EOF

    def _advance(self) -> Token:
        """Consume and return the current token."""
        tok = self._tokens[self._pos]
        if tok.kind != TokenKind.EOF:
            self._pos += 1
        return tok

    def _check(self, kind: TokenKind) -> bool:
        """Return True if the current token is *kind*."""
        return self._peek().kind == kind

    def _match(self, *kinds: TokenKind) -> Token | None:
        """If current token matches any of *kinds*, consume and return it."""
        for kind in kinds:
            if self._check(kind):
                return self._advance()
        return None

    def _expect(self, kind: TokenKind) -> Token:
        """Consume a token of *kind* or fail at whatever token is there."""
        tok = self._peek()
        if tok.kind == kind:
            return self._advance()
        raise ParseError.unexpected(tok)

    def _expect_follower(self) -> None:
        """Fail unless the current token may follow a primary expression."""
        tok = self._peek()
        if tok.kind not in _EXPRESSION_FOLLOWERS:
            raise ParseError.unexpected(tok)

    # ------------------------------------------------------------------
    # Top-level program parsing
    # ------------------------------------------------------------------

    def parse_program(self) -> tuple[Program, ParseError | None]:
        """Parse statements until end of input or the first error.

        Returns the program built so far together with the error, if any.
        """
        stmts: list[Statement] = []
        error: ParseError | None = None
        while not self._at_end():
            try:
                stmts.append(self.parse_statement())
            except ParseError as exc:
                logger.debug("parse failed after %d statement(s): %s", len(stmts), exc)
                error = exc
                break
        return Program(statements=tuple(stmts)), error

    def parse_statement(self) -> Statement:
        """Parse ``Statement := Expression``."""
        position = self._peek().position
        expr = self.parse_expression()
        return ExpressionStatement(expression=expr, position=position)

    # ------------------------------------------------------------------
    # Expression parsing (precedence climbing)
    # ------------------------------------------------------------------

    def parse_expression(self) -> Expression:
        """Parse an expression with operator precedence."""
        return self._parse_additive()

    def _parse_additive(self) -> Expression:
        """Left-associative ``+`` and ``-``."""
        left = self._parse_multiplicative()
        while True:
            tok = self._match(TokenKind.PLUS, TokenKind.MINUS)
            if tok is None:
                break
            right = self._parse_multiplicative()
            left = self._binary(left, tok, right)
        return left

    def _parse_multiplicative(self) -> Expression:
        """Left-associative ``*`` and ``/``."""
        left = self._parse_primary()
        while True:
            tok = self._match(TokenKind.STAR, TokenKind.SLASH)
            if tok is None:
                break
            right = self._parse_primary()
            left = self._binary(left, tok, right)
        return left

    def _parse_primary(self) -> Expression:
        """Parse a primary expression: literal, identifier, or parenthesized."""
        tok = self._peek()
        expr: Expression

        if tok.kind == TokenKind.NUMERIC_LITERAL:
            self._advance()
            expr = NumericLiteralExpression(value=self._to_float(tok), position=tok.position)
        elif tok.kind == TokenKind.IDENTIFIER:
            self._advance()
            expr = IdentifierExpression(symbol=tok.lexeme, position=tok.position)
        elif tok.kind == TokenKind.LPAREN:
            self._advance()
            expr = self.parse_expression()
            self._expect(TokenKind.RPAREN)
        else:
            raise ParseError.unexpected(tok)

        self._expect_follower()
        return expr

    # ------------------------------------------------------------------
    # Node construction
    # ------------------------------------------------------------------

    @staticmethod
    def _binary(left: Expression, tok: Token, right: Expression) -> BinaryExpression:
        operator = BinaryOperator.from_lexeme(tok.lexeme)
        if operator is None:
            raise InternalParserError(f"not a binary operator: {tok.lexeme!r}", tok.position)
        return BinaryExpression(left=left, operator=operator, right=right, position=tok.position)

    @staticmethod
    def _to_float(tok: Token) -> float:
        try:
            value = float(tok.lexeme)
        except ValueError as exc:
            raise InternalParserError(
                f"numeric literal {tok.lexeme!r} is not a decimal number", tok.position
            ) from exc
        if math.isinf(value):
            raise InternalParserError(
                f"numeric literal of {len(tok.lexeme)} digits is out of range", tok.position
            )
        return value


# ------------------------------------------------------------------
# Convenience function
# ------------------------------------------------------------------


def parse(
    source: str,
    filename: str = "<string>",
    diagnostics: DiagnosticCollector | None = None,
) -> tuple[Program, ParseError | None]:
    """Parse AdamScript source code.

    Returns:
        A ``(program, error)`` tuple.  ``error`` is None on success; otherwise
        ``program`` holds every statement parsed before the failing one.
        When *diagnostics* is given, the error is also recorded there with
        its resolved source location.
    """
    tokens = Lexer(source).tokenize()
    program, error = Parser(tokens).parse_program()
    if error is not None and diagnostics is not None:
        diagnostics.error(str(error), SourceLocation.from_offset(source, error.position, filename))
    logger.debug("parsed %d statement(s) from %s", len(program.statements), filename)
    return program, error
