"""Parse error types for the AdamScript parser."""

from __future__ import annotations

from adamscript.parser.tokens import Token


class ParseError(Exception):
    """Syntax error at a single offending token.

    The message is always ``Unexpected token '<lexeme>' at position <N>.``
    where ``N`` is the byte offset of the token.
    """

    def __init__(self, lexeme: str, position: int) -> None:
        super().__init__(f"Unexpected token '{lexeme}' at position {position}.")
        self.lexeme = lexeme
        self.position = position

    @classmethod
    def unexpected(cls, token: Token) -> ParseError:
        return cls(token.lexeme, token.position)


class InternalParserError(RuntimeError):
    """
    A violated front-end invariant (a bug), not a user mistake.
    User mistakes are always reported as ParseError.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    def format(self) -> str:
        if self.position is not None:
            return f"internal parser error at position {self.position}: {self.message}"
        return f"internal parser error: {self.message}"
