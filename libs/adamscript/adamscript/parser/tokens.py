"""Token definitions for the AdamScript lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """All token types recognized by the AdamScript lexer."""

    EOF = auto()

    # Literals
    NUMERIC_LITERAL = auto()
    STRING_LITERAL = auto()
    IDENTIFIER = auto()

    # Keywords
    LET = auto()
    CONST = auto()

    # Operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # /
    EQUALS = auto()  # =

    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    SEMICOLON = auto()  # ;

    UNKNOWN = auto()


# Keyword string -> TokenKind mapping.
# Identifiers are checked against this table after the whole word is scanned.
KEYWORDS: dict[str, TokenKind] = {
    "let": TokenKind.LET,
    "const": TokenKind.CONST,
}


@dataclass(frozen=True)
class Token:
    """A single token produced by the AdamScript lexer.

    ``position`` is the byte offset (UTF-8) of the token's first character.
    """

    kind: TokenKind
    lexeme: str
    position: int
