"""Lexer (tokenizer) for AdamScript source code."""

from __future__ import annotations

import logging

from adamscript.parser.tokens import KEYWORDS, Token, TokenKind

logger = logging.getLogger(__name__)

_WHITESPACE = frozenset(" \t\n\r")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


class Lexer:
    """Tokenize AdamScript source into a flat token stream.

    The lexer never fails: characters it does not recognize, and string
    literals left open at end of input, come out as ``UNKNOWN`` tokens so the
    parser can report them at their exact position.  Positions are byte
    offsets into the UTF-8 encoding of the source.
    """

    # Single-character tokens that need no lookahead.
    _SINGLE_CHAR: dict[str, TokenKind] = {
        "+": TokenKind.PLUS,
        "-": TokenKind.MINUS,
        "*": TokenKind.STAR,
        "/": TokenKind.SLASH,
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        "=": TokenKind.EQUALS,
        ";": TokenKind.SEMICOLON,
    }

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0  # index into self._source
        self._offset = 0  # byte offset of self._pos

    # ------------------------------------------------------------------
    # Helper methods
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        """Return character at current position + offset, or '' at EOF."""
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        """Consume and return the current character, updating the byte offset."""
        ch = self._source[self._pos]
        self._pos += 1
        self._offset += 1 if ch < "\x80" else len(ch.encode("utf-8", "surrogatepass"))
        return ch

    def _at_end(self) -> bool:
        return self._pos >= len(self._source)

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _scan_string(self, begin: int, position: int) -> Token:
        """Scan a double-quoted string literal. Opening '"' already consumed."""
        while not self._at_end():
            ch = self._advance()
            if ch == "\\":
                if not self._at_end():
                    self._advance()
                continue
            if ch == '"':
                lexeme = self._source[begin : self._pos]
                return Token(TokenKind.STRING_LITERAL, lexeme, position)
        # Reached EOF without closing quote
        return Token(TokenKind.UNKNOWN, self._source[begin:], position)

    def _scan_number(self, begin: int, position: int) -> Token:
        """Scan a run of decimal digits. First digit already consumed."""
        while _is_digit(self._peek()):
            self._advance()
        return Token(TokenKind.NUMERIC_LITERAL, self._source[begin : self._pos], position)

    def _scan_identifier_or_keyword(self, begin: int, position: int) -> Token:
        """Scan an identifier or keyword. First letter already consumed."""
        while True:
            ch = self._peek()
            if not (_is_letter(ch) or _is_digit(ch) or ch == "_"):
                break
            self._advance()
        lexeme = self._source[begin : self._pos]
        kind = KEYWORDS.get(lexeme, TokenKind.IDENTIFIER)
        return Token(kind, lexeme, position)

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source. Returns list ending with an EOF token."""
        tokens: list[Token] = []

        while not self._at_end():
            ch = self._peek()

            if ch in _WHITESPACE:
                self._advance()
                continue

            begin, position = self._pos, self._offset
            self._advance()

            if _is_digit(ch):
                tokens.append(self._scan_number(begin, position))
            elif _is_letter(ch):
                tokens.append(self._scan_identifier_or_keyword(begin, position))
            elif ch == '"':
                tokens.append(self._scan_string(begin, position))
            else:
                # A non-ASCII character is one UNKNOWN token spanning all of
                # its UTF-8 bytes, not one token per byte.
                kind = self._SINGLE_CHAR.get(ch, TokenKind.UNKNOWN)
                tokens.append(Token(kind, ch, position))

        tokens.append(Token(TokenKind.EOF, "", self._offset))
        logger.debug("tokenized %d bytes into %d tokens", self._offset, len(tokens))
        return tokens


def tokenize(source: str) -> list[Token]:
    """Tokenize *source* with a fresh :class:`Lexer`."""
    return Lexer(source).tokenize()
