"""Lexer for the CallChain DSL — tokenizes source into a list of Tokens."""
from __future__ import annotations
import logging

from .tokens import Token, TokenType, CALL_CHARS, PROPERTY_CHARS

logger = logging.getLogger(__name__)


class LexerError(Exception):
    def __init__(self, message: str, offset: int):
        super().__init__(f"[callchain @{offset}] Lexer error: {message}")
        self.offset = offset


class UnterminatedString(LexerError):
    """A string literal ran to the end of the source without a closing quote."""


def is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.tokens: list[Token] = []

    @property
    def current(self) -> str:
        if self.pos >= len(self.source):
            return "\0"
        return self.source[self.pos]

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def advance(self) -> str:
        ch = self.current
        self.pos += 1
        return ch

    def read_string(self) -> str:
        """Read a double-quoted string literal. No escape sequences."""
        start = self.pos
        self.advance()  # skip opening quote
        chars = []
        while not self.at_end() and self.current != '"':
            chars.append(self.advance())
        if self.at_end():
            raise UnterminatedString("Unterminated string literal", start)
        self.advance()  # skip closing quote
        return "".join(chars)

    def read_identifier(self) -> str:
        """Read a run of ASCII letters."""
        start = self.pos
        while not self.at_end() and is_ascii_letter(self.current):
            self.advance()
        return self.source[start : self.pos]

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source into a list of Tokens."""
        self.tokens = []

        while not self.at_end():
            ch = self.current

            if ch in CALL_CHARS:
                self.advance()
                self.tokens.append(Token(TokenType.CALL, ch))
                continue

            if ch in PROPERTY_CHARS:
                self.advance()
                self.tokens.append(Token(TokenType.PROPERTY, ch))
                continue

            if ch == '"':
                self.tokens.append(Token(TokenType.STRING, self.read_string()))
                continue

            if is_ascii_letter(ch):
                self.tokens.append(Token(TokenType.IDENTIFIER, self.read_identifier()))
                continue

            # whitespace, digits, ';' and anything else
            self.advance()

        logger.debug("lexed %d token(s) from %d char(s)", len(self.tokens), len(self.source))
        return self.tokens


def tokenize(source: str) -> list[Token]:
    return Lexer(source).tokenize()
