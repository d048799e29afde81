"""Recursive descent parser for the CallChain DSL."""
from __future__ import annotations
import logging
from typing import Optional

from .tokens import Token, TokenType
from .ast_nodes import ASTNode, StringLiteral, Identifier, CallExpression, Program

logger = logging.getLogger(__name__)


class ParseError(Exception):
    def __init__(self, message: str, index: int):
        super().__init__(f"[callchain #{index}] Parse error: {message}")
        self.index = index


class UnterminatedCall(ParseError):
    """A call's argument list reached the end of input without a ')'."""


class Parser:
    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    # ================================================
    # Utilities
    # ================================================

    @property
    def current(self) -> Optional[Token]:
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos]

    def advance(self) -> Optional[Token]:
        tok = self.current
        self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def check_call(self, value: str) -> bool:
        tok = self.current
        return tok is not None and tok.is_call(value)

    def check_property(self) -> bool:
        tok = self.current
        return tok is not None and tok.type == TokenType.PROPERTY

    # ================================================
    # Top-level
    # ================================================

    def parse(self) -> Program:
        """Parse the entire token list."""
        body: list[ASTNode] = []
        while not self.at_end():
            node = self.walk()
            if node is not None:
                body.append(node)
        logger.debug("parsed %d statement(s) from %d token(s)", len(body), len(self.tokens))
        return Program(body=body)

    def walk(self) -> Optional[ASTNode]:
        """Parse one node at the cursor. Unrecognised tokens are skipped."""
        tok = self.advance()
        if tok is None:
            return None

        if tok.type == TokenType.STRING:
            return StringLiteral(value=tok.value)

        if tok.type == TokenType.IDENTIFIER:
            return self.parse_identifier_chain(tok.value)

        return None

    def parse_identifier_chain(self, name: str) -> Optional[ASTNode]:
        """Parse `name` plus any `.target` accesses, cursor just past `name`."""
        names = [name]
        while self.check_property():
            self.advance()
            target = self.current
            if target is None or target.type != TokenType.IDENTIFIER:
                # string literal, skipped token or end of input
                node = self.walk()
                break
            self.advance()
            names.append(target.value)
        else:
            last = names.pop()
            if self.check_call("("):
                node = self.parse_call_chain(last)
            else:
                node = Identifier(name=last)

        for owner in reversed(names):
            node = Identifier(name=owner, property=node)
        return node

    def parse_call_chain(self, name: Optional[str]) -> CallExpression:
        """Parse `(args)` at the cursor, plus any `(args)` links that follow."""
        links: list[list[ASTNode]] = []
        while True:
            open_index = self.pos
            self.advance()  # skip '('
            params: list[ASTNode] = []
            while not self.check_call(")"):
                if self.at_end():
                    raise UnterminatedCall("Unterminated call argument list", open_index)
                node = self.walk()
                if node is not None:
                    params.append(node)
            self.advance()  # skip ')'
            links.append(params)
            if not self.check_call("("):
                break

        child = None
        for params in reversed(links[1:]):
            child = CallExpression(name=None, params=params, child=child)
        return CallExpression(name=name, params=links[0], child=child)


def parse(tokens: list[Token]) -> list[ASTNode]:
    return Parser(tokens).parse().body
