"""
Formatting for CallChain tokens and AST nodes.
"""
from __future__ import annotations

from .ast_nodes import ASTNode, StringLiteral, Identifier, CallExpression, Program
from .tokens import Token


class Printer:
    """Formats AST nodes back into canonical CallChain source."""

    def __init__(self, indent_width=2):
        self._indent_char = " " * indent_width
        self._handlers = {
            StringLiteral: self._pformat_string,
            Identifier: self._pformat_identifier,
            CallExpression: self._pformat_call,
            Program: self._pformat_program,
        }

    def pformat(self, node) -> str:
        """Public entry point to format a node."""
        handler = self._handlers.get(type(node))
        if handler is None:
            raise TypeError(f"Cannot format {type(node).__name__}")
        return handler(node)

    def _pformat_string(self, node: StringLiteral) -> str:
        return f'"{node.value}"'

    def _pformat_identifier(self, node: Identifier) -> str:
        parts = []
        while isinstance(node, Identifier) and node.property is not None:
            parts.append(node.name)
            node = node.property
        parts.append(node.name if isinstance(node, Identifier) else self.pformat(node))
        return ".".join(parts)

    def _pformat_call(self, node: CallExpression) -> str:
        parts = [node.name or ""]
        for link in node.chain():
            args = " ".join(self.pformat(p) for p in link.params)
            parts.append(f"({args})")
        return "".join(parts)

    def _pformat_program(self, node: Program) -> str:
        return " ".join(self.pformat(stmt) for stmt in node.body)

    # -- debugging dumps --------------------------------------------------

    def format_tree(self, node, level: int = 0) -> str:
        """Indented, one-node-per-line dump used by the CLI."""
        pad = self._indent_char * level
        if isinstance(node, Program):
            lines = [f"{pad}Program"]
            lines.extend(self.format_tree(stmt, level + 1) for stmt in node.body)
            return "\n".join(lines)
        if isinstance(node, StringLiteral):
            return f"{pad}StringLiteral {node.value!r}"
        if isinstance(node, Identifier):
            head = f"{pad}Identifier {node.name}"
            if node.property is None:
                return head
            return head + "\n" + self.format_tree(node.property, level + 1)
        if isinstance(node, CallExpression):
            label = node.name if node.name is not None else "<chained>"
            lines = [f"{pad}CallExpression {label}"]
            lines.extend(self.format_tree(p, level + 1) for p in node.params)
            if node.child is not None:
                lines.append(self.format_tree(node.child, level + 1))
            return "\n".join(lines)
        raise TypeError(f"Cannot format {type(node).__name__}")


def to_source(body: list[ASTNode]) -> str:
    """Render a statement list as source, one space between statements."""
    return Printer().pformat(Program(body=list(body)))


def format_tokens(tokens: list[Token]) -> str:
    return "\n".join(f"{tok.type.name:<10} {tok.value!r}" for tok in tokens)
