"""Tree-walking interpreter for the CallChain DSL."""
from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from .ast_nodes import ASTNode, StringLiteral, Identifier, CallExpression, Program
from .lexer import Lexer
from .parser import Parser

logger = logging.getLogger(__name__)


def lookup(container: Any, name: str) -> Any:
    """Resolve `name` on a scope value. Anything unresolvable is None.

    Mappings are indexed by key, any other object by attribute.
    """
    if container is None:
        return None
    if isinstance(container, Mapping):
        return container.get(name)
    return getattr(container, name, None)


class Interpreter:
    """Evaluates parsed statements against a host scope.

    The scope is never modified. Unbound names and calls on values that
    are not callable evaluate to None instead of raising; exceptions raised
    by host functions themselves propagate.
    """

    def __init__(self, scope: Any = None):
        self.scope = {} if scope is None else scope

    def run(self, source: str) -> None:
        """Tokenize, parse and execute a source string."""
        tokens = Lexer(source).tokenize()
        program = Parser(tokens).parse()
        self.execute_program(program)

    def execute_program(self, program: Program) -> None:
        for node in program.body:
            self.evaluate(node, self.scope)
        logger.debug("evaluated %d statement(s)", len(program.body))

    def evaluate(self, node: ASTNode, scope: Any,
                 invoked_fn: Optional[Callable] = None) -> Any:
        """Evaluate a node against `scope`.

        `invoked_fn` is the previous link's return value and is only
        meaningful for unnamed chain links.
        """
        if isinstance(node, StringLiteral):
            return node.value
        if isinstance(node, Identifier):
            return self._eval_identifier(node, scope)
        if isinstance(node, CallExpression):
            return self._eval_call(node, scope, invoked_fn)
        return None

    def _eval_identifier(self, node: Identifier, scope: Any) -> Any:
        # Each `.name` step re-targets the scope to the value found so far.
        while node.property is not None:
            scope = lookup(scope, node.name)
            if not isinstance(node.property, Identifier):
                return self.evaluate(node.property, scope)
            node = node.property
        return lookup(scope, node.name)

    def _eval_call(self, node: CallExpression, scope: Any,
                   invoked_fn: Optional[Callable]) -> None:
        for link in node.chain():
            args = [self.evaluate(param, scope) for param in link.params]
            fn = lookup(scope, link.name) if link.name is not None else invoked_fn
            invoked_fn = fn(*args) if callable(fn) else None
        # A call's own value is only seen by its chained link.
        return None


def evaluate(body: list[ASTNode], scope: Any) -> None:
    Interpreter(scope).execute_program(Program(body=list(body)))


def run(source: str, scope: Any) -> None:
    """Run the whole pipeline on `source` against `scope`."""
    Interpreter(scope).run(source)
