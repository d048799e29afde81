"""AST node definitions for the CallChain DSL."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class StringLiteral:
    value: str = ""


@dataclass(frozen=True)
class Identifier:
    """A name, optionally followed by a property access on the next node.

    `a.b`, `a[b` and `a]b` all parse to the same shape.
    """
    name: str = ""
    property: Optional[ASTNode] = None


@dataclass(frozen=True)
class CallExpression:
    """`name(params...)`, optionally chained.

    `child` is invoked against this call's return value, so `f(a)(b)` is a
    call to `f` whose child is an unnamed call with params `[b]`. Only the
    outermost link has a name.
    """
    name: Optional[str] = None
    params: list[ASTNode] = field(default_factory=list)
    child: Optional[CallExpression] = None

    def chain(self) -> list[CallExpression]:
        """This call followed by every chained link, outermost first."""
        links = []
        node = self
        while node is not None:
            links.append(node)
            node = node.child
        return links


ASTNode = Union[StringLiteral, Identifier, CallExpression]


@dataclass(frozen=True)
class Program:
    """Root node: the ordered top-level statements."""
    body: list[ASTNode] = field(default_factory=list)
