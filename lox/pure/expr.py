"""Lox expression syntax tree.

There are exactly four node kinds: Literal, Grouping, Unary and Binary. Nodes are frozen, so once the parser has built a
tree it can only be read. A node owns its children; trees never share subtrees.

Algorithms over the tree (printing, evaluating) are written as ExprVisitor subclasses. Calling node.accept(visitor)
forwards to the visit_* method for that node's kind and returns whatever the visitor returns, so each visitor picks its
own result type and nodes never need to know which visitors exist.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from lox.pure.tokens import Token, TokenType


class Expr(ABC):
    """Superclass of every expression node."""

    @abstractmethod
    def accept(self, visitor):
        """Dispatches to the visit_* method of visitor that handles this node kind."""

    def display(self, indents=0):
        """Recursively displays the tree in a readable, indented format. Printed by sessions started with --tokens.

        Format:
        <Expr>(<field>=<value>, nodes=[
            <Expr>(...),
            ...
        ])
        """
        children = self.children()
        description = self._describe()
        result = f"{'    ' * indents}{type(self).__name__}({description}"
        if children:
            result += ", nodes=[" if description else "nodes=["
            for node in children:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def children(self):
        return []

    def _describe(self):
        return ""


@dataclass(frozen=True)
class Literal(Expr):
    """A literal value straight from a token: NUMBER and STRING carry their text in value, TRUE, FALSE and NIL carry
    nothing. type is ERROR for the placeholder the parser substitutes for a missing primary.
    """
    type: TokenType
    value: Optional[str] = None

    def accept(self, visitor):
        return visitor.visit_literal(self)

    def _describe(self):
        return f"{self.type.name}" if self.value is None else f"{self.type.name} {self.value!r}"


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr

    def accept(self, visitor):
        return visitor.visit_grouping(self)

    def children(self):
        return [self.expression]


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr

    def accept(self, visitor):
        return visitor.visit_unary(self)

    def children(self):
        return [self.right]

    def _describe(self):
        return f"'{self.operator.lexeme}'"


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor):
        return visitor.visit_binary(self)

    def children(self):
        return [self.left, self.right]

    def _describe(self):
        return f"'{self.operator.lexeme}'"


class ExprVisitor(ABC):
    """An algorithm over expression trees. Subclasses must handle every node kind and must not mutate nodes."""

    @abstractmethod
    def visit_literal(self, expr):
        ...

    @abstractmethod
    def visit_grouping(self, expr):
        ...

    @abstractmethod
    def visit_unary(self, expr):
        ...

    @abstractmethod
    def visit_binary(self, expr):
        ...
